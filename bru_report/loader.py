"""Loading of run reports written by the collection runner."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from bru_report.models.report import RunReport

log = logging.getLogger(__name__)

_reports_adapter = TypeAdapter(list[RunReport])


class ReportLoadError(Exception):
    """Raised when a report file cannot be parsed."""


def load_run_reports(path: Path) -> Sequence[RunReport]:
    """Load run reports from a JSON file.

    The file holds either a single report object or an array of reports, one
    per iteration.

    Args:
        path: Path to the JSON report

    Returns:
        Reports in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ReportLoadError: If the file is not valid JSON or not shaped like a report

    """
    text = path.read_text(encoding="utf-8")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ReportLoadError(f"Invalid JSON in {path}: {exc}") from exc

    if isinstance(data, dict):
        data = [data]

    try:
        reports = _reports_adapter.validate_python(data)
    except ValidationError as exc:
        raise ReportLoadError(f"Invalid run report in {path}: {exc}") from exc

    log.debug("Loaded %d run report(s) from %s", len(reports), path)
    return reports
