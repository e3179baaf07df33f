"""CLI entry point for rendering run reports as Markdown."""

import argparse
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from bru_report.config import ReportConfig
from bru_report.loader import ReportLoadError, load_run_reports
from bru_report.markdown.reporter import format_number, make_markdown_output
from bru_report.models.report import RunReport
from bru_report.stats import get_total_runtime, get_total_summary
from bru_report.status import status_indicator


class HeaderAttributeError(ValueError):
    """Raised when a header attribute is not in KEY=VALUE form."""


def log_results_summary(log: logging.Logger, reports: Sequence[RunReport]) -> None:
    """Log the combined counts of all iterations."""
    total = get_total_summary(reports)

    log.info("=" * 80)
    log.info("Run Summary (%d iteration(s)):", len(reports))
    log.info("=" * 80)
    log.info(
        "%s requests: %d passed, %d failed of %d",
        status_indicator(total.failed_requests == 0),
        total.passed_requests,
        total.failed_requests,
        total.total_requests,
    )
    log.info(
        "%s assertions: %d passed, %d failed of %d",
        status_indicator(total.failed_assertions == 0),
        total.passed_assertions,
        total.failed_assertions,
        total.total_assertions,
    )
    log.info(
        "%s tests: %d passed, %d failed of %d",
        status_indicator(total.failed_tests == 0),
        total.passed_tests,
        total.failed_tests,
        total.total_tests,
    )
    log.info("Runtime: %s s", format_number(get_total_runtime(reports)))


def parse_header_attributes(values: Sequence[str]) -> Mapping[str, str]:
    """Parse KEY=VALUE pairs, keeping their order.

    Raises:
        HeaderAttributeError: If a value has no ``=`` or an empty key

    """
    attributes: dict[str, str] = {}
    for value in values:
        key, separator, text = value.partition("=")
        if not separator or not key.strip():
            raise HeaderAttributeError(
                f"Invalid header attribute '{value}', expected KEY=VALUE"
            )
        attributes[key.strip()] = text.strip()
    return attributes


def run(
    input_path: Path,
    output_path: Path,
    header_values: Sequence[str] = (),
    title: str | None = None,
) -> int:
    """Render the report at input_path to output_path and return exit code."""
    log = logging.getLogger("bru_report")

    try:
        header_attributes = parse_header_attributes(header_values)
    except HeaderAttributeError as exc:
        log.error("%s", exc)
        return 2

    log.info("Loading run report: %s", input_path)
    try:
        reports = load_run_reports(input_path)
    except FileNotFoundError:
        log.error("Run report not found: %s", input_path)
        return 2
    except ReportLoadError as exc:
        log.error("Failed to load run report: %s", exc)
        return 2

    config = ReportConfig(header_attributes=header_attributes)
    if title is not None:
        config = config.model_copy(update={"title": title})

    make_markdown_output(reports, output_path, config=config)

    log_results_summary(log, reports)
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Render collection run reports as a Markdown document"
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to the JSON run report",
    )
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Path of the Markdown file to write",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Document title (default: Bru Run Report)",
    )
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra header attribute, may be repeated (e.g. Environment=staging)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = run(
        input_path=args.input,
        output_path=args.output,
        header_values=args.header,
        title=args.title,
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
