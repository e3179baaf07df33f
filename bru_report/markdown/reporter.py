"""Markdown rendering of collection run reports."""

import json
import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from functools import partial
from pathlib import Path

from bru_report.config import ReportConfig
from bru_report.markdown.writer import MarkdownWriter, TextSink
from bru_report.models.report import Result, RunReport, Summary
from bru_report.stats import (
    count_result_states,
    get_iteration_runtime,
    get_total_runtime,
    get_total_summary,
    has_result_passed,
)
from bru_report.status import ICON_FAIL, ICON_PASS, status_indicator

log = logging.getLogger(__name__)

ABSENT = "∅"


def make_markdown_output(
    report: RunReport | Sequence[RunReport],
    output_path: Path,
    header_attributes: Mapping[str, str] | None = None,
    *,
    config: ReportConfig | None = None,
) -> None:
    """Render one or more run reports into a Markdown file.

    The file is closed on every exit path; a failed write propagates.
    """
    reports = [report] if isinstance(report, RunReport) else list(report)

    # newline="" keeps the configured line terminator as written
    with Path(output_path).open("w", encoding="utf-8", newline="") as stream:
        write_markdown_to(stream, reports, header_attributes, config=config)

    log.info("Wrote Markdown report (%d iteration(s)) to %s", len(reports), output_path)


def write_markdown_to(
    stream: TextSink,
    reports: Sequence[RunReport],
    header_attributes: Mapping[str, str] | None = None,
    *,
    config: ReportConfig | None = None,
    now: datetime | None = None,
) -> None:
    """Render run reports as a Markdown document into an open text sink.

    Args:
        stream: Sink receiving the document, written strictly in order
        reports: Iterations in display order
        header_attributes: Extra entries written after the date in the header
        config: Report configuration (defaults to ``ReportConfig()``)
        now: Render timestamp (defaults to the current UTC time)

    """
    config = config or ReportConfig()
    writer = MarkdownWriter(stream, newline=config.newline)
    rendered_at = now or datetime.now(timezone.utc)

    log.debug("Rendering %d run report(s)", len(reports))

    writer.h1(config.title)
    writer.quote(
        collect_header_attributes(
            {
                "Date": format_timestamp(rendered_at),
                **config.header_attributes,
                **(header_attributes or {}),
            }
        )
    )
    writer.h2("Summary")
    write_summary_table(writer, reports)
    writer.h2("Details")
    for report in reports:
        write_iteration_details(writer, report)


def collect_header_attributes(attributes: Mapping[str, str]) -> str:
    """Join attributes as ``**key:** value`` entries separated by ``|``.

    Example:
        >>> collect_header_attributes({"Environment": "Test", "Sandbox": "safe"})
        '**Environment:** Test | **Sandbox:** safe'

    """
    return " | ".join(f"**{key}:** {value}" for key, value in attributes.items())


def format_timestamp(moment: datetime) -> str:
    """Format a timestamp as UTC ISO-8601 with millisecond precision."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_number(value: int | float) -> str:
    """Format a number, dropping the fractional part of whole values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def write_summary_table(writer: MarkdownWriter, reports: Sequence[RunReport]) -> None:
    """Write the totals row and, for several iterations, one row per iteration."""
    total = get_total_summary(reports)

    writer.table_row(
        "Iteration", "Status", "Requests", "Assertions", "Tests", "Runtime"
    ).table_row(
        "---------", ":----:", "--------", "----------", "-----", "--------------"
    )
    _write_summary_row(writer, "*", total, get_total_runtime(reports))

    if len(reports) > 1:
        for report in reports:
            _write_summary_row(
                writer,
                _display(report.iteration_index),
                report.summary,
                get_iteration_runtime(report),
            )

    writer.single_line()


def _write_summary_row(
    writer: MarkdownWriter, label: str, summary: Summary, runtime: float
) -> None:
    writer.table_row(
        label,
        status_indicator(not summary.has_failures),
        _format_counts(
            summary.total_requests, summary.passed_requests, summary.failed_requests
        ),
        _format_counts(
            summary.total_assertions,
            summary.passed_assertions,
            summary.failed_assertions,
        ),
        _format_counts(summary.total_tests, summary.passed_tests, summary.failed_tests),
        f"{format_number(runtime)} s",
    )


def _format_counts(total: int, passed: int, failed: int) -> str:
    return f"**{total}** `{ICON_PASS} {passed} \\| {ICON_FAIL} {failed}`"


def write_iteration_details(writer: MarkdownWriter, report: RunReport) -> None:
    """Write the heading of one iteration and a collapsible section per result."""
    index = _display(report.iteration_index)
    suffix = f"# {index}" if index else ""
    writer.h3(f"{status_indicator(not report.summary.has_failures)} Iteration {suffix}")

    for result in report.results:
        total, passed, _ = count_result_states(result)
        title = (
            f"{status_indicator(has_result_passed(result))} "
            f"{_display(result.suitename)} - {passed}/{total} Passed"
        )
        writer.details(title, partial(write_result_content, result=result))


def write_result_content(writer: MarkdownWriter, result: Result) -> None:
    """Write request, response, assertion and test details of one result."""
    request = result.request
    response = result.response

    writer.table_row("Request", "Response").table_row("--", "--").table_row(
        _labelled("File", result.test.filename),
        _labelled("Response Code", response.status),
    ).table_row(
        _labelled("Request Method", request.method),
        _labelled("Response Time", response.response_time, " ms"),
    ).table_row(
        _labelled("Request URL", request.url),
        # runtime is in seconds despite the ms label
        _labelled("Test Duration", result.runtime, " ms"),
    ).break_line()

    writer.h4("Request Headers")
    _write_headers(writer, request.headers)
    writer.h4("Request Body")
    _write_body(writer, request.data)
    writer.h4("Response Headers")
    _write_headers(writer, response.headers)
    writer.h4("Response Body")
    _write_body(writer, response.data)

    writer.h4("Assertions").table_row(
        "Expression", "Operator", "Operand", "Status", "Error"
    ).table_row("----------", "--------", "-------", ":----:", "-----")
    for assertion in result.assertion_results:
        writer.table_row(
            _display(assertion.lhs_expr),
            _display(assertion.operator),
            _display(assertion.rhs_operand),
            status_indicator(assertion.status),
            _error(assertion.error),
        )
    writer.break_line()

    writer.h4("Tests").table_row("Description", "Status", "Error").table_row(
        "-----------", ":----:", "-----"
    )
    for test in result.test_results:
        writer.table_row(
            _display(test.description),
            status_indicator(test.status),
            _error(test.error),
        )
    writer.break_line()


def _write_headers(writer: MarkdownWriter, headers: Mapping[str, object]) -> None:
    if not headers:
        writer.quote(ABSENT)
        return

    writer.table_row("Header Name", "Header Value").table_row("--", "--")
    for name, value in headers.items():
        writer.table_row(name, _display(value))
    writer.break_line()


def _write_body(writer: MarkdownWriter, data: object) -> None:
    if data is None:
        writer.quote(ABSENT)
        return

    writer.code(None, _to_json(data)).break_line()


def _labelled(label: str, value: object, unit: str = "") -> str:
    text = _display(value)
    return f"**{label}**<br/>{text}{unit if text else ''}"


def _error(error: object) -> str:
    return "" if error is None else _to_json(error)


def _to_json(value: object) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def _display(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return ",".join(_display(item) for item in value)
    if isinstance(value, int | float):
        return format_number(value)
    return str(value)
