"""Aggregation of run report counts and runtimes."""

from collections.abc import Sequence
from functools import reduce
from itertools import chain
from operator import add

from bru_report.models.report import Result, RunReport, Summary
from bru_report.status import is_passing


def count_result_states(result: Result) -> tuple[int, int, int]:
    """Count test and assertion outcomes of a single result.

    Returns:
        ``(total, passed, failed)`` across test results and assertion results

    """
    statuses = [
        entry.status for entry in chain(result.test_results, result.assertion_results)
    ]
    failed = sum(1 for status in statuses if not is_passing(status))
    return len(statuses), len(statuses) - failed, failed


def has_result_passed(result: Result) -> bool:
    """Check that no test or assertion of the result failed."""
    return count_result_states(result)[2] == 0


def get_total_summary(reports: Sequence[RunReport]) -> Summary:
    """Sum the summaries of all reports field by field."""
    return reduce(add, (report.summary for report in reports), Summary())


def get_iteration_runtime(report: RunReport) -> float:
    """Sum the runtime in seconds of every result of one iteration."""
    return sum(result.runtime for result in report.results)


def get_total_runtime(reports: Sequence[RunReport]) -> float:
    """Sum the runtime in seconds of every iteration."""
    return sum(get_iteration_runtime(report) for report in reports)
