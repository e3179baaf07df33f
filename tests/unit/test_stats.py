"""Tests for report aggregation."""

from bru_report.models.report import Result, RunReport, Summary
from bru_report.stats import (
    count_result_states,
    get_iteration_runtime,
    get_total_runtime,
    get_total_summary,
    has_result_passed,
)
from bru_report.testing.factories import (
    ResultFactory,
    RunReportFactory,
    SummaryFactory,
)


class TestCountResultStates:
    """Tests for count_result_states function."""

    def test_counts_tests_and_assertions(self) -> None:
        """Counts across test results and assertion results."""
        result = Result.model_validate(
            {
                "testResults": [
                    {"status": "pass"},
                    {"status": "pass"},
                    {"status": "fail"},
                ],
                "assertionResults": [{"status": "pass"}, {"status": "fail"}],
            }
        )

        assert count_result_states(result) == (5, 3, 2)

    def test_absent_arrays_count_as_empty(self) -> None:
        """Missing, null and empty arrays give zero counts."""
        assert count_result_states(
            Result.model_validate({"testResults": None, "assertionResults": None})
        ) == (0, 0, 0)
        assert count_result_states(
            Result.model_validate({"testResults": [], "assertionResults": []})
        ) == (0, 0, 0)
        assert count_result_states(Result.model_validate({})) == (0, 0, 0)


def test_has_result_passed() -> None:
    """A result passes only without failing tests or assertions."""
    passing = ResultFactory.build()
    failing = Result.model_validate(
        {"testResults": [{"status": "pass"}], "assertionResults": [{"status": "fail"}]}
    )

    assert has_result_passed(passing)
    assert not has_result_passed(failing)
    assert has_result_passed(Result())


def test_get_total_summary_sums_fields() -> None:
    """Sums every field of every summary."""
    reports = [
        RunReportFactory.build(summary=Summary(total_requests=2, failed_tests=1)),
        RunReportFactory.build(summary=Summary(total_requests=3, passed_tests=4)),
    ]

    assert get_total_summary(reports) == Summary(
        total_requests=5, failed_tests=1, passed_tests=4
    )


def test_get_total_summary_is_order_independent() -> None:
    """Aggregation does not depend on report order."""
    reports = [RunReportFactory.build(summary=SummaryFactory.build()) for _ in range(4)]

    assert get_total_summary(reports) == get_total_summary(list(reversed(reports)))


def test_get_total_summary_of_nothing() -> None:
    """No reports give an all-zero summary."""
    assert get_total_summary([]) == Summary()


def test_runtimes() -> None:
    """Runtimes add up per iteration and across iterations."""
    first = RunReport(results=[ResultFactory.build(runtime=0.5)])
    second = RunReport(
        results=[ResultFactory.build(runtime=0.25), ResultFactory.build(runtime=1)]
    )

    assert get_iteration_runtime(first) == 0.5
    assert get_iteration_runtime(second) == 1.25
    assert get_total_runtime([first, second]) == 1.75
    assert get_total_runtime([]) == 0
