"""Models for run reports produced by the collection runner."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import Field, field_validator

from bru_report.models.base import Model


class Summary(Model):
    """Request, assertion and test counts of one iteration.

    Counts are displayed as given; ``passed + failed == total`` is not enforced.
    """

    total_requests: int = 0
    passed_requests: int = 0
    failed_requests: int = 0
    total_assertions: int = 0
    passed_assertions: int = 0
    failed_assertions: int = 0
    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0

    @field_validator("*", mode="before")
    @classmethod
    def _absent_count(cls, value: Any) -> Any:
        return 0 if value is None else value

    def __add__(self, other: "Summary") -> "Summary":
        if not isinstance(other, Summary):
            return NotImplemented
        return Summary(
            **{
                name: getattr(self, name) + getattr(other, name)
                for name in Summary.model_fields
            }
        )

    @property
    def failed_count(self) -> int:
        """Failed requests, assertions and tests combined."""
        return self.failed_requests + self.failed_assertions + self.failed_tests

    @property
    def has_failures(self) -> bool:
        """Whether any request, assertion or test failed."""
        return self.failed_count > 0


class AssertionResult(Model):
    """Outcome of a single declarative assertion."""

    uid: str | None = None
    lhs_expr: str | None = None
    rhs_expr: str | None = None
    rhs_operand: str | None = None
    operator: str | None = None
    status: str | bool | None = None
    error: Any = None


class TestResult(Model):
    """Outcome of a single scripted test."""

    __test__ = False

    uid: str | None = None
    description: str | None = None
    status: str | bool | None = None
    error: Any = None
    actual: Any = None
    expected: Any = None


class RequestFile(Model):
    """Request file the result was executed from."""

    filename: str | None = None


class ResultRequest(Model):
    """Request as it was sent."""

    method: str | None = None
    url: str | None = None
    headers: Mapping[str, Any] = Field(default_factory=dict)
    data: Any = None

    @field_validator("headers", mode="before")
    @classmethod
    def _absent_headers(cls, value: Any) -> Any:
        return {} if value is None else value


class ResultResponse(Model):
    """Response as it was received."""

    status: int | str | None = None
    status_text: str | None = None
    headers: Mapping[str, Any] = Field(default_factory=dict)
    data: Any = None
    response_time: int | float | None = None

    @field_validator("headers", mode="before")
    @classmethod
    def _absent_headers(cls, value: Any) -> Any:
        return {} if value is None else value


class Result(Model):
    """One executed request with its assertion and test outcomes."""

    test: RequestFile = Field(default_factory=RequestFile)
    request: ResultRequest = Field(default_factory=ResultRequest)
    response: ResultResponse = Field(default_factory=ResultResponse)
    error: Any = None
    assertion_results: Sequence[AssertionResult] = Field(default_factory=list)
    test_results: Sequence[TestResult] = Field(default_factory=list)
    runtime: int | float = Field(default=0, description="Runtime in seconds")
    suitename: str | None = None

    @field_validator("test", "request", "response", mode="before")
    @classmethod
    def _absent_object(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("assertion_results", "test_results", mode="before")
    @classmethod
    def _absent_results(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("runtime", mode="before")
    @classmethod
    def _absent_runtime(cls, value: Any) -> Any:
        return 0 if value is None else value


class RunReport(Model):
    """One iteration of a collection run."""

    iteration_index: int | float | None = None
    summary: Summary = Field(default_factory=Summary)
    results: Sequence[Result] = Field(default_factory=list)

    @field_validator("iteration_index", mode="before")
    @classmethod
    def _numeric_index(cls, value: Any) -> Any:
        # Anything but a number, numeric strings included, counts as absent
        if isinstance(value, int | float) and not isinstance(value, bool):
            return value
        return None

    @field_validator("summary", mode="before")
    @classmethod
    def _absent_summary(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("results", mode="before")
    @classmethod
    def _absent_results(cls, value: Any) -> Any:
        return [] if value is None else value
