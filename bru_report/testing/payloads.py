"""Payload helpers for run reports in tests, in the runner's JSON format."""

from typing import Any


def assertion_result(
    *,
    uid: str = "G6I32DzMTgyB8TEubl4Sc",
    status: str = "pass",
    error: str | None = None,
) -> dict[str, Any]:
    """Create an assertion result payload checking the response status."""
    payload: dict[str, Any] = {
        "uid": uid,
        "lhsExpr": "res.status",
        "rhsExpr": "eq 200",
        "rhsOperand": "200",
        "operator": "eq",
        "status": status,
    }
    if error is not None:
        payload["error"] = error
    return payload


def scripted_test(
    *,
    description: str = "should ping pong",
    status: str = "pass",
    error: str | None = None,
    uid: str = "F03ndKqIyDQUigL-YxcRr",
) -> dict[str, Any]:
    """Create a test result payload."""
    payload: dict[str, Any] = {
        "description": description,
        "status": status,
        "uid": uid,
    }
    if error is not None:
        payload["error"] = error
    return payload


def result(
    *,
    filename: str = "ping.bru",
    suitename: str = "ping",
    method: str = "GET",
    url: str = "https://testbench-sanity.usebruno.com/ping",
    request_headers: dict[str, Any] | None = None,
    request_data: Any = None,
    response_headers: dict[str, Any] | None = None,
    response_data: Any = "pong",
    response_time: int = 466,
    runtime: float = 0.5,
    assertion_results: list[dict[str, Any]] | None = None,
    test_results: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Create a result payload for one executed request.

    Defaults to a passing GET request with one assertion and one test.
    """
    request: dict[str, Any] = {
        "method": method,
        "url": url,
        "headers": request_headers if request_headers is not None else {},
    }
    if request_data is not None:
        request["data"] = request_data

    return {
        "test": {"filename": filename},
        "request": request,
        "response": {
            "status": 200,
            "statusText": "OK",
            "headers": (
                response_headers
                if response_headers is not None
                else {"content-type": "text/html; charset=utf-8"}
            ),
            "data": response_data,
            "responseTime": response_time,
        },
        "error": None,
        "assertionResults": (
            assertion_results
            if assertion_results is not None
            else [assertion_result()]
        ),
        "testResults": test_results if test_results is not None else [scripted_test()],
        "runtime": runtime,
        "suitename": suitename,
    }


def summary(**counts: int) -> dict[str, int]:
    """Create a summary payload; unspecified counts are 0."""
    fields = (
        "totalRequests",
        "passedRequests",
        "failedRequests",
        "totalAssertions",
        "passedAssertions",
        "failedAssertions",
        "totalTests",
        "passedTests",
        "failedTests",
    )
    return {field: counts.get(field, 0) for field in fields}


def echo_run() -> dict[str, Any]:
    """Create a single-iteration run of five requests, the first one failing."""
    json_headers = {"content-type": "application/json"}
    return {
        "summary": summary(
            totalRequests=5,
            passedRequests=3,
            failedRequests=2,
            totalAssertions=5,
            passedAssertions=4,
            failedAssertions=1,
            totalTests=5,
            passedTests=1,
            failedTests=4,
        ),
        "results": [
            result(
                filename="echo/echo json.bru",
                suitename="echo/echo json",
                method="POST",
                url="https://testbench-sanity.usebruno.com/api/echo/json",
                request_headers=json_headers,
                request_data={"null": "null"},
                response_data={"null": "null"},
                response_time=1424,
                runtime=1.5,
                test_results=[
                    scripted_test(
                        description="should return secret message",
                        status="fail",
                        error=(
                            "expected { null: 'null' } to deeply equal "
                            "{ hello: 'secret world!' }"
                        ),
                    )
                ],
            ),
            result(
                filename="echo/echo json.bru",
                suitename="echo/echo json",
                method="POST",
                url="https://testbench-sanity.usebruno.com/api/echo/json",
                request_headers=json_headers,
                request_data={"hello": "bruno"},
                response_data={"hello": "bruno"},
                response_time=627,
                runtime=0.625,
                test_results=[scripted_test(description="should return json")],
            ),
            result(
                filename="echo/echo xml parsed.bru",
                suitename="echo/echo xml parsed",
                method="POST",
                url="https://testbench-sanity.usebruno.com/api/echo/xml-parsed",
                request_headers={"content-type": "text/xml"},
                request_data="<hello>\n  <world>bruno</world>\n</hello>",
                response_data={"hello": {"world": ["bruno"]}},
                response_time=380,
                runtime=0.375,
                test_results=[scripted_test(description="should return parsed xml")],
            ),
            result(
                filename="echo/echo plaintext.bru",
                suitename="echo/echo plaintext",
                method="POST",
                url="https://testbench-sanity.usebruno.com/api/echo/text",
                request_headers={"content-type": "text/plain"},
                request_data="hello",
                response_data="hello",
                response_time=324,
                runtime=0.25,
                test_results=[scripted_test(description="should return plain text")],
            ),
            result(runtime=0.5),
        ],
    }
