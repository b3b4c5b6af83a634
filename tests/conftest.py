"""
Shared fixtures for the test suite.

Upstream fakes are built on httpx.MockTransport so the real client code,
including JSON encoding and status handling, runs unchanged.
"""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from random_org_mcp.config import RandomOrgConfig

TEST_API_KEY = "test-api-key-0000"

INTEGER_RESULT: dict[str, Any] = {
    "random": {"data": [3, 7, 1, 9, 2], "completionTime": "t"},
    "bitsUsed": 20,
    "bitsLeft": 99980,
    "requestsLeft": 999,
    "advisoryDelay": 0,
}

USAGE_RESULT: dict[str, Any] = {
    "status": "running",
    "creationTime": "2026-01-01 00:00:00Z",
    "bitsLeft": 250000,
    "requestsLeft": 1000,
    "totalBits": 0,
    "totalRequests": 0,
}


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    """Async sleep replacement that records delays and advances a clock."""

    def __init__(self, clock: FakeClock | None = None) -> None:
        self.clock = clock
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        if self.clock is not None:
            self.clock.advance(seconds)


class FakeUpstream:
    """
    Scripted JSON-RPC upstream.

    Each entry in ``responses`` is either a dict (returned as the JSON-RPC
    ``result``), an ``httpx.Response``, an exception instance (raised), or a
    callable taking the request. The last entry repeats once the script runs out.
    """

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.requests: list[dict[str, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        index = min(len(self.requests), len(self.responses)) - 1
        response = self.responses[index]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        if callable(response):
            return response(request)
        return httpx.Response(
            200, json={"jsonrpc": "2.0", "result": response, "id": body["id"]}
        )

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


def error_response(code: int, message: str) -> Callable[[httpx.Request], httpx.Response]:
    def respond(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "error": {"code": code, "message": message},
                "id": body["id"],
            },
        )

    return respond


@pytest.fixture
def config() -> RandomOrgConfig:
    return RandomOrgConfig(api_key=TEST_API_KEY, retry_delay_ms=1000, max_retries=3)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def fake_upstream() -> type[FakeUpstream]:
    """Factory for scripted upstreams: ``fake_upstream(result_dict, ...)``."""
    return FakeUpstream


@pytest.fixture
def upstream_error() -> Callable[[int, str], Callable[[httpx.Request], httpx.Response]]:
    """Factory for JSON-RPC error responses: ``upstream_error(400, "bad key")``."""
    return error_response


@pytest.fixture
def integer_result() -> dict[str, Any]:
    return json.loads(json.dumps(INTEGER_RESULT))


@pytest.fixture
def usage_result() -> dict[str, Any]:
    return dict(USAGE_RESULT)


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def clocked_sleep(clock: FakeClock) -> RecordingSleep:
    """Sleep that advances ``clock`` by the requested duration."""
    return RecordingSleep(clock)
