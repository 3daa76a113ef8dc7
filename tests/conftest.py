"""Shared test fixtures for apihandler.

Provides a controllable clock for cache expiry, a recording mock
transport for counting network calls, and automatic reset of the global
output manager. These fixtures are discovered by pytest and available to
all test modules without explicit imports.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

import httpx
import pytest

from apihandler.output import OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> Iterator[None]:
    """Install a quiet, colourless OutputManager for each test.

    Rich consoles cache ``sys.stderr`` at creation time; pytest's capture
    swaps that stream per test, so a fresh manager is installed each time.
    """
    set_output(OutputManager(no_color=True, quiet=True))
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced time source in seconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ---------------------------------------------------------------------------
# Recording transport
# ---------------------------------------------------------------------------


@dataclass
class RecordingServer:
    """Fake HTTP server that records every request it receives.

    ``responses`` maps URL strings to ``(status, body)`` tuples; unknown
    URLs answer 404. ``body_factory`` overrides the body so successive
    calls can return different content.
    """

    responses: dict[str, tuple[int, str]] = field(default_factory=dict)
    body_factory: Optional[Callable[[httpx.Request], str]] = None
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.responses.get(str(request.url), (404, "not found"))
        if self.body_factory is not None and 200 <= status < 300:
            body = self.body_factory(request)
        return httpx.Response(
            status,
            text=body,
            headers={"content-type": "text/plain; charset=utf-8"},
        )

    def calls(self, url: Optional[str] = None) -> int:
        if url is None:
            return len(self.requests)
        return sum(1 for r in self.requests if str(r.url) == url)

    def last_json(self) -> object:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def server() -> RecordingServer:
    return RecordingServer()


@pytest.fixture
def mock_transport(server: RecordingServer) -> httpx.MockTransport:
    return httpx.MockTransport(server)
