"""Shared fixtures for Ivko SDK tests."""

import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from ivko_sdk._internal.dispatch.models import Outcome, Request


class StubTransport:
    """Transport returning canned outcomes, keyed by request URL."""

    def __init__(self, respond: Callable[[Request], Outcome]) -> None:
        self._respond = respond
        self._lock = threading.Lock()
        self.requests: list[Request] = []
        self.closed = False

    def execute(self, request: Request) -> Outcome:
        with self._lock:
            self.requests.append(request)
        return self._respond(request)

    def close(self) -> None:
        self.closed = True


def make_outcome(
    status_code: int | None = 200,
    body: bytes | None = b"{}",
    error: Exception | None = None,
) -> Outcome:
    start = datetime(2024, 1, 1, tzinfo=UTC)
    if error is not None:
        return Outcome(error=error, ts_start=start, ts_end=start + timedelta(milliseconds=5))
    return Outcome(
        status_code=status_code,
        body=body,
        ts_start=start,
        ts_end=start + timedelta(milliseconds=12),
    )


@pytest.fixture(name="make_outcome")
def make_outcome_fixture():
    """Factory for timed Outcome instances."""
    return make_outcome


@pytest.fixture
def stub_transport():
    """Factory for StubTransport instances."""
    return StubTransport
