from __future__ import annotations

import pathlib
import sys
from typing import Callable, Optional

import pytest

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ecgview.core.models import SampleSeries  # noqa: E402


class ManualTimer:
    """TickTimer driven by an explicit clock, in milliseconds."""

    def __init__(self) -> None:
        self.now = 0
        self.entries: list[dict] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> dict:
        entry = {"due": self.now + int(delay_ms), "callback": callback, "state": "pending"}
        self.entries.append(entry)
        return entry

    def cancel(self, handle: dict) -> None:
        if handle["state"] == "pending":
            handle["state"] = "cancelled"

    @property
    def pending(self) -> list[dict]:
        return [e for e in self.entries if e["state"] == "pending"]

    def advance(self, ms: int) -> None:
        target = self.now + int(ms)
        while True:
            due = [e for e in self.pending if e["due"] <= target]
            if not due:
                break
            entry = min(due, key=lambda e: e["due"])
            self.now = entry["due"]
            entry["state"] = "fired"
            entry["callback"]()
        self.now = target


class FakeSource:
    def __init__(self, series: Optional[SampleSeries] = None, error: Optional[Exception] = None) -> None:
        self.series = series or SampleSeries()
        self.error = error
        self.calls = 0
        self.closed = False

    def fetch(self) -> SampleSeries:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.series

    def close(self) -> None:
        self.closed = True


class DeferredRunner:
    """Fetch runner that holds the callbacks until the test completes the fetch."""

    def __init__(self) -> None:
        self.requests: list[tuple[Callable, Callable]] = []

    def __call__(self, on_success, on_failure) -> None:
        self.requests.append((on_success, on_failure))

    def succeed(self, series: SampleSeries) -> None:
        on_success, _ = self.requests.pop(0)
        on_success(series)

    def fail(self, exc: Exception) -> None:
        _, on_failure = self.requests.pop(0)
        on_failure(exc)


@pytest.fixture
def manual_timer() -> ManualTimer:
    return ManualTimer()


@pytest.fixture
def deferred_runner() -> DeferredRunner:
    return DeferredRunner()


@pytest.fixture
def fake_source_factory():
    return FakeSource
