"""Pytest configuration for the driverstep test suite."""

from __future__ import annotations

import pytest

from driverstep.domains.step import TimingContext


class FakeClock:
    """Deterministic clock; ``advance`` moves both readings forward."""

    def __init__(self, start_ns: int = 1_000_000_000, start_ms: int = 1_700_000_000_000):
        self.ns = start_ns
        self.ms = start_ms

    def monotonic_ns(self) -> int:
        return self.ns

    def wall_clock_ms(self) -> int:
        return self.ms

    def advance(self, nanos: int) -> None:
        self.ns += nanos
        self.ms += nanos // 1_000_000


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def timing(clock: FakeClock) -> TimingContext:
    return TimingContext(wall_clock_ms=clock.wall_clock_ms, monotonic_ns=clock.monotonic_ns)
