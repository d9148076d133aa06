"""Timing context for step records.

Holds the record counter and the two timing markers that step records
read and write while being constructed:

- the *elapsed-step* marker, set when a step begins and read when it ends;
- the *since-last-step* marker, set when an action ends and read when the
  next action begins.

A context is plain mutable state without locking. Drive one context from
one thread; concurrent sessions each get their own context.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class TimingContext:
    """Record counter plus timing markers for one instrumented session.

    Args:
        wall_clock_ms: Callable returning wall-clock milliseconds since the
            epoch. Defaults to the system clock.
        monotonic_ns: Callable returning a monotonic nanosecond reading.
            Defaults to ``time.perf_counter_ns``.
        first_record_number: Number handed to the first record.
    """

    def __init__(
        self,
        wall_clock_ms: Optional[Clock] = None,
        monotonic_ns: Optional[Clock] = None,
        first_record_number: int = 1,
    ):
        self._wall_clock_ms = wall_clock_ms or _wall_clock_ms
        self._monotonic_ns = monotonic_ns or time.perf_counter_ns
        self._first_record_number = first_record_number
        self.reset()

    def reset(self) -> None:
        """Reinitialize the record counter and both markers."""
        now = self._monotonic_ns()
        self._next_record_number = self._first_record_number
        self._elapsed_step_marker = now
        self._since_last_step_marker = now
        logger.debug(f"Timing context reset, next record {self._next_record_number}")

    @property
    def peek_record_number(self) -> int:
        """Number the next record will receive."""
        return self._next_record_number

    def next_record_number(self) -> int:
        """Return the next record number and advance the counter."""
        number = self._next_record_number
        self._next_record_number += 1
        return number

    def now_ms(self) -> int:
        return self._wall_clock_ms()

    def now_ns(self) -> int:
        return self._monotonic_ns()

    def mark_step_begin(self) -> None:
        self._elapsed_step_marker = self._monotonic_ns()

    def mark_action_end(self) -> None:
        self._since_last_step_marker = self._monotonic_ns()

    def elapsed_since_step_begin(self) -> int:
        """Nanoseconds since the current step began."""
        return self._monotonic_ns() - self._elapsed_step_marker

    def elapsed_since_last_action(self) -> int:
        """Nanoseconds since the previous action ended."""
        return self._monotonic_ns() - self._since_last_step_marker

    def __repr__(self) -> str:
        return f"TimingContext(next_record_number={self._next_record_number})"


# Process-wide context for callers that do not manage their own
_default_context: Optional[TimingContext] = None


def get_default_timing_context() -> TimingContext:
    """Get the process-wide timing context.

    Returns:
        TimingContext instance
    """
    global _default_context
    if _default_context is None:
        _default_context = TimingContext()
    return _default_context
