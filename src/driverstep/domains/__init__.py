"""Bounded contexts for driverstep.

- Step Context: records of instrumented driver commands and their timing
- Locator Context: readable ``By.*`` expressions from driver-native text
"""

from driverstep.domains.step import (
    Cmd,
    RecordedFailure,
    Step,
    StepType,
    TimingContext,
    format_nano_time,
    get_default_timing_context,
)

from driverstep.domains.locator import (
    LocatorNormalizer,
    normalize_by_locator,
    normalize_element_locator,
)

__all__ = [
    # Step Context
    "Cmd",
    "RecordedFailure",
    "Step",
    "StepType",
    "TimingContext",
    "format_nano_time",
    "get_default_timing_context",
    # Locator Context
    "LocatorNormalizer",
    "normalize_by_locator",
    "normalize_element_locator",
]
