"""driverstep - step records and readable locators for instrumented browser drivers."""

from driverstep.domains.locator import normalize_by_locator, normalize_element_locator
from driverstep.domains.step import Cmd, Step, StepType, TimingContext
from driverstep.lib import StepDispatcher, StepRecorder, StepTracker

__all__ = [
    "Cmd",
    "Step",
    "StepDispatcher",
    "StepRecorder",
    "StepTracker",
    "StepType",
    "TimingContext",
    "normalize_by_locator",
    "normalize_element_locator",
]

__version__ = "0.1.0"
