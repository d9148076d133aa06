"""Listeners, recording and step tracking around instrumented drivers."""

from driverstep.lib.listener import LoggingStepListener, StepDispatcher, StepListener
from driverstep.lib.recorder import StepRecorder, get_recorder
from driverstep.lib.tracker import StepTracker

__all__ = [
    "LoggingStepListener",
    "StepDispatcher",
    "StepListener",
    "StepRecorder",
    "StepTracker",
    "get_recorder",
]
