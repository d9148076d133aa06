"""Step Domain - records of instrumented driver commands.

A wrapper around a browser-automation driver creates one ``Step`` before
and one after each command (or a failure record when the command raises)
and hands them to listeners.

Example usage:
    from driverstep.domains.step import Cmd, Step, StepType, TimingContext

    timing = TimingContext()
    before = Step.create(StepType.BEFORE_ACTION, 1, Cmd.CLICK, timing=timing)
    after = Step.create(StepType.AFTER_ACTION, 1, Cmd.CLICK, timing=timing)
    print(after)  # stepno:1,type:AfterAction,...,executed in:0 sec 0 ms
"""

# Value Objects
from .value_objects import (
    Cmd,
    StepType,
    UNKNOWN_COMMAND,
    command_display_name,
    format_nano_time,
)

# Timing
from .timing import (
    TimingContext,
    get_default_timing_context,
)

# Serialization
from .serialization import (
    FailurePayload,
    StepPayload,
)

# Entities
from .entities import (
    RecordedFailure,
    Step,
)

__all__ = [
    # Value Objects
    "Cmd",
    "StepType",
    "UNKNOWN_COMMAND",
    "command_display_name",
    "format_nano_time",
    # Timing
    "TimingContext",
    "get_default_timing_context",
    # Serialization
    "FailurePayload",
    "StepPayload",
    # Entities
    "RecordedFailure",
    "Step",
]
