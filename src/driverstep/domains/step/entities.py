"""Step Domain Entities.

A ``Step`` records one observation point (before, after or failure) of one
instrumented driver command such as ``click()`` or ``getText()``. Wrappers
create a record before and after each command and pass it to listeners.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Union

from .serialization import FailurePayload, StepPayload
from .timing import TimingContext, get_default_timing_context
from .value_objects import Cmd, StepType, command_display_name, format_nano_time

logger = logging.getLogger(__name__)


class RecordedFailure(Exception):
    """Failure restored from an exported record.

    Keeps the class name of the original exception, since the original
    exception object itself does not survive serialization.
    """

    def __init__(self, message: str, error_type: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type or "Exception"

    def __repr__(self) -> str:
        return f"RecordedFailure(error_type={self.error_type!r}, message={self.message!r})"


@dataclass
class Step:
    """Record of one observation point of an instrumented command.

    Build records with ``Step.create()``, which assigns the record number
    and applies the timing side effects for the phase. The plain
    constructor and attribute assignment never touch timing state and are
    meant for restoring records (see ``from_dict``).

    Attributes:
        record_number: Unique, increasing number within the timing context
        step_number: Logical step shared by a before/after pair
        timestamp: Wall-clock milliseconds at construction
        time_since_last_action: Nanoseconds from the end of the previous
            action to the start of this one (BeforeAction, step > 1 only)
        time_elapsed_step: Nanoseconds from the before record to this one
            (AfterAction and AfterGather only)
        step_type: Observation point
        cmd: Instrumented command; a raw string when not a known Cmd
        param1: First stringified argument
        param2: Second stringified argument
        return_value: Stringified primitive return value
        return_object: Raw return object, never exported
        issue: Captured failure
    """

    record_number: Optional[int] = None
    step_number: Optional[int] = None
    timestamp: Optional[int] = None
    time_since_last_action: Optional[int] = None
    time_elapsed_step: Optional[int] = None
    step_type: Optional[StepType] = None
    cmd: Union[Cmd, str, None] = None
    param1: Optional[str] = None
    param2: Optional[str] = None
    return_value: Optional[str] = None
    return_object: Any = field(default=None, repr=False, compare=False)
    issue: Optional[BaseException] = None

    @classmethod
    def create(
        cls,
        step_type: Union[StepType, str],
        step_number: int,
        cmd: Union[Cmd, str, None],
        timing: Optional[TimingContext] = None,
    ) -> "Step":
        """Create a record and apply the timing side effects of its phase.

        Args:
            step_type: Observation point; strings are parsed case-insensitively
            step_number: Logical step index (1 for the first step)
            cmd: Instrumented command. Unrecognized values are kept and
                render as "unknown".
            timing: Timing context; defaults to the process-wide context

        Returns:
            The new record

        Raises:
            ValueError: If step_type is missing or unknown, or step_number
                is missing or negative
        """
        step_type = StepType.parse(step_type)
        if not isinstance(step_number, int) or isinstance(step_number, bool) or step_number < 0:
            raise ValueError(f"step_number must be a non-negative integer, got {step_number!r}")
        timing = timing or get_default_timing_context()

        step = cls(
            record_number=timing.next_record_number(),
            step_number=step_number,
            timestamp=timing.now_ms(),
            step_type=step_type,
            cmd=Cmd.parse(cmd) or cmd,
        )

        if step_type is StepType.BEFORE_ACTION:
            if step_number > 1:
                step.time_since_last_action = timing.elapsed_since_last_action()
            timing.mark_step_begin()
        elif step_type is StepType.AFTER_ACTION:
            timing.mark_action_end()
            step.time_elapsed_step = timing.elapsed_since_step_begin()
        elif step_type is StepType.BEFORE_GATHER:
            timing.mark_step_begin()
        elif step_type is StepType.AFTER_GATHER:
            step.time_elapsed_step = timing.elapsed_since_step_begin()

        logger.debug(f"Created record {step.record_number} ({step_type.value}) for step {step_number}")
        return step

    @property
    def command_name(self) -> str:
        """Dotted display name of the command, "unknown" if unrecognized."""
        return command_display_name(self.cmd)

    @property
    def returned(self) -> Optional[str]:
        """Text shown for the return value, if any."""
        if self.return_value is not None:
            return self.return_value
        if self.return_object is not None:
            return str(self.return_object)
        return None

    @property
    def issue_message(self) -> Optional[str]:
        if self.issue is None:
            return None
        return str(self.issue)

    def update(self, **values: Any) -> "Step":
        """Set attributes and return the record for chaining.

        Raises:
            ValueError: If a name is not a record attribute
        """
        known = {f.name for f in fields(self)}
        for key, value in values.items():
            if key not in known:
                raise ValueError(f"Unknown step attribute: {key}")
            setattr(self, key, value)
        return self

    def __str__(self) -> str:
        parts = []
        if self.step_number is not None:
            parts.append(f"stepno:{self.step_number}")
        if self.step_type is not None:
            parts.append(f"type:{self.step_type}")
        if self.timestamp is not None:
            parts.append(f"timestamp:{self.timestamp} ms")
        parts.append(f"cmd:{self.command_name}")
        if self.param1 is not None:
            parts.append(f"param1:{self.param1}")
        if self.param2 is not None:
            parts.append(f"param2:{self.param2}")
        returned = self.returned
        if returned is not None:
            parts.append(f"returned:{returned}")
        if self.time_since_last_action is not None:
            parts.append(f"since last step:{format_nano_time(self.time_since_last_action)}")
        if self.time_elapsed_step is not None:
            parts.append(f"executed in:{format_nano_time(self.time_elapsed_step)}")
        if self.issue is not None:
            parts.append(f"issue:{self.issue_message}")
        return ",".join(parts)

    def to_payload(self) -> StepPayload:
        """Build the exportable payload. ``return_object`` is left out."""
        issue = None
        if self.issue is not None:
            error_type = getattr(self.issue, "error_type", None) or type(self.issue).__name__
            issue = FailurePayload(type=error_type, message=self.issue_message)
        cmd = self.cmd.value if isinstance(self.cmd, Cmd) else self.cmd
        return StepPayload(
            record_number=self.record_number,
            step_number=self.step_number,
            timestamp=self.timestamp,
            time_since_last_action=self.time_since_last_action,
            time_elapsed_step=self.time_elapsed_step,
            type_of_log=self.step_type.value if self.step_type else None,
            cmd=cmd,
            cmd_name=self.command_name,
            param1=self.param1,
            param2=self.param2,
            return_value=self.return_value,
            issue=issue,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.to_payload().model_dump()

    @classmethod
    def from_payload(cls, payload: StepPayload) -> "Step":
        issue = None
        if payload.issue is not None:
            issue = RecordedFailure(payload.issue.message or "", error_type=payload.issue.type)
        return cls(
            record_number=payload.record_number,
            step_number=payload.step_number,
            timestamp=payload.timestamp,
            time_since_last_action=payload.time_since_last_action,
            time_elapsed_step=payload.time_elapsed_step,
            step_type=StepType.parse(payload.type_of_log) if payload.type_of_log else None,
            cmd=Cmd.parse(payload.cmd) or payload.cmd,
            param1=payload.param1,
            param2=payload.param2,
            return_value=payload.return_value,
            issue=issue,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Step":
        """Restore a record without touching any timing context."""
        return cls.from_payload(StepPayload.model_validate(data))
