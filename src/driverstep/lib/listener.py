"""Step listeners and dispatch.

Listeners receive every record a wrapper creates. The dispatcher fans a
record out to all registered listeners; a listener that raises is logged
and skipped so the others still see the record.
"""

import logging
from typing import Iterable, List, Optional, Protocol, runtime_checkable

from driverstep.domains.step import Step
from driverstep.models.config_models import StepConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class StepListener(Protocol):
    """Protocol for receiving step records."""

    def on_step(self, step: Step) -> None: ...


class LoggingStepListener:
    """Writes each record's text rendering to a logger."""

    def __init__(self, level: int = logging.INFO, logger: Optional[logging.Logger] = None):
        self.level = level
        self.logger = logger or logging.getLogger("driverstep.steps")

    @classmethod
    def from_config(cls, config: StepConfig) -> "LoggingStepListener":
        return cls(level=config.log_level)

    def on_step(self, step: Step) -> None:
        self.logger.log(self.level, str(step))


class StepDispatcher:
    """Delivers records to registered listeners in registration order."""

    def __init__(self, listeners: Optional[Iterable[StepListener]] = None):
        self._listeners: List[StepListener] = list(listeners or [])

    @property
    def listeners(self) -> List[StepListener]:
        return self._listeners.copy()

    def register(self, listener: StepListener) -> None:
        """Add a listener; registering the same listener twice is a no-op."""
        if not isinstance(listener, StepListener):
            raise TypeError(f"Listener must define on_step(step), got {type(listener).__name__}")
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unregister(self, listener: StepListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, step: Step) -> None:
        """Hand a record to every listener."""
        for listener in self._listeners:
            try:
                listener.on_step(step)
            except Exception:
                logger.exception(
                    f"Listener {type(listener).__name__} failed on record {step.record_number}"
                )
