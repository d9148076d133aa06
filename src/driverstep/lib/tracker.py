"""Step tracking around arbitrary driver calls.

``StepTracker.run`` is the glue a driver wrapper uses: it numbers the
logical step, emits the before record, calls the operation and emits the
after record, or a failure record when the operation raises.
"""

import logging
from typing import Any, Callable, Optional, Tuple

from driverstep.domains.locator import LocatorNormalizer
from driverstep.domains.step import Cmd, Step, StepType, TimingContext, get_default_timing_context
from driverstep.lib.listener import StepDispatcher
from driverstep.models.config_models import StepConfig

logger = logging.getLogger(__name__)

_PRIMITIVES = (str, int, float, bool, bytes)


class StepTracker:
    """Wraps driver calls in before/after step records.

    Args:
        dispatcher: Receives every record. A new, empty dispatcher by default.
        timing: Timing context; the process-wide one by default
        config: Recording configuration
        normalizer: Renders locator and element arguments
    """

    def __init__(
        self,
        dispatcher: Optional[StepDispatcher] = None,
        timing: Optional[TimingContext] = None,
        config: Optional[StepConfig] = None,
        normalizer: Optional[LocatorNormalizer] = None,
    ):
        self.dispatcher = dispatcher or StepDispatcher()
        self.timing = timing or get_default_timing_context()
        self.config = config or StepConfig()
        self.normalizer = normalizer or LocatorNormalizer()
        self._step_number = 0

    @property
    def current_step_number(self) -> int:
        """Number of the most recent logical step (0 before the first)."""
        return self._step_number

    def next_step_number(self) -> int:
        self._step_number += 1
        return self._step_number

    def run(
        self,
        cmd: Cmd,
        func: Callable[..., Any],
        *args: Any,
        param1: Any = None,
        param2: Any = None,
        gather: bool = False,
        **kwargs: Any,
    ) -> Any:
        """Call ``func(*args, **kwargs)`` between two step records.

        Args:
            cmd: Command being instrumented
            func: The operation
            param1: First argument to show on the records
            param2: Second argument to show on the records
            gather: Record as a passive query (BeforeGather/AfterGather)
                rather than an action

        Returns:
            Whatever ``func`` returned

        Raises:
            Exception: Anything ``func`` raised, after a failure record was
                dispatched
        """
        before_type, after_type = _phases(gather)
        step_number = self.next_step_number()
        params = {
            "param1": self.render_argument(param1),
            "param2": self.render_argument(param2),
        }

        before = Step.create(before_type, step_number, cmd, timing=self.timing).update(**params)
        self.dispatcher.dispatch(before)

        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            failure = Step.create(StepType.FAILURE, step_number, cmd, timing=self.timing)
            failure.update(issue=exc, **params)
            logger.debug(f"Step {step_number} ({failure.command_name}) failed: {exc}")
            self.dispatcher.dispatch(failure)
            raise

        after = Step.create(after_type, step_number, cmd, timing=self.timing).update(**params)
        self._attach_return(after, result)
        self.dispatcher.dispatch(after)
        return result

    def render_argument(self, value: Any) -> Optional[str]:
        """Render an argument as record text.

        Locator objects and element handles become ``By.*`` expressions
        when locator normalization is enabled.
        """
        if value is None:
            return None
        if isinstance(value, _PRIMITIVES):
            return str(value)
        if not self.config.NORMALIZE_LOCATORS:
            return str(value)
        text = str(value)
        if text.startswith("By."):
            return self.normalizer.normalize_by_locator(text)
        return self.normalizer.normalize_element_locator(text)

    def _attach_return(self, step: Step, result: Any) -> None:
        if result is None:
            return
        if isinstance(result, _PRIMITIVES):
            step.return_value = str(result)
        elif self.config.CAPTURE_RETURN_OBJECTS:
            step.return_object = result
        else:
            step.return_value = self.render_argument(result)


def _phases(gather: bool) -> Tuple[StepType, StepType]:
    if gather:
        return StepType.BEFORE_GATHER, StepType.AFTER_GATHER
    return StepType.BEFORE_ACTION, StepType.AFTER_ACTION
