"""Recording storage and export.

Collects step records handed to it as a listener so they can be inspected
in-process or dumped to a JSON file.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from driverstep.domains.step import Step, StepType
from driverstep.models.config_models import StepConfig

logger = logging.getLogger(__name__)


class StepRecorder:
    """Listener that stores step records while recording is active."""

    def __init__(self, indent: int = 2):
        """Initialize the recorder.

        Args:
            indent: Indentation used by ``export_json``
        """
        self._steps: List[Step] = []
        self._is_recording: bool = False
        self._metadata: Dict[str, Any] = {}
        self.indent = indent

    @classmethod
    def from_config(cls, config: StepConfig) -> "StepRecorder":
        """Create a recorder using EXPORT_INDENT from the configuration."""
        return cls(indent=config.EXPORT_INDENT)

    @property
    def is_recording(self) -> bool:
        """Check if recording is active."""
        return self._is_recording

    def start_recording(self) -> None:
        """Start recording step records."""
        self._is_recording = True
        self._steps = []
        self._metadata = {
            "started_at": datetime.now().isoformat(),
        }
        logger.info("Recording started")

    def stop_recording(self) -> None:
        """Stop recording step records."""
        self._is_recording = False
        self._metadata["stopped_at"] = datetime.now().isoformat()
        logger.info(f"Recording stopped. {len(self._steps)} records captured.")

    def on_step(self, step: Step) -> None:
        """Store a record if recording is active."""
        if not self._is_recording:
            return
        self._steps.append(step)
        logger.debug(f"Recorded {step.step_type} for step {step.step_number}")

    def get_steps(self) -> List[Step]:
        """Get all recorded steps.

        Returns:
            List of recorded steps
        """
        return self._steps.copy()

    def get_failures(self) -> List[Step]:
        """Get the failure records."""
        return [s for s in self._steps if s.step_type is StepType.FAILURE]

    def get_metadata(self) -> Dict[str, Any]:
        """Get recording metadata.

        Returns:
            Recording metadata dictionary
        """
        return {
            **self._metadata,
            "record_count": len(self._steps),
            "step_count": len({s.step_number for s in self._steps}),
            "failure_count": len(self.get_failures()),
        }

    def clear(self) -> None:
        """Clear all recorded steps."""
        self._steps = []
        self._metadata = {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert recording to dictionary.

        Returns:
            Dictionary representation of the recording
        """
        return {
            "metadata": self.get_metadata(),
            "steps": [step.to_dict() for step in self._steps],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=self.indent)

    def export_json(self, path: Union[str, Path]) -> Path:
        """Write the recording to a JSON file.

        Args:
            path: Target file; parent directories are created

        Returns:
            The written path
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.info(f"Exported {len(self._steps)} records to {path}")
        return path

    @staticmethod
    def load_json(path: Union[str, Path]) -> List[Step]:
        """Read records back from a file written by ``export_json``.

        A bare JSON list of records is accepted as well.
        """
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        items = data.get("steps", []) if isinstance(data, dict) else data
        return [Step.from_dict(item) for item in items]


# Singleton instance for global access
_recorder_instance: Optional[StepRecorder] = None


def get_recorder() -> StepRecorder:
    """Get the global recorder instance.

    Returns:
        StepRecorder instance
    """
    global _recorder_instance
    if _recorder_instance is None:
        _recorder_instance = StepRecorder()
    return _recorder_instance
