"""Configuration data models."""

import logging
import os
from dataclasses import dataclass, fields
from typing import Dict, List, Mapping, Optional, Set

ENV_PREFIX = "DRIVERSTEP_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class StepConfig:
    """Centralized configuration for step recording."""

    # Render locator/element arguments and return values as By.* expressions
    NORMALIZE_LOCATORS: bool = True
    # Keep raw non-primitive return values on after records
    CAPTURE_RETURN_OBJECTS: bool = True

    # Logging listener
    LOG_LEVEL: str = "INFO"

    # JSON export
    EXPORT_INDENT: int = 2

    @classmethod
    def from_dict(cls, config: Dict) -> 'StepConfig':
        """Create configuration from dictionary."""
        instance = cls()
        known = instance.field_names()
        for key, value in config.items():
            if key in known:
                setattr(instance, key, value)
        return instance

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'StepConfig':
        """Create configuration from ``DRIVERSTEP_*`` environment variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: If a variable cannot be converted to the field's type
        """
        environ = os.environ if environ is None else environ
        instance = cls()
        for key, default in instance.to_dict().items():
            raw = environ.get(f"{ENV_PREFIX}{key}")
            if raw is None:
                continue
            setattr(instance, key, _convert(key, raw, default))
        return instance

    def field_names(self) -> Set[str]:
        """Names of the configuration fields."""
        return {f.name for f in fields(self)}

    def to_dict(self) -> Dict:
        """Convert configuration to dictionary."""
        return {
            key: value for key, value in self.__dict__.items()
            if not key.startswith('_')
        }

    def update(self, **kwargs) -> None:
        """Update configuration values."""
        known = self.field_names()
        for key, value in kwargs.items():
            if key in known:
                setattr(self, key, value)
            else:
                raise ValueError(f"Unknown configuration key: {key}")

    def validate(self) -> List[str]:
        """Validate configuration values and return any errors."""
        errors = []

        if not isinstance(logging.getLevelName(str(self.LOG_LEVEL).upper()), int):
            errors.append(f"LOG_LEVEL must be a logging level name, got {self.LOG_LEVEL!r}")

        if self.EXPORT_INDENT < 0:
            errors.append("EXPORT_INDENT must not be negative")

        return errors

    @property
    def log_level(self) -> int:
        """LOG_LEVEL as a numeric logging level (INFO when invalid)."""
        level = logging.getLevelName(str(self.LOG_LEVEL).upper())
        return level if isinstance(level, int) else logging.INFO


def _convert(key: str, raw: str, default):
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"{ENV_PREFIX}{key} must be a boolean, got {raw!r}")
    if isinstance(default, int):
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from None
    return raw
