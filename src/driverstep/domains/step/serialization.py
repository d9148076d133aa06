"""Exported shape of step records.

Pydantic models describing every record attribute except the raw return
object. Field names are snake_case on export; camelCase names are accepted
on input so records exported by older Java-based tooling load too.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .value_objects import Cmd, StepType


def _normalize_step_type(value: Any) -> Any:
    if value is None:
        return None
    return StepType.parse(value).value


def _normalize_cmd(value: Any) -> Any:
    if isinstance(value, Cmd):
        return value.value
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _absent_if_negative(value: Any) -> Any:
    # legacy exports use -1 for "not measured"
    if isinstance(value, int) and value < 0:
        return None
    return value


StepTypeName = Annotated[Optional[str], BeforeValidator(_normalize_step_type)]
CommandName = Annotated[Optional[str], BeforeValidator(_normalize_cmd)]
Nanoseconds = Annotated[Optional[int], BeforeValidator(_absent_if_negative)]


class FailurePayload(BaseModel):
    """Exported form of a captured failure."""

    model_config = ConfigDict(extra="ignore")

    type: str = "Exception"
    message: Optional[str] = None


class StepPayload(BaseModel):
    """Exported form of a step record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    record_number: Optional[int] = None
    step_number: Optional[int] = None
    timestamp: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("timestamp", "timeStamp"),
    )
    time_since_last_action: Nanoseconds = None
    time_elapsed_step: Nanoseconds = None
    type_of_log: StepTypeName = None
    cmd: CommandName = None
    cmd_name: Optional[str] = Field(default=None, description="Display name, informational only")
    param1: Optional[str] = None
    param2: Optional[str] = None
    return_value: Optional[str] = None
    issue: Optional[FailurePayload] = None
