"""Event envelopes.

``Event`` is the generic shape produced by ingestion; its content is opaque
until a handler converts it into a typed event such as ``ManualEvent``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pipeline_triggers.model.trigger import Trigger

MANUAL_EVENT_TYPE = "manual"


class Event(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    type: str
    content: Any = None
    event_id: str | None = None
    source: str | None = None


class ManualEventContent(BaseModel):
    """What a user asked to run: the pipeline and the trigger to run it with."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    application: str
    pipeline_name_or_id: str
    trigger: Trigger = Field(default_factory=lambda: Trigger(type=MANUAL_EVENT_TYPE))

    @field_validator("trigger", mode="before")
    @classmethod
    def _default_trigger(cls, value: Any) -> Any:
        return Trigger(type=MANUAL_EVENT_TYPE) if value is None else value


class ManualEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = MANUAL_EVENT_TYPE
    content: ManualEventContent
