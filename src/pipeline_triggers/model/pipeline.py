from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pipeline_triggers.model.trigger import Notification, Trigger


class Pipeline(BaseModel):
    """A named, application-scoped workflow definition.

    Pipelines come from an external registry. Matching never mutates them; the
    ``with_*`` helpers return copies with a single field replaced.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    name: str
    application: str
    disabled: bool = False

    notifications: list[Notification] | None = None
    trigger: Trigger | None = None

    # Declared triggers and parameters are carried along for the execution layer.
    triggers: list[dict[str, Any]] | None = None
    parameter_config: list[dict[str, Any]] | None = None

    def with_trigger(self, trigger: Trigger) -> Pipeline:
        return self.model_copy(update={"trigger": trigger})

    def with_notifications(self, notifications: list[Notification]) -> Pipeline:
        return self.model_copy(update={"notifications": notifications})

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
