"""Trigger value type.

Wire names are camelCase (``buildNumber``, ``propagateAuth``); attributes are
snake_case. Unknown fields are kept so they reach the execution layer untouched.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Notification = dict[str, Any]


class Trigger(BaseModel):
    """Runtime parameters and provenance attached to one execution request."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    type: str | None = None
    user: str | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)

    # Build source identity (e.g. a CI master and job name).
    master: str | None = None
    job: str | None = None
    # Copied as given; "" and non-numeric values are left for the build service to judge.
    build_number: int | str | None = None
    property_file: str | None = None

    propagate_auth: bool = False
    notifications: list[Notification] | None = None

    build_info: dict[str, Any] | None = None
    properties: dict[str, Any] | None = None

    correlation_id: str | None = None

    def at_propagate_auth(self, propagate_auth: bool) -> Trigger:
        return self.model_copy(update={"propagate_auth": propagate_auth})

    def with_build_info(self, build_info: dict[str, Any] | None) -> Trigger:
        return self.model_copy(update={"build_info": build_info})

    def with_properties(self, properties: dict[str, Any] | None) -> Trigger:
        return self.model_copy(update={"properties": properties})

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
