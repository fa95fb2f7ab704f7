"""Handler for manual execution requests.

A manual event names the pipeline to run directly. Rather than looking through
pipeline triggers for one that matches the event, the handler looks for the
pipeline whose application and name or id match the request.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from pipeline_triggers.build.service import BuildInfoService
from pipeline_triggers.eventhandlers.base import ConversionError, TriggerEventHandler
from pipeline_triggers.eventhandlers.matching import pipeline_matches
from pipeline_triggers.eventhandlers.trigger_builder import TriggerBuilder
from pipeline_triggers.model.event import MANUAL_EVENT_TYPE, Event, ManualEvent
from pipeline_triggers.model.pipeline import Pipeline

logger = logging.getLogger(__name__)


class ManualEventHandler(TriggerEventHandler[ManualEvent]):
    def __init__(self, build_info_service: BuildInfoService | None = None) -> None:
        self._builder = TriggerBuilder(build_info_service)

    def handles_type(self, event_type: str | None) -> bool:
        return event_type is not None and event_type.lower() == MANUAL_EVENT_TYPE

    def convert(self, event: Event | Mapping[str, Any]) -> ManualEvent:
        if isinstance(event, Event):
            raw: Mapping[str, Any] = {"type": event.type, "content": event.content}
        else:
            raw = event

        event_type = raw.get("type")
        try:
            return ManualEvent.model_validate(
                {"type": event_type or MANUAL_EVENT_TYPE, "content": raw.get("content")}
            )
        except ValidationError as e:
            raise ConversionError(
                f"Event is not a valid manual event: {e}",
                event_type=event_type if isinstance(event_type, str) else None,
            ) from e

    def match(self, event: ManualEvent, pipeline: Pipeline) -> Pipeline | None:
        content = event.content
        if not pipeline_matches(content.application, content.pipeline_name_or_id, pipeline):
            return None

        logger.info(
            "Manual request matched pipeline",
            extra={
                "application": content.application,
                "pipeline_id": pipeline.id,
                "pipeline_name": pipeline.name,
                "user": content.trigger.user,
            },
        )
        return self._builder.build(pipeline, content.trigger)

    def matching_pipeline(
        self, event: Event | Mapping[str, Any], pipelines: Iterable[Pipeline]
    ) -> Pipeline | None:
        """Convert ``event`` once and return the first pipeline it targets."""

        manual_event = self.convert(event)
        for pipeline in pipelines:
            matched = self.match(manual_event, pipeline)
            if matched is not None:
                return matched
        return None
