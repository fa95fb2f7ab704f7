from __future__ import annotations

import logging

from pipeline_triggers.build.service import BuildInfoService
from pipeline_triggers.eventhandlers.build_events import extract_build_event
from pipeline_triggers.eventhandlers.notifications import merge_notifications
from pipeline_triggers.model.pipeline import Pipeline
from pipeline_triggers.model.trigger import Trigger

logger = logging.getLogger(__name__)


class TriggerBuilder:
    """Build the trigger a matched pipeline runs with.

    The build information service is optional. Without one, triggers are not
    enriched. Errors raised by the service propagate to the caller.
    """

    def __init__(self, build_info_service: BuildInfoService | None = None) -> None:
        self._build_info_service = build_info_service

    @property
    def enrichment_enabled(self) -> bool:
        return self._build_info_service is not None

    def build(self, pipeline: Pipeline, manual_trigger: Trigger) -> Pipeline:
        notifications = merge_notifications(pipeline.notifications, manual_trigger.notifications)
        trigger = manual_trigger.at_propagate_auth(True)

        if self._build_info_service is not None:
            build_event = extract_build_event(manual_trigger)
            if build_event is not None:
                logger.debug(
                    "Enriching manual trigger with build information",
                    extra={
                        "pipeline_id": pipeline.id,
                        "master": build_event.master,
                        "job": build_event.job,
                        "build_number": build_event.build_number,
                    },
                )
                trigger = trigger.with_build_info(
                    self._build_info_service.get_build_info(build_event)
                ).with_properties(
                    self._build_info_service.get_properties(
                        build_event, manual_trigger.property_file
                    )
                )

        return pipeline.with_trigger(trigger).with_notifications(notifications)
