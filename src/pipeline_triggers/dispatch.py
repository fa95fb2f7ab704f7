"""Route generic events to the handler for their type.

The dispatcher converts an event once, then asks the selected handler to match
it against every candidate pipeline. Candidates are independent, so they can
be evaluated on a thread pool.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from pipeline_triggers.build.client import BuildInfoError, BuildServiceClient
from pipeline_triggers.build.service import RemoteBuildInfoService
from pipeline_triggers.config import ProviderFailurePolicy, TriggerSettings
from pipeline_triggers.eventhandlers.base import TriggerEventHandler
from pipeline_triggers.eventhandlers.manual import ManualEventHandler
from pipeline_triggers.model.event import Event
from pipeline_triggers.model.pipeline import Pipeline

logger = logging.getLogger(__name__)


class UnsupportedEventTypeError(LookupError):
    def __init__(self, event_type: str | None) -> None:
        super().__init__(f"No handler for event type: {event_type!r}")
        self.event_type = event_type


class TriggerDispatcher:
    def __init__(
        self,
        handlers: Sequence[TriggerEventHandler[Any]],
        *,
        failure_policy: ProviderFailurePolicy = ProviderFailurePolicy.PROPAGATE,
        max_workers: int = 1,
        build_client: BuildServiceClient | None = None,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._handlers = tuple(handlers)
        self._failure_policy = failure_policy
        self._max_workers = max_workers
        # Owned; released by close().
        self._build_client = build_client

    @property
    def failure_policy(self) -> ProviderFailurePolicy:
        return self._failure_policy

    def close(self) -> None:
        if self._build_client is not None:
            self._build_client.close()

    def __enter__(self) -> TriggerDispatcher:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def handler_for(self, event_type: str | None) -> TriggerEventHandler[Any] | None:
        for handler in self._handlers:
            if handler.handles_type(event_type):
                return handler
        return None

    def handler_for_event(self, event: Event | Mapping[str, Any]) -> TriggerEventHandler[Any]:
        event_type = _event_type(event)
        handler = self.handler_for(event_type)
        if handler is None:
            raise UnsupportedEventTypeError(event_type)
        return handler

    def matching_pipelines(
        self, event: Event | Mapping[str, Any], pipelines: Iterable[Pipeline]
    ) -> list[Pipeline]:
        """Return every candidate the event targets, in candidate order.

        Raises:
            ConversionError: If the event payload does not fit its handler.
            BuildInfoError: If a build lookup fails and the policy is PROPAGATE.
        """

        event_type = _event_type(event)
        handler = self.handler_for(event_type)
        if handler is None:
            logger.debug("Ignoring event with no handler", extra={"event_type": event_type})
            return []

        typed_event = handler.convert(event)
        candidates = list(pipelines)

        def attempt(pipeline: Pipeline) -> Pipeline | None:
            try:
                return handler.match(typed_event, pipeline)
            except BuildInfoError:
                if self._failure_policy is ProviderFailurePolicy.PROPAGATE:
                    raise
                logger.warning(
                    "Build lookup failed; skipping pipeline",
                    exc_info=True,
                    extra={"pipeline_id": pipeline.id, "event_type": event_type},
                )
                return None

        if self._max_workers > 1 and len(candidates) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                results = list(pool.map(attempt, candidates))
        else:
            results = [attempt(pipeline) for pipeline in candidates]

        matched = [pipeline for pipeline in results if pipeline is not None]
        logger.info(
            "Evaluated pipelines for event",
            extra={
                "event_type": event_type,
                "candidates": len(candidates),
                "matched": len(matched),
            },
        )
        return matched


def _event_type(event: Event | Mapping[str, Any]) -> str | None:
    if isinstance(event, Event):
        return event.type
    value = event.get("type")
    return value if isinstance(value, str) else None


def create_dispatcher(settings: TriggerSettings) -> TriggerDispatcher:
    """Create a dispatcher wired from settings."""

    build_info_service = None
    client = None
    if settings.build_info_enabled:
        client = BuildServiceClient(
            base_url=settings.build_service_base_url,
            token=settings.build_service_token,
            timeout_seconds=settings.build_service_timeout_seconds,
        )
        build_info_service = RemoteBuildInfoService(client)
        logger.info(
            "Build information enrichment enabled",
            extra={"base_url": settings.build_service_base_url},
        )

    return TriggerDispatcher(
        [ManualEventHandler(build_info_service)],
        failure_policy=settings.provider_failure_policy,
        max_workers=settings.max_workers,
        build_client=client,
    )
