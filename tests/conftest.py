"""Test configuration and fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from pipeline_triggers.model.build_event import BuildEvent
from pipeline_triggers.model.event import Event
from pipeline_triggers.model.pipeline import Pipeline
from pipeline_triggers.model.trigger import Trigger


class RecordingBuildInfoService:
    """In-memory build information service that records every lookup."""

    def __init__(
        self,
        build_info: dict[str, Any] | None = None,
        properties: dict[str, Any] | None = None,
    ) -> None:
        self.build_info = build_info if build_info is not None else {"status": "SUCCESS"}
        self.properties = properties if properties is not None else {}
        self.build_info_calls: list[BuildEvent] = []
        self.properties_calls: list[tuple[BuildEvent, str | None]] = []

    def get_build_info(self, build_event: BuildEvent) -> dict[str, Any]:
        self.build_info_calls.append(build_event)
        return self.build_info

    def get_properties(
        self, build_event: BuildEvent, property_file: str | None
    ) -> dict[str, Any]:
        self.properties_calls.append((build_event, property_file))
        return self.properties


@pytest.fixture
def pipeline() -> Pipeline:
    """Provide an enabled pipeline with one notification."""
    return Pipeline(
        id="p1",
        name="Deploy",
        application="myapp",
        disabled=False,
        notifications=[{"type": "email", "address": "team@example.com"}],
    )


@pytest.fixture
def manual_trigger() -> Trigger:
    """Provide a manual trigger with build provenance."""
    return Trigger(
        type="manual",
        user="alice@example.com",
        master="jenkins",
        job="build-1",
        build_number=42,
        notifications=[{"type": "slack", "address": "#deploys"}],
    )


@pytest.fixture
def manual_event_payload() -> dict[str, Any]:
    """Provide a raw manual event as ingestion would deliver it."""
    return {
        "type": "manual",
        "content": {
            "application": "myapp",
            "pipelineNameOrId": "Deploy",
            "trigger": {
                "type": "manual",
                "user": "alice@example.com",
                "master": "jenkins",
                "job": "build-1",
                "buildNumber": 42,
                "propertyFile": "deploy.properties",
                "parameters": {"region": "us-east-1"},
            },
        },
    }


@pytest.fixture
def manual_event(manual_event_payload: dict[str, Any]) -> Event:
    return Event.model_validate(manual_event_payload)


@pytest.fixture
def build_info_service() -> RecordingBuildInfoService:
    return RecordingBuildInfoService(
        build_info={"status": "SUCCESS"},
        properties={"version": "1.2.3"},
    )


@pytest.fixture
def make_build_info_service() -> type[RecordingBuildInfoService]:
    return RecordingBuildInfoService
