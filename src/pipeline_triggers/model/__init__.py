"""Immutable value types exchanged with the event and pipeline layers."""

from pipeline_triggers.model.build_event import Build, BuildEvent, BuildProject
from pipeline_triggers.model.event import Event, ManualEvent, ManualEventContent
from pipeline_triggers.model.pipeline import Pipeline
from pipeline_triggers.model.trigger import Notification, Trigger

__all__ = [
    "Build",
    "BuildEvent",
    "BuildProject",
    "Event",
    "ManualEvent",
    "ManualEventContent",
    "Notification",
    "Pipeline",
    "Trigger",
]
