"""Event handlers that turn trigger events into executable pipelines.

Each handler covers one event type and exposes the same capabilities:
classify an event type, convert a generic event, match it against a pipeline.
"""

from pipeline_triggers.eventhandlers.base import ConversionError, TriggerEventHandler
from pipeline_triggers.eventhandlers.manual import ManualEventHandler

__all__ = ["ConversionError", "ManualEventHandler", "TriggerEventHandler"]
