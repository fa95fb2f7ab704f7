from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pipeline_triggers.model.event import Event
from pipeline_triggers.model.pipeline import Pipeline

E = TypeVar("E")


class ConversionError(ValueError):
    """A generic event could not be read as the handler's typed event."""

    def __init__(self, message: str, *, event_type: str | None = None) -> None:
        super().__init__(message)
        self.event_type = event_type


class TriggerEventHandler(ABC, Generic[E]):
    """Handles one family of trigger events.

    A dispatcher picks the handler whose ``handles_type`` accepts an incoming
    event, converts the event once, then calls ``match`` for every candidate
    pipeline.
    """

    @abstractmethod
    def handles_type(self, event_type: str | None) -> bool:
        """Return True if this handler understands events of ``event_type``."""

    @abstractmethod
    def convert(self, event: Event | Mapping[str, Any]) -> E:
        """Convert a generic event into the handler's typed event.

        Raises:
            ConversionError: If the payload does not have the expected shape.
        """

    @abstractmethod
    def match(self, event: E, pipeline: Pipeline) -> Pipeline | None:
        """Return the pipeline ready to run if ``event`` targets it, else None."""
