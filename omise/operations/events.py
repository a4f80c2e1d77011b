"""Operations on events."""

from __future__ import annotations

from dataclasses import dataclass

from .base import Description, Endpoint, ListParams, Operation


@dataclass
class ListEvents(ListParams, Operation):
    """List events."""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/events", "application/json")


@dataclass
class RetrieveEvent(Operation):
    """Retrieve one event by its id."""

    event_id: str = ""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/events/" + self.event_id)