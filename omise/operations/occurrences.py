"""Operations on schedule occurrences."""

from __future__ import annotations

from dataclasses import dataclass

from .base import Description, Endpoint, Operation


@dataclass
class RetrieveOccurrence(Operation):
    """Retrieve one schedule occurrence by its id."""

    occurrence_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "GET", "/occurrences/" + self.occurrence_id, "application/json"
        )