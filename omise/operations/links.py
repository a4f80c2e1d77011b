"""Operations on payment links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import Description, Endpoint, ListParams, Operation, _object


@dataclass
class ListLinks(ListParams, Operation):
    """List payment links."""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/links", "application/json")


@dataclass
class CreateLink(Operation):
    """Create a payment link."""

    amount: int = 0
    currency: str = ""
    title: str = ""
    description: str = ""
    multiple: bool = False

    def describe(self) -> Description:
        return Description(Endpoint.API, "POST", "/links", "application/json")

    def payload(self) -> dict[str, Any]:
        return _object(
            ("amount", self.amount, False),
            ("currency", self.currency, False),
            ("title", self.title, False),
            ("description", self.description, False),
            ("multiple", self.multiple, True),
        )


@dataclass
class RetrieveLink(Operation):
    """Retrieve one payment link by its id."""

    link_id: str = ""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/links/" + self.link_id, "application/json")