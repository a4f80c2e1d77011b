"""Operations on receipts."""

from __future__ import annotations

from dataclasses import dataclass

from .base import Description, Endpoint, ListParams, Operation


@dataclass
class ListReceipts(ListParams, Operation):
    """List receipts."""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/receipts", "application/json")


@dataclass
class RetrieveReceipt(Operation):
    """Retrieve one receipt by its id."""

    receipt_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "GET", "/receipts/" + self.receipt_id, "application/json"
        )