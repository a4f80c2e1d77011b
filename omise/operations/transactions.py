"""Operations on balance transactions."""

from __future__ import annotations

from dataclasses import dataclass

from .base import Description, Endpoint, ListParams, Operation


@dataclass
class ListTransactions(ListParams, Operation):
    """List balance transactions."""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/transactions", "application/json")


@dataclass
class RetrieveTransaction(Operation):
    """Retrieve one transaction by its id."""

    transaction_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "GET", "/transactions/" + self.transaction_id, "application/json"
        )