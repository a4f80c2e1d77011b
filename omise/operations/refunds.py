"""Operations on refunds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import Description, Endpoint, ListParams, Operation, _object


@dataclass
class ListRefunds(ListParams, Operation):
    """List the refunds of a charge."""

    charge_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "GET", f"/charges/{self.charge_id}/refunds", "application/json"
        )


@dataclass
class CreateRefund(Operation):
    """Refund all or part of a charge."""

    charge_id: str = ""
    amount: int = 0
    void: bool = False
    metadata: dict[str, Any] | None = None

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "POST", f"/charges/{self.charge_id}/refunds", "application/json"
        )

    def payload(self) -> dict[str, Any]:
        return _object(
            ("amount", self.amount, False),
            ("void", self.void, True),
            ("metadata", self.metadata, True),
        )


@dataclass
class RetrieveRefund(Operation):
    """Retrieve one refund of a charge."""

    charge_id: str = ""
    refund_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API,
            "GET",
            f"/charges/{self.charge_id}/refunds/{self.refund_id}",
            "application/json",
        )