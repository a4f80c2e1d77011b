"""Operations on transfers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import Description, Endpoint, ListParams, Operation, _object


@dataclass
class ListTransfers(ListParams, Operation):
    """List transfers."""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/transfers", "application/json")


@dataclass
class CreateTransfer(Operation):
    """Create a transfer; without a recipient it goes to the default one."""

    amount: int = 0
    recipient: str = ""
    fail_fast: bool = False
    metadata: dict[str, Any] | None = None
    split_transfer: bool = False
    idemp_key: str = ""

    def describe(self) -> Description:
        return Description(Endpoint.API, "POST", "/transfers", "application/json")

    def payload(self) -> dict[str, Any]:
        return _object(
            ("amount", self.amount, True),
            ("recipient", self.recipient, True),
            ("fail_fast", self.fail_fast, True),
            ("metadata", self.metadata, True),
            ("split_transfer", self.split_transfer, True),
            ("idemp_key", self.idemp_key, True),
        )


@dataclass
class RetrieveTransfer(Operation):
    """Retrieve one transfer by its id."""

    transfer_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "GET", "/transfers/" + self.transfer_id, "application/json"
        )


@dataclass
class DestroyTransfer(Operation):
    """Cancel a pending transfer."""

    transfer_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "DELETE", "/transfers/" + self.transfer_id, "application/json"
        )