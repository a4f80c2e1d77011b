"""Operations on payment sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..models import BillingShipping, Items
from .base import Description, Endpoint, Operation, _object


@dataclass
class CreateSource(Operation):
    """Create a payment source; sent with the public key."""

    type: str = ""
    amount: int = 0
    currency: str = ""
    bank: str = ""
    barcode: str = ""
    email: str = ""
    installment_term: int = 0
    name: str = ""
    mobile_number: str = ""
    store_id: str = ""
    store_name: str = ""
    terminal_id: str = ""
    zero_interest_installments: bool = False
    platform_type: str = ""
    ip: str = ""
    billing: BillingShipping = field(default_factory=BillingShipping)
    shipping: BillingShipping = field(default_factory=BillingShipping)
    promotion_code: str = ""
    items: list[Items] = field(default_factory=list)

    def describe(self) -> Description:
        return Description(Endpoint.API, "POST", "/sources", "application/json", "public")

    def payload(self) -> dict[str, Any]:
        body = _object(
            ("type", self.type, False),
            ("amount", self.amount, False),
            ("currency", self.currency, False),
            ("bank", self.bank, True),
            ("barcode", self.barcode, True),
            ("email", self.email, True),
            ("installment_term", self.installment_term, True),
            ("name", self.name, True),
            ("mobile_number", self.mobile_number, True),
            ("store_id", self.store_id, True),
            ("store_name", self.store_name, True),
            ("terminal_id", self.terminal_id, True),
            ("zero_interest_installments", self.zero_interest_installments, True),
            ("platform_type", self.platform_type, True),
            ("ip", self.ip, True),
        )
        body["billing"] = self.billing.to_dict()
        body["shipping"] = self.shipping.to_dict()
        if self.promotion_code:
            body["promotion_code"] = self.promotion_code
        return body


@dataclass
class RetrieveSource(Operation):
    """Retrieve one payment source by its id."""

    source_id: str = ""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/sources/" + self.source_id, "application/json")