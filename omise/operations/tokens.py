"""Operations on card tokens.

Full card data should never pass through your own servers; creating tokens from
a server needs PCI-DSS certification.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import Description, Endpoint, Operation, _object


@dataclass
class CreateToken(Operation):
    """Create a card token; sent to the vault endpoint."""

    name: str = ""
    number: str = ""
    expiration_month: int = 0
    expiration_year: int = 0
    email: str = ""
    phone_number: str = ""
    security_code: str = ""
    country: str = ""
    state: str = ""
    city: str = ""
    postal_code: str = ""
    street1: str = ""
    street2: str = ""

    def describe(self) -> Description:
        return Description(Endpoint.VAULT, "POST", "/tokens", "application/json")

    def payload(self) -> dict[str, Any]:
        card = _object(
            ("name", self.name, False),
            ("number", self.number, False),
            ("expiration_month", self.expiration_month, False),
            ("expiration_year", self.expiration_year, False),
            ("email", self.email, True),
            ("phone_number", self.phone_number, True),
            ("security_code", self.security_code, False),
            ("country", self.country, True),
            ("state", self.state, True),
            ("city", self.city, True),
            ("postal_code", self.postal_code, True),
            ("street1", self.street1, True),
            ("street2", self.street2, True),
        )
        return {"card": card}


@dataclass
class RetrieveToken(Operation):
    """Retrieve one token by its id."""

    token_id: str = ""

    def describe(self) -> Description:
        return Description(Endpoint.VAULT, "GET", "/tokens/" + self.token_id, "application/json")