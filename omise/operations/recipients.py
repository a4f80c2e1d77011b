"""Operations on transfer recipients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..enums import RecipientType
from .base import Description, Endpoint, ListParams, Operation, _object


@dataclass
class BankAccountRequest:
    """Bank account details sent when creating or updating a recipient.

    ``bank_code``, ``branch_code`` and ``type`` are used by Japanese accounts.
    """

    brand: str = ""
    number: str = ""
    name: str = ""
    bank_code: str = ""
    branch_code: str = ""
    type: str = ""

    def payload(self) -> dict[str, Any]:
        """Return the ``bank_account`` object sent to the API."""
        return _object(
            ("brand", self.brand, True),
            ("number", self.number, False),
            ("name", self.name, False),
            ("bank_code", self.bank_code, True),
            ("branch_code", self.branch_code, True),
            ("type", self.type, True),
        )


def _bank_account(account: BankAccountRequest | None) -> dict[str, Any]:
    return (account or BankAccountRequest()).payload()


def _recipient_payload(
    name: str,
    email: str,
    description: str,
    type_: RecipientType | str,
    tax_id: str,
    bank_account: BankAccountRequest | None,
    metadata: dict[str, Any] | None,
) -> dict[str, Any]:
    body = _object(
        ("name", name, False),
        ("email", email, True),
        ("description", description, True),
        ("type", type_, False),
        ("tax_id", tax_id, True),
        ("metadata", metadata, True),
    )
    body["bank_account"] = _bank_account(bank_account)
    return body


@dataclass
class ListRecipients(ListParams, Operation):
    """List recipients."""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/recipients", "application/json")


@dataclass
class CreateRecipient(Operation):
    """Create a recipient."""

    name: str = ""
    email: str = ""
    description: str = ""
    type: RecipientType | str = ""
    tax_id: str = ""
    bank_account: BankAccountRequest | None = None
    metadata: dict[str, Any] | None = None

    def describe(self) -> Description:
        return Description(Endpoint.API, "POST", "/recipients", "application/json")

    def payload(self) -> dict[str, Any]:
        return _recipient_payload(
            self.name,
            self.email,
            self.description,
            self.type,
            self.tax_id,
            self.bank_account,
            self.metadata,
        )


@dataclass
class RetrieveRecipient(Operation):
    """Retrieve one recipient by its id."""

    recipient_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "GET", "/recipients/" + self.recipient_id, "application/json"
        )


@dataclass
class UpdateRecipient(Operation):
    """Update a recipient."""

    recipient_id: str = ""
    name: str = ""
    email: str = ""
    description: str = ""
    type: RecipientType | str = ""
    tax_id: str = ""
    bank_account: BankAccountRequest | None = None
    metadata: dict[str, Any] | None = None

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "PATCH", "/recipients/" + self.recipient_id, "application/json"
        )

    def payload(self) -> dict[str, Any]:
        return _recipient_payload(
            self.name,
            self.email,
            self.description,
            self.type,
            self.tax_id,
            self.bank_account,
            self.metadata,
        )


@dataclass
class DestroyRecipient(Operation):
    """Delete a recipient."""

    recipient_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "DELETE", "/recipients/" + self.recipient_id, "application/json"
        )


@dataclass
class ListRecipientTransferSchedules(ListParams, Operation):
    """List the transfer schedules of a recipient."""

    recipient_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API,
            "GET",
            f"/recipients/{self.recipient_id}/schedules",
            "application/json",
        )