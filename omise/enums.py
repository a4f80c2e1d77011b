"""String enumerations used by resource objects and operations."""

from enum import Enum


class _StrEnum(str, Enum):
    """A string-valued enum whose str() is its wire value."""

    def __str__(self) -> str:
        return self.value


class Ordering(_StrEnum):
    """Order of items in list operations."""

    UNSPECIFIED = ""
    CHRONOLOGICAL = "chronological"
    REVERSE_CHRONOLOGICAL = "reverse_chronological"


class RecipientType(_StrEnum):
    """Kind of transfer recipient."""

    INDIVIDUAL = "individual"
    CORPORATION = "corporation"


class SearchScope(_StrEnum):
    """Scopes accepted by the search API."""

    UNSPECIFIED = ""
    CHARGE = "charge"
    DISPUTE = "dispute"
    RECIPIENT = "recipient"
    CUSTOMER = "customer"
    REFUND = "refund"
    TRANSFER = "transfer"
    LINK = "link"


class SourceOfFunds(_StrEnum):
    """Where the money for a charge comes from."""

    CARD = "card"
    OFFSITE = "offsite"


class TransactionType(_StrEnum):
    """Direction of a balance transaction."""

    CREDIT = "credit"
    DEBIT = "debit"