"""Resource objects returned by the API and pieces of request payloads."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from enum import Enum
from typing import Any

from .enums import Ordering, RecipientType, SearchScope, TransactionType
from .schedule import ChargeDetail, On, Period, Status, TransferDetail


@dataclass(frozen=True)
class _Codec:
    """Converts a field between its JSON form and its Python form.

    A missing ``decode`` or ``encode`` leaves the value as it is.
    """

    decode: Callable[[Any], Any] | None = None
    encode: Callable[[Any], Any] | None = None

    def load(self, value: Any) -> Any:
        return value if self.decode is None else self.decode(value)

    def dump(self, value: Any) -> Any:
        return value if self.encode is None else self.encode(value)


def _primitive(label: str, *accepted: type) -> _Codec:
    def check(value: Any) -> Any:
        if (isinstance(value, bool) and bool not in accepted) or not isinstance(value, accepted):
            raise TypeError(f"expected {label}, got {type(value).__name__} {value!r}")
        return value

    return _Codec(check)


_ANY = _Codec()
_STR = _primitive("string", str)
_INT = _primitive("integer", int)
_BOOL = _primitive("boolean", bool)
_MAPPING = _Codec(_primitive("object", Mapping).decode)
_STR_MAPPING = _Codec(lambda value: dict(_MAPPING.load(value)))

_TIME_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|z|[+-]\d{2}:\d{2})"
)


def _parse_time(value: Any) -> datetime:
    text = _STR.load(value)
    match = _TIME_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 time: {text!r}")
    stamp, fraction, offset = match.groups()
    fraction = (fraction or "")[:6].ljust(6, "0")
    if offset in ("Z", "z"):
        offset = "+00:00"
    return datetime.fromisoformat(f"{stamp}.{fraction}{offset}")


def _format_time(moment: datetime) -> str:
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset()
    if not offset:
        return text + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{mins:02d}"


def _parse_date(value: Any) -> date:
    text = _STR.load(value)
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValueError(f"invalid date: {text!r}") from exc


_TIME = _Codec(_parse_time, _format_time)
_DATE = _Codec(_parse_date, lambda value: value.isoformat())


def _enum(enum_type: type[Enum]) -> _Codec:
    def decode(value: Any) -> Any:
        text = _STR.load(value)
        try:
            return enum_type(text)
        except ValueError:
            return text

    return _Codec(decode, lambda value: value.value if isinstance(value, Enum) else value)


def _nested(kind: Any) -> _Codec:
    return _Codec(kind.from_dict, lambda value: value.to_dict())


def _list_of(item: _Codec) -> _Codec:
    def decode(values: Any) -> list[Any]:
        if not isinstance(values, list):
            raise TypeError(f"expected array, got {type(values).__name__}")
        return [None if value is None else item.load(value) for value in values]

    def encode(values: list[Any]) -> list[Any]:
        return [None if value is None else item.dump(value) for value in values]

    return _Codec(decode, encode)


def _attr(
    key: str,
    codec: _Codec = _ANY,
    default: Any = None,
    *,
    omitempty: bool = False,
) -> Any:
    return field(default=default, metadata={"key": key, "codec": codec, "omitempty": omitempty})


def _from_mapping(cls: Any, data: Any) -> Any:
    if not isinstance(data, Mapping):
        raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")
    values: dict[str, Any] = {}
    known: set[str] = set()
    names = set()
    for spec in fields(cls):
        names.add(spec.name)
        key = spec.metadata.get("key")
        if key is None:
            continue
        known.add(key)
        if key in data:
            raw = data[key]
            values[spec.name] = None if raw is None else spec.metadata["codec"].load(raw)
    if "extra" in names:
        values["extra"] = {key: value for key, value in data.items() if key not in known}
    return cls(**values)


def _to_mapping(obj: Any) -> dict[str, Any]:
    result: dict[str, Any] = dict(getattr(obj, "extra", None) or {})
    for spec in fields(obj):
        key = spec.metadata.get("key")
        if key is None:
            continue
        value = getattr(obj, spec.name)
        if spec.metadata["omitempty"] and not value:
            continue
        result[key] = None if value is None else spec.metadata["codec"].dump(value)
    return result


class _JSONObject:
    """Marker for dataclasses that map to a JSON object."""


@dataclass
class Resource(_JSONObject):
    """Fields common to every API object; unknown keys are kept in ``extra``."""

    object: str = _attr("object", _STR, "")
    id: str = _attr("id", _STR, "")
    live: bool = _attr("livemode", _BOOL, False)
    location: str | None = _attr("location", _STR)
    created: datetime | None = _attr("created_at", _TIME)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Any:
        """Build the object from its decoded JSON form."""
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return _to_mapping(self)


@dataclass
class Receipt(Resource):
    """A receipt for fees charged by the service."""

    number: str = _attr("number", _STR, "")
    date: datetime | None = _attr("date", _TIME)
    customer_name: str = _attr("customer_name", _STR, "")
    customer_address: str = _attr("customer_address", _STR, "")
    customer_tax_id: str = _attr("customer_tax_id", _STR, "")
    customer_email: str = _attr("customer_email", _STR, "")
    customer_statement_name: str = _attr("customer_statement_name", _STR, "")
    company_name: str = _attr("company_name", _STR, "")
    company_address: str = _attr("company_address", _STR, "")
    company_tax_id: str = _attr("company_tax_id", _STR, "")
    charge_fee: int = _attr("charge_fee", _INT, 0)
    voided_fee: int = _attr("voided_fee", _INT, 0)
    transfer_fee: int = _attr("transfer_fee", _INT, 0)
    subtotal: int = _attr("subtotal", _INT, 0)
    vat: int = _attr("vat", _INT, 0)
    wht: int = _attr("wht", _INT, 0)
    total: int = _attr("total", _INT, 0)
    credit_note: bool = _attr("credit_note", _BOOL, False)
    currency: str = _attr("currency", _STR, "")


@dataclass
class Recipient(Resource):
    """A party that transfers are paid out to."""

    verified: bool = _attr("verified", _BOOL, False)
    active: bool = _attr("active", _BOOL, False)
    name: str = _attr("name", _STR, "")
    email: str = _attr("email", _STR, "")
    description: str | None = _attr("description", _STR)
    type: RecipientType | str = _attr("type", _enum(RecipientType), "")
    tax_id: str | None = _attr("tax_id", _STR)
    bank_account: dict[str, Any] | None = _attr("bank_account", _MAPPING)
    failure_code: str | None = _attr("failure_code", _STR)
    metadata: dict[str, Any] | None = _attr("metadata", _MAPPING)


@dataclass
class References(_JSONObject):
    """Barcode reference of an offline payment source."""

    barcode: str = _attr("barcode", _STR, "")
    expires_at: datetime | None = _attr("expires_at", _TIME)

    @classmethod
    def from_dict(cls, data: Any) -> Any:
        """Build the object from its decoded JSON form."""
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return _to_mapping(self)


@dataclass
class Refund(Resource):
    """A refund made against a charge."""

    status: str = _attr("status", _STR, "")
    voided: bool = _attr("voided", _BOOL, False)
    funding_amount: int = _attr("funding_amount", _INT, 0)
    amount: int = _attr("amount", _INT, 0)
    currency: str = _attr("currency", _STR, "")
    funding_currency: str = _attr("funding_currency", _STR, "")
    charge: str = _attr("charge", _STR, "")
    transaction: str = _attr("transaction", _STR, "")
    metadata: dict[str, Any] | None = _attr("metadata", _MAPPING)


@dataclass
class ScannableCode(_JSONObject):
    """A scannable code attached to a payment source."""

    object: str = _attr("object", _STR, "")
    type: str = _attr("type", _STR, "")
    image: dict[str, Any] | None = _attr("image", _MAPPING)

    @classmethod
    def from_dict(cls, data: Any) -> Any:
        """Build the object from its decoded JSON form."""
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return _to_mapping(self)


@dataclass
class Schedule(Resource):
    """A recurring charge or transfer schedule."""

    status: Status | str = _attr("status", _enum(Status), "")
    every: int = _attr("every", _INT, 0)
    period: Period | str = _attr("period", _enum(Period), "")
    on: On | None = _attr("on", _nested(On))
    in_words: str = _attr("in_words", _STR, "")
    start_date: date | None = _attr("start_date", _DATE)
    end_date: date | None = _attr("end_date", _DATE)
    charge: ChargeDetail | None = _attr("charge", _nested(ChargeDetail))
    transfer: TransferDetail | None = _attr("transfer", _nested(TransferDetail))
    occurrences: dict[str, Any] | None = _attr("occurrences", _MAPPING)
    next_occurrences: list[date] | None = _attr("next_occurrences", _list_of(_DATE))


@dataclass
class Source(Resource):
    """A payment source other than a card."""

    type: str = _attr("type", _STR, "")
    flow: str = _attr("flow", _STR, "")
    amount: int = _attr("amount", _INT, 0)
    currency: str = _attr("currency", _STR, "")
    scannable_code: ScannableCode | None = _attr("scannable_code", _nested(ScannableCode))
    references: References | None = _attr("references", _nested(References))
    zero_interest_installments: bool = _attr("zero_interest_installments", _BOOL, False)
    platform_type: str = _attr("platform_type", _STR, "")
    ip: str = _attr("ip", _STR, "")


@dataclass
class BillingShipping(_JSONObject):
    """A billing or shipping address sent with a source."""

    country: str = _attr("country", _STR, "")
    city: str = _attr("city", _STR, "")
    postal_code: str = _attr("postal_code", _STR, "")
    state: str = _attr("state", _STR, "")
    street1: str = _attr("street1", _STR, "")
    street2: str = _attr("street2", _STR, "", omitempty=True)

    @classmethod
    def from_dict(cls, data: Any) -> Any:
        """Build the object from its decoded JSON form."""
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return _to_mapping(self)


@dataclass
class Items(_JSONObject):
    """A purchased item sent with a source."""

    amount: int = _attr("amount", _INT, 0)
    sku: str = _attr("sku", _STR, "", omitempty=True)
    name: str = _attr("name", _STR, "", omitempty=True)
    quantity: int = _attr("quantity", _INT, 0, omitempty=True)
    category: str = _attr("category", _STR, "", omitempty=True)
    brand: str = _attr("brand", _STR, "", omitempty=True)
    item_uri: str = _attr("item_uri", _STR, "", omitempty=True)
    image_uri: str = _attr("image_uri", _STR, "", omitempty=True)

    @classmethod
    def from_dict(cls, data: Any) -> Any:
        """Build the object from its decoded JSON form."""
        return _from_mapping(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return _to_mapping(self)


@dataclass
class Token(Resource):
    """A one-time token standing for a card."""

    used: bool = _attr("used", _BOOL, False)
    card: dict[str, Any] | None = _attr("card", _MAPPING)


@dataclass
class Transaction(Resource):
    """A movement of funds on the account balance."""

    source: str = _attr("source", _STR, "")
    type: TransactionType | str = _attr("type", _enum(TransactionType), "")
    amount: int = _attr("amount", _INT, 0)
    currency: str = _attr("currency", _STR, "")
    transferable: datetime | None = _attr("transferable", _TIME)


@dataclass
class Transfer(Resource):
    """A payout to a recipient."""

    recipient: str = _attr("recipient", _STR, "")
    bank_account: dict[str, Any] | None = _attr("bank_account", _MAPPING)
    sent: bool = _attr("sent", _BOOL, False)
    paid: bool = _attr("paid", _BOOL, False)
    fee: int = _attr("fee", _INT, 0)
    amount: int = _attr("amount", _INT, 0)
    currency: str = _attr("currency", _STR, "")
    failure_code: str | None = _attr("failure_code", _STR)
    failure_message: str | None = _attr("failure_message", _STR)
    transaction: str | None = _attr("transaction", _STR)
    metadata: dict[str, Any] | None = _attr("metadata", _MAPPING)


def _encode_items(items: list[Any]) -> list[Any]:
    return [item.to_dict() if isinstance(item, _JSONObject) else item for item in items]


def _decode_items(items: Any) -> list[Any]:
    if not isinstance(items, list):
        raise TypeError(f"expected array, got {type(items).__name__}")
    return list(items)


@dataclass
class SearchResult(Resource):
    """One page of search results; items of known scopes are decoded."""

    scope: SearchScope | str = _attr("scope", _enum(SearchScope), "")
    query: str = _attr("query", _STR, "")
    filters: dict[str, str] | None = _attr("filters", _STR_MAPPING)
    page: int = _attr("page", _INT, 0)
    total: int = _attr("total", _INT, 0)
    total_pages: int = _attr("total_pages", _INT, 0)
    order: Ordering | str = _attr("order", _enum(Ordering), "")
    data: list[Any] | None = _attr("data", _Codec(_decode_items, _encode_items))

    @classmethod
    def from_dict(cls, data: Any) -> SearchResult:
        result = super().from_dict(data)
        item_type = _SEARCH_ITEM_TYPES.get(result.scope)
        if item_type is not None and result.data:
            result.data = [item_type.from_dict(item) for item in result.data]
        return result


_SEARCH_ITEM_TYPES: dict[Any, type[Resource]] = {
    SearchScope.RECIPIENT: Recipient,
    SearchScope.REFUND: Refund,
    SearchScope.TRANSFER: Transfer,
}