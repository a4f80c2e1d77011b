"""Schedule enumerations and the detail objects embedded in a schedule."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .enums import _StrEnum


class Period(_StrEnum):
    """Unit of a schedule's recurrence."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class Status(_StrEnum):
    """Lifecycle status of a schedule."""

    ACTIVE = "active"
    EXPIRING = "expiring"
    EXPIRED = "expired"
    DELETED = "deleted"
    SUSPENDED = "suspended"


class OccurrenceStatus(_StrEnum):
    """Outcome of a single schedule occurrence."""

    SKIPPED = "skipped"
    FAILED = "failed"
    SUCCESSFUL = "successful"


class Weekday(_StrEnum):
    """Day of the week a schedule may run on."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


def _mapping(data: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{name} expects a JSON object, got {type(data).__name__}")
    return data


def _read(data: Mapping[str, Any], key: str, kinds: tuple[type, ...], default: Any = None) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if (isinstance(value, bool) and bool not in kinds) or not isinstance(value, kinds):
        raise TypeError(f"{key}: unexpected {type(value).__name__} value {value!r}")
    return value


def _weekday(value: Any) -> Weekday | str:
    if not isinstance(value, str):
        raise TypeError(f"weekday must be a string, got {type(value).__name__}")
    try:
        return Weekday(value)
    except ValueError:
        return value


@dataclass
class On:
    """The days a schedule runs on."""

    weekdays: list[Weekday | str] | None = None
    days_of_month: list[int] | None = None
    weekday_of_month: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> On:
        data = _mapping(data, "On")
        weekdays = _read(data, "weekdays", (list,))
        days = _read(data, "days_of_month", (list,))
        if days is not None:
            for day in days:
                if isinstance(day, bool) or not isinstance(day, int):
                    raise TypeError(f"days_of_month: unexpected value {day!r}")
        return cls(
            weekdays=None if weekdays is None else [_weekday(day) for day in weekdays],
            days_of_month=None if days is None else list(days),
            weekday_of_month=_read(data, "weekday_of_month", (str,)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "weekdays": None if self.weekdays is None else [str(day) for day in self.weekdays],
            "days_of_month": None if self.days_of_month is None else list(self.days_of_month),
            "weekday_of_month": self.weekday_of_month,
        }


@dataclass
class ChargeDetail:
    """What a charge schedule charges."""

    amount: int = 0
    currency: str = ""
    customer: str = ""
    card: str | None = None
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ChargeDetail:
        data = _mapping(data, "ChargeDetail")
        return cls(
            amount=_read(data, "amount", (int,), 0),
            currency=_read(data, "currency", (str,), ""),
            customer=_read(data, "customer", (str,), ""),
            card=_read(data, "card", (str,)),
            description=_read(data, "description", (str,), ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "amount": self.amount,
            "currency": self.currency,
            "customer": self.customer,
            "card": self.card,
            "description": self.description,
        }


@dataclass
class TransferDetail:
    """What a transfer schedule transfers."""

    recipient: str = ""
    amount: int | None = None
    percentage_of_balance: float | None = None
    currency: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> TransferDetail:
        data = _mapping(data, "TransferDetail")
        return cls(
            recipient=_read(data, "recipient", (str,), ""),
            amount=_read(data, "amount", (int,)),
            percentage_of_balance=_read(data, "percentage_of_balance", (int, float)),
            currency=_read(data, "currency", (str,), ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "recipient": self.recipient,
            "amount": self.amount,
            "percentage_of_balance": self.percentage_of_balance,
            "currency": self.currency,
        }