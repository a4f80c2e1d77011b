"""Operations on charge and transfer schedules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from ..schedule import Period, Weekday
from .base import Description, Endpoint, ListParams, Operation, _object, _plain


def _parse_day(text: str) -> date:
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValueError(f"invalid date {text!r}: expected YYYY-MM-DD") from exc


def _on(
    period: Period | str,
    weekdays: list[Weekday | str] | None,
    days_of_month: list[int] | None,
    weekday_of_month: str,
) -> dict[str, Any] | None:
    if period == Period.WEEK:
        return _object(("weekdays", weekdays, True))
    if period == Period.MONTH and days_of_month is not None:
        return _object(("days_of_month", days_of_month, True))
    if period == Period.MONTH and weekday_of_month:
        return _object(("weekday_of_month", weekday_of_month, True))
    return None


def _schedule_payload(
    every: int,
    period: Period | str,
    start_date: str,
    end_date: str,
    weekdays: list[Weekday | str] | None,
    days_of_month: list[int] | None,
    weekday_of_month: str,
    detail_key: str,
    detail: dict[str, Any],
) -> dict[str, Any]:
    body: dict[str, Any] = {"every": every, "period": _plain(period)}
    if start_date:
        body["start_date"] = _parse_day(start_date).isoformat()
    body["end_date"] = _parse_day(end_date).isoformat() if end_date else None
    on = _on(period, weekdays, days_of_month, weekday_of_month)
    if on is not None:
        body["on"] = on
    body[detail_key] = detail
    return body


@dataclass
class CreateChargeSchedule(Operation):
    """Create a schedule that charges a customer.

    Dates are ``YYYY-MM-DD`` strings; an empty start date is left to the server.
    """

    every: int = 0
    period: Period | str = ""
    start_date: str = ""
    end_date: str = ""
    weekdays: list[Weekday | str] | None = None
    days_of_month: list[int] | None = None
    weekday_of_month: str = ""
    customer: str = ""
    amount: int = 0
    currency: str = ""
    card: str = ""
    description: str = ""

    def describe(self) -> Description:
        return Description(Endpoint.API, "POST", "/schedules", "application/json")

    def payload(self) -> dict[str, Any]:
        charge = _object(
            ("customer", self.customer, False),
            ("amount", self.amount, False),
            ("currency", self.currency, True),
            ("card", self.card, True),
            ("description", self.description, True),
        )
        return _schedule_payload(
            self.every,
            self.period,
            self.start_date,
            self.end_date,
            self.weekdays,
            self.days_of_month,
            self.weekday_of_month,
            "charge",
            charge,
        )


@dataclass
class CreateTransferSchedule(Operation):
    """Create a schedule that transfers to a recipient.

    Either ``amount`` or ``percentage_of_balance`` sets how much is sent.
    """

    every: int = 0
    period: Period | str = ""
    start_date: str = ""
    end_date: str = ""
    weekdays: list[Weekday | str] | None = None
    days_of_month: list[int] | None = None
    weekday_of_month: str = ""
    recipient: str = ""
    amount: int = 0
    percentage_of_balance: float = 0.0

    def describe(self) -> Description:
        return Description(Endpoint.API, "POST", "/schedules", "application/json")

    def payload(self) -> dict[str, Any]:
        transfer = _object(
            ("recipient", self.recipient, False),
            ("amount", self.amount, True),
            ("percentage_of_balance", self.percentage_of_balance, True),
        )
        return _schedule_payload(
            self.every,
            self.period,
            self.start_date,
            self.end_date,
            self.weekdays,
            self.days_of_month,
            self.weekday_of_month,
            "transfer",
            transfer,
        )


@dataclass
class ListSchedules(ListParams, Operation):
    """List all schedules."""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/schedules", "application/json")


@dataclass
class ListScheduleOccurrences(ListParams, Operation):
    """List the occurrences of a schedule."""

    schedule_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API,
            "GET",
            f"/schedules/{self.schedule_id}/occurrences",
            "application/json",
        )


@dataclass
class ListChargeSchedules(ListParams, Operation):
    """List charge schedules."""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/charges/schedules", "application/json")


@dataclass
class ListTransferSchedules(ListParams, Operation):
    """List transfer schedules."""

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/transfers/schedules", "application/json")


@dataclass
class RetrieveSchedule(Operation):
    """Retrieve one schedule by its id."""

    schedule_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "GET", "/schedules/" + self.schedule_id, "application/json"
        )


@dataclass
class DestroySchedule(Operation):
    """Delete a schedule."""

    schedule_id: str = ""

    def describe(self) -> Description:
        return Description(
            Endpoint.API, "DELETE", "/schedules/" + self.schedule_id, "application/json"
        )