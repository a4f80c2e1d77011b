"""Operation objects: which API call to make and the parameters to send with it."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from ..enums import Ordering, _StrEnum
from ..models import _format_time


class Endpoint(_StrEnum):
    """The API host an operation is sent to."""

    API = "api"
    VAULT = "vault"


@dataclass(frozen=True)
class Description:
    """Where and how an operation is sent."""

    endpoint: Endpoint
    method: str
    path: str
    content_type: str = ""
    api_key: str = ""


def _plain(value: Any) -> Any:
    """Turn enums and mappings into JSON-ready values; mapping keys are sorted."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {
            str(key): _plain(item)
            for key, item in sorted(value.items(), key=lambda pair: str(pair[0]))
        }
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _object(*entries: tuple[str, Any, bool]) -> dict[str, Any]:
    """Build a payload from ``(key, value, omit_if_empty)`` entries, keeping their order."""
    return {key: _plain(value) for key, value, omit in entries if not (omit and not value)}


def _json_time(moment: datetime | None) -> str | None:
    return None if moment is None else _format_time(moment)


class Operation(ABC):
    """An API call together with the parameters it sends."""

    @abstractmethod
    def describe(self) -> Description:
        """Return the endpoint, method and path of this operation."""

    def payload(self) -> dict[str, Any]:
        """Return the parameters sent with this operation."""
        return {}

    def to_json(self) -> str:
        """Return the payload as compact JSON."""
        return json.dumps(self.payload(), separators=(",", ":"), ensure_ascii=False)


@dataclass(kw_only=True)
class ListParams:
    """Pagination parameters shared by list operations.

    Not an operation by itself: list operations combine it with ``Operation``.
    """

    offset: int = 0
    limit: int = 0
    from_: datetime | None = None
    to: datetime | None = None
    order: Ordering | str = Ordering.UNSPECIFIED

    def payload(self) -> dict[str, Any]:
        return _object(
            ("offset", self.offset, True),
            ("limit", self.limit, True),
            ("order", self.order, True),
            ("from", _json_time(self.from_), True),
            ("to", _json_time(self.to), True),
        )