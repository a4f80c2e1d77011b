"""The search operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..enums import Ordering, SearchScope
from .base import Description, Endpoint, Operation, _object


@dataclass
class Search(Operation):
    """Search objects of one scope."""

    scope: SearchScope | str = SearchScope.UNSPECIFIED
    query: str = ""
    filters: dict[str, str] | None = None
    order: Ordering | str = Ordering.UNSPECIFIED
    page: int = 0
    per_page: int = 0

    def describe(self) -> Description:
        return Description(Endpoint.API, "GET", "/search", "application/json")

    def payload(self) -> dict[str, Any]:
        return _object(
            ("scope", self.scope, False),
            ("query", self.query, True),
            ("filters", self.filters, True),
            ("order", self.order, True),
            ("page", self.page, True),
            ("per_page", self.per_page, True),
        )