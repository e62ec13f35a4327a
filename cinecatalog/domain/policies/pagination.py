# cinecatalog/domain/policies/pagination.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 100
# Largest page a client can ask for (signed 32-bit)
MAX_PAGE = 2**31 - 1


@dataclass(frozen=True)
class PageRequest:
    """
    Normalized pagination + search. Build it with `PageRequest.from_query`;
    out-of-range values are clamped, never rejected.
    """
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: str = ""

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_query(
        cls,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        search: Optional[str] = None,
    ) -> "PageRequest":
        return cls(
            page=clamp_page(page),
            limit=clamp_limit(limit),
            search=search or "",
        )


def clamp_page(page: Optional[int]) -> int:
    if page is None:
        return DEFAULT_PAGE
    return min(max(page, 1), MAX_PAGE)


def clamp_limit(limit: Optional[int]) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    return min(max(limit, MIN_LIMIT), MAX_LIMIT)
