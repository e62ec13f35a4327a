# cinecatalog/domain/entities/movie_collection.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class MovieCollection:
    id: int
    name: str
    url: str
    is_default: bool = False
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewMovieCollection:
    """Values for an INSERT. is_default=None is stored as False."""
    name: str
    url: str
    is_default: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.name is None or self.url is None:
            raise ValueError("name and url are required")


@dataclass(frozen=True)
class MovieCollectionPatch:
    """
    Partial update. None means "keep the stored value"; an absent field and an
    explicit null are treated the same.
    """
    name: Optional[str] = None
    url: Optional[str] = None
    is_default: Optional[bool] = None

    def is_empty(self) -> bool:
        return self.name is None and self.url is None and self.is_default is None
