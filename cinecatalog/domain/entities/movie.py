# cinecatalog/domain/entities/movie.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from cinecatalog.domain.enums.storage_type import StorageType


@dataclass(frozen=True)
class Movie:
    """
    A movie exactly as stored: genres and actors are single comma-delimited
    strings. Read-only from the API's point of view.
    """
    id: int
    name: str
    movie_url: str
    image_url: str
    description: str = ""
    rating: float = 0.0
    genres: str = ""
    director: str = ""
    actors: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class MovieWithStorage:
    """
    Wire view of a Movie: multi-value fields split into lists and tagged with
    the backend that produced the record.
    """
    id: int
    name: str
    movie_url: str
    image_url: str
    description: str
    rating: float
    genres: List[str] = field(default_factory=list)
    director: str = ""
    actors: List[str] = field(default_factory=list)
    storage_type: StorageType = StorageType.server_db
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
