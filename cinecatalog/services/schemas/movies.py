from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MovieRead(BaseModel):
    """Wire view of a movie (genres/actors already split)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    movie_url: str
    image_url: str
    description: str
    rating: float
    genres: List[str] = Field(default_factory=list)
    director: str
    actors: List[str] = Field(default_factory=list)
    storage_type: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MovieList(BaseModel):
    movies: List[MovieRead]
    total: int
    page: int
    limit: int
