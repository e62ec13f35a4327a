from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class MovieCollectionBase(BaseModel):
    name: str
    url: str


class MovieCollectionCreate(MovieCollectionBase):
    is_default: Optional[bool] = None


class MovieCollectionUpdate(BaseModel):
    # All optional; null and omitted both keep the stored value
    name: Optional[str] = None
    url: Optional[str] = None
    is_default: Optional[bool] = None


class MovieCollectionRead(MovieCollectionBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    is_default: bool
    created_at: Optional[datetime] = None


class MovieCollectionList(BaseModel):
    collections: List[MovieCollectionRead]
    total: int
    page: int
    limit: int
