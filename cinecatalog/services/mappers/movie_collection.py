# cinecatalog/services/mappers/movie_collection.py
from __future__ import annotations

from cinecatalog.domain.entities.movie_collection import (
    MovieCollection,
    MovieCollectionPatch,
    NewMovieCollection,
)
from cinecatalog.services.schemas.movie_collections import (
    MovieCollectionCreate,
    MovieCollectionRead,
    MovieCollectionUpdate,
)


def to_domain_from_create(s: MovieCollectionCreate) -> NewMovieCollection:
    return NewMovieCollection(name=s.name, url=s.url, is_default=s.is_default)


def to_domain_patch(p: MovieCollectionUpdate) -> MovieCollectionPatch:
    return MovieCollectionPatch(name=p.name, url=p.url, is_default=p.is_default)


def to_read_schema(c: MovieCollection) -> MovieCollectionRead:
    return MovieCollectionRead(
        id=c.id,
        name=c.name,
        url=c.url,
        is_default=c.is_default,
        created_at=c.created_at,
    )
