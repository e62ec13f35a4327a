# cinecatalog/services/mappers/movie.py
from __future__ import annotations

from cinecatalog.common.strings.splitters import split_delimited
from cinecatalog.domain.entities.movie import Movie, MovieWithStorage
from cinecatalog.domain.enums.storage_type import StorageType
from cinecatalog.services.schemas.movies import MovieRead


def to_movie_with_storage(movie: Movie) -> MovieWithStorage:
    """
    Split genres/actors on "," (segments trimmed, empties kept) and tag the
    record with its storage backend. No other field changes.
    """
    return MovieWithStorage(
        id=movie.id,
        name=movie.name,
        movie_url=movie.movie_url,
        image_url=movie.image_url,
        description=movie.description,
        rating=movie.rating,
        genres=split_delimited(movie.genres),
        director=movie.director,
        actors=split_delimited(movie.actors),
        storage_type=StorageType.server_db,
        created_at=movie.created_at,
        updated_at=movie.updated_at,
    )


def to_read_schema(view: MovieWithStorage) -> MovieRead:
    return MovieRead(
        id=view.id,
        name=view.name,
        movie_url=view.movie_url,
        image_url=view.image_url,
        description=view.description,
        rating=view.rating,
        genres=list(view.genres),
        director=view.director,
        actors=list(view.actors),
        storage_type=view.storage_type.value,
        created_at=view.created_at,
        updated_at=view.updated_at,
    )
