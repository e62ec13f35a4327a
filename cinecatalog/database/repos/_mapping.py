# cinecatalog/database/repos/_mapping.py
from __future__ import annotations
from cinecatalog.database.models.catalog import Movie as DBMovie, MovieCollection as DBMovieCollection
from cinecatalog.domain.entities.movie import Movie as DomainMovie
from cinecatalog.domain.entities.movie_collection import MovieCollection as DomainMovieCollection


def to_domain_movie(row: DBMovie) -> DomainMovie:
    return DomainMovie(
        id=row.id,
        name=row.name,
        movie_url=row.movie_url,
        image_url=row.image_url,
        description=row.description or "",
        rating=float(row.rating) if row.rating is not None else 0.0,
        genres=row.genres or "",
        director=row.director or "",
        actors=row.actors or "",
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_domain_collection(row: DBMovieCollection) -> DomainMovieCollection:
    return DomainMovieCollection(
        id=row.id,
        name=row.name,
        url=row.url,
        is_default=bool(row.is_default),
        created_at=row.created_at,
    )
