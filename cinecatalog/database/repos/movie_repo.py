# cinecatalog/database/repos/movie_repo.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from cinecatalog.database.models.catalog import Movie as DBMovie
from cinecatalog.database.repos._mapping import to_domain_movie
from cinecatalog.database.repos._search import apply_search
from cinecatalog.domain.entities.movie import Movie as DomainMovie
from cinecatalog.domain.policies.pagination import PageRequest

SEARCH_COLUMNS = (DBMovie.name, DBMovie.description, DBMovie.director)


class MovieRepo:
    """
    Read-only queries for movies. Storage errors propagate to the caller.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_movies(self, page: PageRequest) -> list[DomainMovie]:
        """
        One page of movies, newest first, optionally filtered by a
        case-insensitive substring of name/description/director.
        """
        stmt = apply_search(select(DBMovie), page.search, SEARCH_COLUMNS)
        stmt = (
            stmt
            .order_by(DBMovie.created_at.desc(), DBMovie.id.desc())
            .limit(page.limit)
            .offset(page.offset)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [to_domain_movie(r) for r in rows]

    def count_movies(self, search: str = "") -> int:
        stmt = apply_search(select(func.count()).select_from(DBMovie), search, SEARCH_COLUMNS)
        return int(self.session.execute(stmt).scalar_one())

    def get_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        stmt = select(DBMovie).where(DBMovie.id == movie_id)
        row = self.session.execute(stmt).scalars().first()
        return to_domain_movie(row) if row else None
