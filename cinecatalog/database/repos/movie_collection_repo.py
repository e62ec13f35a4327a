# cinecatalog/database/repos/movie_collection_repo.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import select, func, insert, update, delete as sa_delete
from sqlalchemy.orm import Session

from cinecatalog.database.models.catalog import MovieCollection as DBMovieCollection
from cinecatalog.database.repos._mapping import to_domain_collection
from cinecatalog.database.repos._search import apply_search
from cinecatalog.domain.entities.movie_collection import (
    MovieCollection as DomainMovieCollection,
    MovieCollectionPatch,
    NewMovieCollection,
)
from cinecatalog.domain.policies.pagination import PageRequest

SEARCH_COLUMNS = (DBMovieCollection.name, DBMovieCollection.url)


class SqlAlchemyMovieCollectionRepo:
    """
    CRUD for movie collections.

    Notes
    -----
    * Every write is a single statement (INSERT/UPDATE/DELETE ... RETURNING where
      a row is needed back); row-level atomicity is left to the database.
    * Collections flagged is_default can never be deleted here. A delete on a
      protected row and a delete on a missing id both return False.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def list_collections(self, page: PageRequest) -> list[DomainMovieCollection]:
        stmt = apply_search(select(DBMovieCollection), page.search, SEARCH_COLUMNS)
        stmt = (
            stmt
            .order_by(
                DBMovieCollection.is_default.desc(),
                DBMovieCollection.created_at.desc(),
                DBMovieCollection.id.desc(),
            )
            .limit(page.limit)
            .offset(page.offset)
        )
        rows = self.db.execute(stmt).scalars().all()
        return [to_domain_collection(r) for r in rows]

    def count_collections(self, search: str = "") -> int:
        stmt = apply_search(select(func.count()).select_from(DBMovieCollection), search, SEARCH_COLUMNS)
        return int(self.db.execute(stmt).scalar_one())

    def get_by_id(self, collection_id: int) -> Optional[DomainMovieCollection]:
        stmt = (
            select(DBMovieCollection)
            .where(DBMovieCollection.id == collection_id)
            .execution_options(populate_existing=True)
        )
        row = self.db.execute(stmt).scalars().first()
        return to_domain_collection(row) if row else None

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def create(self, data: NewMovieCollection) -> DomainMovieCollection:
        stmt = (
            insert(DBMovieCollection)
            .values(
                name=data.name,
                url=data.url,
                is_default=bool(data.is_default) if data.is_default is not None else False,
            )
            .returning(DBMovieCollection)
        )
        row = self.db.execute(stmt).scalars().one()
        return to_domain_collection(row)

    def update_partial(self, collection_id: int, patch: MovieCollectionPatch) -> Optional[DomainMovieCollection]:
        """
        COALESCE each column with its current value, so None in the patch keeps
        what is stored. Returns None when no row has this id.
        """
        if patch.is_empty():
            return self.get_by_id(collection_id)
        stmt = (
            update(DBMovieCollection)
            .where(DBMovieCollection.id == collection_id)
            .values(
                name=func.coalesce(patch.name, DBMovieCollection.name),
                url=func.coalesce(patch.url, DBMovieCollection.url),
                is_default=func.coalesce(patch.is_default, DBMovieCollection.is_default),
            )
            .returning(DBMovieCollection)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        row = self.db.execute(stmt).scalars().first()
        return to_domain_collection(row) if row else None

    def delete(self, collection_id: int) -> bool:
        stmt = (
            sa_delete(DBMovieCollection)
            .where(
                DBMovieCollection.id == collection_id,
                DBMovieCollection.is_default.is_(False),
            )
            .returning(DBMovieCollection.id)
            .execution_options(synchronize_session=False)
        )
        deleted = self.db.execute(stmt).scalars().first()
        return deleted is not None
