from __future__ import annotations

from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cinecatalog.database.repos.movie_collection_repo import SqlAlchemyMovieCollectionRepo
from cinecatalog.domain.policies.pagination import PageRequest
from cinecatalog.services.api.deps import get_db, transactional_session
from cinecatalog.services.api.errors import count_or_zero, storage_failure
from cinecatalog.services.mappers.movie_collection import (
    to_domain_from_create, to_domain_patch, to_read_schema,
)
from cinecatalog.services.schemas import (
    ErrorResponse,
    MovieCollectionCreate,
    MovieCollectionList,
    MovieCollectionRead,
    MovieCollectionUpdate,
)

router = APIRouter(prefix="/movie-collections", tags=["movie-collections"])

_NOT_FOUND = "Movie collection not found"
# Same response for a missing id and a protected default collection
_NOT_DELETED = "Movie collection not found or cannot delete default collection"


@router.get("", response_model=MovieCollectionList, responses={500: {"model": ErrorResponse}})
def list_movie_collections(
    page: Optional[int] = Query(None, description="1-based page; values below 1 become 1"),
    limit: Optional[int] = Query(None, description="Page size, clamped to 1..100 (default 20)"),
    search: Optional[str] = Query(None, description="Case-insensitive substring of name/url"),
    db: Session = Depends(get_db),
) -> MovieCollectionList:
    """
    Default collections first, then newest first.
    """
    pr = PageRequest.from_query(page=page, limit=limit, search=search)
    repo = SqlAlchemyMovieCollectionRepo(db)
    try:
        collections = repo.list_collections(pr)
    except SQLAlchemyError:
        storage_failure("Failed to fetch movie collections")

    total = count_or_zero(repo.count_collections, pr.search, "movie collections")
    return MovieCollectionList(
        collections=[to_read_schema(c) for c in collections],
        total=total,
        page=pr.page,
        limit=pr.limit,
    )


@router.get(
    "/{collection_id}",
    response_model=MovieCollectionRead,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_movie_collection(
    collection_id: int = Path(...),
    db: Session = Depends(get_db),
) -> MovieCollectionRead:
    repo = SqlAlchemyMovieCollectionRepo(db)
    try:
        found = repo.get_by_id(collection_id)
    except SQLAlchemyError:
        storage_failure("Failed to fetch movie collection")
    if not found:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=_NOT_FOUND)
    return to_read_schema(found)


@router.post(
    "",
    response_model=MovieCollectionRead,
    status_code=HTTPStatus.CREATED,
    responses={500: {"model": ErrorResponse}},
)
def create_movie_collection(
    payload: MovieCollectionCreate,
    db: Session = Depends(transactional_session),
) -> MovieCollectionRead:
    repo = SqlAlchemyMovieCollectionRepo(db)
    try:
        created = repo.create(to_domain_from_create(payload))
    except SQLAlchemyError:
        storage_failure("Failed to create movie collection")
    return to_read_schema(created)


@router.api_route(
    "/{collection_id}",
    methods=["PATCH", "PUT"],
    response_model=MovieCollectionRead,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def update_movie_collection(
    payload: MovieCollectionUpdate,
    collection_id: int = Path(...),
    db: Session = Depends(transactional_session),
) -> MovieCollectionRead:
    repo = SqlAlchemyMovieCollectionRepo(db)
    try:
        updated = repo.update_partial(collection_id, to_domain_patch(payload))
    except SQLAlchemyError:
        storage_failure("Failed to update movie collection")
    if not updated:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=_NOT_FOUND)
    return to_read_schema(updated)


@router.delete(
    "/{collection_id}",
    status_code=HTTPStatus.NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_movie_collection(
    collection_id: int = Path(...),
    db: Session = Depends(transactional_session),
) -> None:
    repo = SqlAlchemyMovieCollectionRepo(db)
    try:
        deleted = repo.delete(collection_id)
    except SQLAlchemyError:
        storage_failure("Failed to delete movie collection")
    if not deleted:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=_NOT_DELETED)
    # 204
    return None
