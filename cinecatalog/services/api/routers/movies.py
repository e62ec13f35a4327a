from __future__ import annotations

from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cinecatalog.database.repos.movie_repo import MovieRepo
from cinecatalog.domain.policies.pagination import PageRequest
from cinecatalog.services.api.deps import get_db
from cinecatalog.services.api.errors import count_or_zero, storage_failure
from cinecatalog.services.mappers.movie import to_movie_with_storage, to_read_schema
from cinecatalog.services.schemas import ErrorResponse, MovieList, MovieRead

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=MovieList, responses={500: {"model": ErrorResponse}})
def list_movies(
    page: Optional[int] = Query(None, description="1-based page; values below 1 become 1"),
    limit: Optional[int] = Query(None, description="Page size, clamped to 1..100 (default 20)"),
    search: Optional[str] = Query(None, description="Case-insensitive substring of name/description/director"),
    db: Session = Depends(get_db),
) -> MovieList:
    pr = PageRequest.from_query(page=page, limit=limit, search=search)
    repo = MovieRepo(session=db)
    try:
        movies = repo.list_movies(pr)
    except SQLAlchemyError:
        storage_failure("Failed to fetch movies")

    total = count_or_zero(repo.count_movies, pr.search, "movies")
    return MovieList(
        movies=[to_read_schema(to_movie_with_storage(m)) for m in movies],
        total=total,
        page=pr.page,
        limit=pr.limit,
    )


@router.get(
    "/{movie_id}",
    response_model=MovieRead,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_movie(movie_id: int = Path(...), db: Session = Depends(get_db)) -> MovieRead:
    repo = MovieRepo(session=db)
    try:
        found = repo.get_by_id(movie_id)
    except SQLAlchemyError:
        storage_failure("Failed to fetch movie")
    if not found:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Movie not found")
    return to_read_schema(to_movie_with_storage(found))
