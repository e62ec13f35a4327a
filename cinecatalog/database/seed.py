# cinecatalog/database/seed.py
"""
Seed/import for the catalog. Movies only ever enter the database through
here; the API exposes them read-only.

    python -m cinecatalog.database.seed movies.json \
        --default-collection "All movies" --default-url /movies
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

from sqlalchemy import func, insert, select
from sqlalchemy.orm import Session

from cinecatalog.common.logging import get_logger
from cinecatalog.common.settings import get_settings
from cinecatalog.common.strings.splitters import join_delimited
from cinecatalog.database.core.main import build_engine, build_session_factory, session_scope
from cinecatalog.database.models.catalog import Movie as DBMovie, MovieCollection as DBMovieCollection

logger = get_logger(__name__)

_REQUIRED = ("name", "movie_url", "image_url")


def normalize_movie_record(raw: Mapping[str, Any]) -> dict:
    """
    Coerce one imported record into column values. genres/actors may arrive
    as lists or as delimited strings; both are stored as "a, b, c".
    """
    missing = [k for k in _REQUIRED if not raw.get(k)]
    if missing:
        raise ValueError(f"movie record missing required field(s): {', '.join(missing)}")
    rating = raw.get("rating")
    return {
        "name": str(raw["name"]),
        "movie_url": str(raw["movie_url"]),
        "image_url": str(raw["image_url"]),
        "description": str(raw.get("description") or ""),
        "rating": float(rating) if rating is not None else 0.0,
        "genres": join_delimited(raw.get("genres")),
        "director": str(raw.get("director") or ""),
        "actors": join_delimited(raw.get("actors")),
    }


def load_movie_records(path: Path) -> List[dict]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("movies", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of movies")
    return [normalize_movie_record(r) for r in data]


def seed_movies(session: Session, records: Iterable[Mapping[str, Any]]) -> int:
    rows = [dict(r) for r in records]
    if not rows:
        return 0
    session.execute(insert(DBMovie), rows)
    logger.info("Seeded %d movies", len(rows))
    return len(rows)


def ensure_default_collection(session: Session, name: str, url: str) -> Optional[int]:
    """
    Create a default collection unless at least one already exists.
    Returns the new id, or None when nothing was created.
    """
    stmt = select(func.count()).select_from(DBMovieCollection).where(DBMovieCollection.is_default.is_(True))
    if session.execute(stmt).scalar_one() > 0:
        return None
    new_id = session.execute(
        insert(DBMovieCollection)
        .values(name=name, url=url, is_default=True)
        .returning(DBMovieCollection.id)
    ).scalar_one()
    logger.info("Created default collection %r (id=%s)", name, new_id)
    return new_id


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Import movies into the catalog database.")
    parser.add_argument("movies_json", type=Path)
    parser.add_argument("--default-collection", default=None, help="Name of a default collection to ensure")
    parser.add_argument("--default-url", default="/", help="URL for the default collection")
    args = parser.parse_args(argv)

    cfg = get_settings()
    engine = build_engine(cfg)
    try:
        records = load_movie_records(args.movies_json)
        with session_scope(build_session_factory(engine)) as session:
            seed_movies(session, records)
            if args.default_collection:
                ensure_default_collection(session, args.default_collection, args.default_url)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
