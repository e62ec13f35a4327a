# cinecatalog/database/core/main.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import MetaData, create_engine, event, Column, Table
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from cinecatalog.common.settings import Settings, get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

_serviceobject_first = ("id", "name")
_serviceobject_last = ("created_at", "updated_at")


def _app_schema(schema: str | None) -> str | None:
    return schema if schema and schema.lower() != "public" else None


class Base(DeclarativeBase):
    metadata = MetaData(
        schema=_app_schema(_settings.db_schema),
        naming_convention=NAMING_CONVENTION,
    )

    @classmethod
    def __table_cls__(cls, *args, **kw):
        """Reorder columns: id/name first, timestamps last."""
        if not args:
            return super().__table_cls__(*args, **kw)

        # Positional args are (name, metadata, *columns_and_constraints)
        name, metadata, *rest = args

        cols: List[Column] = [x for x in rest if isinstance(x, Column)]
        others = [x for x in rest if not isinstance(x, Column)]

        priority = {n: i for i, n in enumerate(_serviceobject_first)}
        priority.update({n: 20_000 + i for i, n in enumerate(_serviceobject_last)})
        original_index = {c: i for i, c in enumerate(cols)}

        cols.sort(key=lambda c: (priority.get(c.name, 10_000), original_index[c]))

        return Table(name, metadata, *(cols + others), **kw)


def build_engine(settings: Settings | None = None, url: str | None = None) -> Engine:
    """
    Create the pooled engine. The app factory owns the result and hands it to
    requests through dependencies; nothing here keeps a module-level pool.
    """
    cfg = settings or get_settings()
    db_url = url or cfg.database_url
    kwargs = dict(echo=cfg.db.echo, pool_pre_ping=cfg.db.pool_pre_ping, future=True)
    if not make_url(db_url).get_backend_name().startswith("sqlite"):
        kwargs.update(
            pool_size=cfg.db.pool_size,
            max_overflow=cfg.db.max_overflow,
            pool_recycle=cfg.db.pool_recycle,
        )
    engine = create_engine(db_url, **kwargs)

    # Ensure the app schema is first, then public (so extensions remain visible)
    schema = _app_schema(cfg.db_schema)
    if schema and engine.dialect.name == "postgresql":
        @event.listens_for(engine, "connect")
        def _set_search_path(dbapi_conn, _):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{schema}", public')

    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """
    Yield a transaction-scoped Session. Commits on success, rolls back on error.
    """
    session: Session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
