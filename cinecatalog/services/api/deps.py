# cinecatalog/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session, sessionmaker


def get_session_factory(request: Request) -> sessionmaker[Session]:
    """
    The session factory (and the pooled engine behind it) is owned by the app
    instance; see create_app.
    """
    return request.app.state.session_factory


def get_db(factory: sessionmaker[Session] = Depends(get_session_factory)) -> Generator[Session, None, None]:
    db = factory()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo using this session participates in
    the same transaction.

    Usage in routers:
      def endpoint(session: Session = Depends(transactional_session)):
          ...
    """
    # Session.begin() commits on normal exit and rolls back if an exception bubbles out.
    with db.begin():
        yield db
