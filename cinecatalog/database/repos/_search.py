# cinecatalog/database/repos/_search.py
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import ColumnElement, Select, or_
from sqlalchemy.orm import InstrumentedAttribute


def substring_filter(search: str, columns: Sequence[InstrumentedAttribute]) -> Optional[ColumnElement[bool]]:
    """
    Case-insensitive substring match OR-ed across `columns`, or None for an
    empty search. The term is always a bound parameter.
    """
    if not search:
        return None
    pattern = f"%{search}%"
    return or_(*(col.ilike(pattern) for col in columns))


def apply_search(stmt: Select, search: str, columns: Sequence[InstrumentedAttribute]) -> Select:
    crit = substring_filter(search, columns)
    return stmt if crit is None else stmt.where(crit)
