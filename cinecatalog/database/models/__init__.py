# cinecatalog/database/models/__init__.py

from cinecatalog.database.core.main import Base
from cinecatalog.database.models.catalog import (
    Movie,
    MovieCollection,
)

__all__ = [
    "Base",
    "Movie",
    "MovieCollection",
]
