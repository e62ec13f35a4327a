from cinecatalog.services.schemas.movies import (
    MovieRead,
    MovieList,
)
from cinecatalog.services.schemas.movie_collections import (
    MovieCollectionCreate,
    MovieCollectionUpdate,
    MovieCollectionRead,
    MovieCollectionList,
)
from cinecatalog.services.schemas.errors import (
    ErrorResponse
)
__all__ = [
    "MovieRead",
    "MovieList",
    "MovieCollectionCreate",
    "MovieCollectionUpdate",
    "MovieCollectionRead",
    "MovieCollectionList",
    "ErrorResponse",
]
