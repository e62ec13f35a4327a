from __future__ import annotations

from sqlalchemy import Boolean, Float, Index, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from cinecatalog.database.core.main import Base
from cinecatalog.database.core.service_object import ServiceObject, Timestamped


class Movie(Timestamped, Base):
    """
    A catalog movie. Rows are written by the seed/import process only;
    genres and actors are comma-delimited strings.
    """
    __tablename__ = "movies"
    __table_args__ = (
        Index("ix_movies_created_at", "created_at"),
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    movie_url: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("''"))
    rating: Mapped[float] = mapped_column(Float, nullable=False, server_default=text("0"))
    genres: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("''"))
    director: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("''"))
    actors: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("''"))

    def __repr__(self) -> str:
        return f"<Movie id={self.id} name={self.name!r}>"


class MovieCollection(ServiceObject, Base):
    """
    A named link to a group of movies. Rows with is_default=true cannot be
    deleted through the API; more than one default row is allowed.
    """
    __tablename__ = "movie_collections"
    __table_args__ = (
        Index("ix_movie_collections_default_created", "is_default", "created_at"),
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))

    def __repr__(self) -> str:
        return f"<MovieCollection id={self.id} name={self.name!r} default={self.is_default}>"
