from datetime import datetime, timezone

from cinecatalog.domain.entities.movie import Movie
from cinecatalog.domain.enums.storage_type import StorageType
from cinecatalog.services.mappers.movie import to_movie_with_storage, to_read_schema


def _movie(**kw) -> Movie:
    base = dict(
        id=7,
        name="Oppenheimer",
        movie_url="https://example.test/w/7",
        image_url="https://example.test/p/7.jpg",
        description="  untouched  ",
        rating=8.4,
        genres="Action, Drama,Comedy",
        director="Christopher Nolan",
        actors="Cillian Murphy,  Emily Blunt ",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
    )
    base.update(kw)
    return Movie(**base)


def test_splits_multi_value_fields_and_tags_storage():
    view = to_movie_with_storage(_movie())
    assert view.genres == ["Action", "Drama", "Comedy"]
    assert view.actors == ["Cillian Murphy", "Emily Blunt"]
    assert view.storage_type == StorageType.server_db


def test_other_fields_pass_through_unchanged():
    m = _movie()
    view = to_movie_with_storage(m)
    assert view.description == "  untouched  "
    assert (view.id, view.name, view.rating, view.director) == (m.id, m.name, m.rating, m.director)
    assert (view.created_at, view.updated_at) == (m.created_at, m.updated_at)


def test_empty_segments_survive():
    view = to_movie_with_storage(_movie(genres="Drama,,", actors=""))
    assert view.genres == ["Drama", "", ""]
    assert view.actors == [""]


def test_read_schema_serializes_storage_tag():
    out = to_read_schema(to_movie_with_storage(_movie())).model_dump()
    assert out["storage_type"] == "serverDB"
    assert out["genres"] == ["Action", "Drama", "Comedy"]
