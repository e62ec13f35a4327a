# tests/database/test_movie_collection_repo.py
from __future__ import annotations

from cinecatalog.database.repos.movie_collection_repo import SqlAlchemyMovieCollectionRepo
from cinecatalog.domain.entities.movie_collection import MovieCollectionPatch, NewMovieCollection
from cinecatalog.domain.policies.pagination import PageRequest


def test_create_defaults_is_default_to_false(db):
    repo = SqlAlchemyMovieCollectionRepo(db)

    c = repo.create(NewMovieCollection(name="Watch later", url="/later"))
    assert c.id is not None
    assert c.is_default is False
    assert c.created_at is not None

    got = repo.get_by_id(c.id)
    assert got is not None
    assert (got.name, got.url, got.is_default) == ("Watch later", "/later", False)


def test_update_partial_keeps_omitted_fields(db):
    repo = SqlAlchemyMovieCollectionRepo(db)
    c = repo.create(NewMovieCollection(name="Old", url="/old", is_default=True))

    upd = repo.update_partial(c.id, MovieCollectionPatch(name="X"))
    assert upd is not None
    assert upd.name == "X"
    assert upd.url == "/old"
    assert upd.is_default is True

    # all-None patch is a no-op, not a clear
    same = repo.update_partial(c.id, MovieCollectionPatch())
    assert (same.name, same.url, same.is_default) == ("X", "/old", True)

    flipped = repo.update_partial(c.id, MovieCollectionPatch(is_default=False, url="/new"))
    assert (flipped.name, flipped.url, flipped.is_default) == ("X", "/new", False)

    reread = repo.get_by_id(c.id)
    assert (reread.name, reread.url, reread.is_default) == ("X", "/new", False)


def test_update_missing_returns_none(db):
    repo = SqlAlchemyMovieCollectionRepo(db)
    assert repo.update_partial(987654, MovieCollectionPatch(name="nope")) is None
    assert repo.update_partial(987654, MovieCollectionPatch()) is None


def test_delete_refuses_default_and_matches_missing_outcome(db):
    repo = SqlAlchemyMovieCollectionRepo(db)
    fav = repo.create(NewMovieCollection(name="Favorites", url="/fav", is_default=True))

    protected = repo.delete(fav.id)
    missing = repo.delete(fav.id + 10_000)
    assert protected is False
    assert protected == missing

    still_there = repo.get_by_id(fav.id)
    assert still_there is not None and still_there.is_default is True


def test_delete_non_default_removes_exactly_that_row(db):
    repo = SqlAlchemyMovieCollectionRepo(db)
    a = repo.create(NewMovieCollection(name="A", url="/a"))
    b = repo.create(NewMovieCollection(name="B", url="/b"))

    assert repo.delete(a.id) is True
    assert repo.get_by_id(a.id) is None
    assert repo.get_by_id(b.id) is not None
    assert repo.delete(a.id) is False


def test_list_defaults_first_then_newest_and_search(db):
    repo = SqlAlchemyMovieCollectionRepo(db)
    a = repo.create(NewMovieCollection(name="Alpha", url="/alpha"))
    d1 = repo.create(NewMovieCollection(name="Default one", url="/d1", is_default=True))
    b = repo.create(NewMovieCollection(name="Beta", url="/beta/SPECIAL"))
    d2 = repo.create(NewMovieCollection(name="Default two", url="/d2", is_default=True))

    out = repo.list_collections(PageRequest.from_query())
    assert [c.id for c in out] == [d2.id, d1.id, b.id, a.id]

    # url is searched too, case-insensitively
    hits = repo.list_collections(PageRequest.from_query(search="special"))
    assert [c.id for c in hits] == [b.id]
    assert repo.count_collections("special") == 1
    assert repo.count_collections("default") == 2
    assert repo.count_collections() == 4

    page2 = repo.list_collections(PageRequest.from_query(page=2, limit=3))
    assert [c.id for c in page2] == [a.id]
