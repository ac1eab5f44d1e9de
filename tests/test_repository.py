"""
Tests for showcase.database.repository and showcase.database.database

What's Being Tested:
    - find_by_id / find_all / find_many / count
    - Explicit eager loading through ``include`` paths
    - Cascades: artist -> artworks, join rows for artworks and exhibitions
    - Store failures surfacing as PersistenceError / ConcurrencyConflictError
"""

import pytest
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm.exc import StaleDataError

from showcase.database import Artist, Artwork, Exhibition, artwork_exhibitions
from showcase.exceptions import (
    ConcurrencyConflictError,
    PersistenceError,
    UnknownRelationshipError,
)


def _join_rows(session) -> int:
    return session.execute(select(func.count()).select_from(artwork_exhibitions)).scalar_one()


class TestQueries:

    def test_find_by_id_returns_none_for_unknown_id(self, repo) -> None:
        assert repo.find_by_id(Artist, 99) is None

    def test_save_assigns_identity(self, repo) -> None:
        artist = repo.save(Artist(first_name="Ada", last_name="Lovelace"))
        assert artist.id is not None
        assert repo.find_by_id(Artist, artist.id).first_name == "Ada"

    def test_find_all_is_ordered_by_id(self, repo) -> None:
        for name in ("Claude", "Berthe", "Auguste"):
            repo.save(Artist(first_name=name, last_name="X"))
        names = [a.first_name for a in repo.find_all(Artist)]
        assert names == ["Claude", "Berthe", "Auguste"]

    def test_find_many_skips_unknown_ids(self, repo, make_artist, make_artwork) -> None:
        artist_id = make_artist()
        first = make_artwork(artist_id)
        second = make_artwork(artist_id, title="Second")
        found = repo.find_many(Artwork, [second, 404, first])
        assert [a.id for a in found] == [first, second]

    def test_find_many_with_no_ids(self, repo) -> None:
        assert repo.find_many(Artwork, []) == []

    def test_count(self, repo, make_artist) -> None:
        assert repo.count(Artist) == 0
        make_artist()
        make_artist(first_name="Grace", last_name="Hopper")
        assert repo.count(Artist) == 2


class TestEagerLoading:

    def test_relationships_not_named_are_not_loaded(self, repo, make_artist, make_artwork) -> None:
        artist_id = make_artist()
        make_artwork(artist_id)
        repo.session.expunge_all()
        artist = repo.find_by_id(Artist, artist_id)
        assert "artworks" in inspect(artist).unloaded

    def test_named_relationship_is_loaded(self, repo, make_artist, make_artwork) -> None:
        artist_id = make_artist()
        make_artwork(artist_id)
        repo.session.expunge_all()
        artist = repo.find_by_id(Artist, artist_id, include=("artworks",))
        assert "artworks" not in inspect(artist).unloaded
        assert len(artist.artworks) == 1

    def test_dotted_path_loads_transitively(self, repo, make_artist, make_artwork, make_exhibition) -> None:
        artist_id = make_artist()
        artwork_id = make_artwork(artist_id)
        exhibition_id = make_exhibition([artwork_id])
        repo.session.expunge_all()
        exhibition = repo.find_by_id(Exhibition, exhibition_id, include=("artworks.artist",))
        artwork = exhibition.artworks[0]
        assert "artist" not in inspect(artwork).unloaded
        assert artwork.artist.first_name == "Ada"

    def test_unknown_path_raises(self, repo) -> None:
        with pytest.raises(UnknownRelationshipError) as exc_info:
            repo.find_all(Artist, include=("artworks.paintings",))
        assert exc_info.value.path == "artworks.paintings"


class TestCascades:

    def test_removing_artist_removes_its_artworks(self, repo, make_artist, make_artwork) -> None:
        ada = make_artist()
        grace = make_artist(first_name="Grace", last_name="Hopper")
        make_artwork(ada)
        make_artwork(ada, title="Notes")
        kept = make_artwork(grace, title="Compiler")

        repo.remove(repo.find_by_id(Artist, ada))

        assert [a.id for a in repo.find_all(Artwork)] == [kept]

    def test_removing_artwork_keeps_exhibition(self, repo, make_artist, make_artwork, make_exhibition) -> None:
        artwork_id = make_artwork(make_artist())
        exhibition_id = make_exhibition([artwork_id])
        assert _join_rows(repo.session) == 1

        repo.remove(repo.find_by_id(Artwork, artwork_id))

        assert _join_rows(repo.session) == 0
        exhibition = repo.find_by_id(Exhibition, exhibition_id, include=("artworks",))
        assert exhibition is not None
        assert exhibition.artworks == []

    def test_removing_exhibition_keeps_artworks(self, repo, make_artist, make_artwork, make_exhibition) -> None:
        artwork_id = make_artwork(make_artist())
        exhibition_id = make_exhibition([artwork_id])

        repo.remove(repo.find_by_id(Exhibition, exhibition_id))

        assert _join_rows(repo.session) == 0
        assert repo.find_by_id(Artwork, artwork_id) is not None

    def test_association_is_symmetric(self, repo, make_artist, make_artwork) -> None:
        artwork = repo.find_by_id(Artwork, make_artwork(make_artist()))
        exhibition = repo.save(Exhibition(name="Pioneers", artworks=[artwork]))

        reloaded = repo.find_by_id(Artwork, artwork.id, include=("exhibitions",))
        assert [e.id for e in reloaded.exhibitions] == [exhibition.id]


class TestFailures:

    def test_query_failure_becomes_persistence_error(self, repo, monkeypatch) -> None:
        def unreachable(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        monkeypatch.setattr(repo.session, "execute", unreachable)
        with pytest.raises(PersistenceError):
            repo.find_all(Artist)

    def test_stale_commit_becomes_concurrency_conflict(self, repo, monkeypatch) -> None:
        def stale():
            raise StaleDataError("UPDATE statement on table 'artists' expected to update 1 row(s); 0 were matched.")

        monkeypatch.setattr(repo.session, "commit", stale)
        with pytest.raises(ConcurrencyConflictError):
            repo.save(Artist(first_name="Ada", last_name="Lovelace"))

    def test_concurrency_conflict_is_a_persistence_error(self) -> None:
        assert issubclass(ConcurrencyConflictError, PersistenceError)
