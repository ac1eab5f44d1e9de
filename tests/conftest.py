"""
Shared test fixtures for the showcase catalogue.

Every test gets its own in-memory SQLite database, so nothing leaks between
tests. Seed helpers go through the managers, the same way requests do.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from showcase.api import create_app
from showcase.config import Settings
from showcase.database import Database, Repository
from showcase.schemas import ArtistDto, ArtworkDto, ExhibitionDto, ServiceStatus
from showcase.services import artist_manager, artwork_manager, exhibition_manager


@pytest.fixture
def database():
    """Fresh in-memory database with all tables created."""
    db = Database("sqlite://")
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    with database.session_scope() as session:
        yield session


@pytest.fixture
def repo(session) -> Repository:
    return Repository(session)


@pytest.fixture
def client(database):
    app = create_app(database, Settings(database_url="sqlite://"))
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Seed helpers
# =============================================================================

@pytest.fixture
def make_artist(repo):
    def _make(first_name="Ada", last_name="Lovelace", bio="Mathematician", email="a@x.com") -> int:
        response = artist_manager.create_artist(
            repo,
            ArtistDto(first_name=first_name, last_name=last_name, bio=bio, email=email)
        )
        assert response.status == ServiceStatus.CREATED
        return response.created_id
    return _make


@pytest.fixture
def make_artwork(repo):
    def _make(artist_id: int, title="Analytical Sketch", description="Pen on paper",
              creation_year=1843, price=Decimal("0")) -> int:
        response = artwork_manager.create_artwork(
            repo,
            ArtworkDto(title=title, description=description, creation_year=creation_year,
                       price=price, artist_id=artist_id)
        )
        assert response.status == ServiceStatus.CREATED
        return response.created_id
    return _make


@pytest.fixture
def make_exhibition(repo):
    def _make(artwork_ids=(), name="Pioneers", location="London") -> int:
        response = exhibition_manager.create_exhibition(
            repo,
            ExhibitionDto(name=name, location=location, artworks=[ArtworkDto(id=i) for i in artwork_ids])
        )
        assert response.status == ServiceStatus.CREATED
        return response.created_id
    return _make
