# showcase/database/__init__.py

"""
Database package for the Art Showcase catalogue.

Key Components:
    - Database: engine, session factory and the per-request unit of work
    - Repository: persistence gateway with explicit eager loading
    - Models: SQLAlchemy models (Artist, Artwork, Exhibition) and the
      artwork/exhibition join table

Example:
    from showcase.database import Database, Repository, Artist

    db = Database(settings.database_url)
    db.create_tables()

    with db.session_scope() as session:
        repo = Repository(session)
        artist = repo.find_by_id(Artist, 1, include=("artworks",))
"""
from .database import Database
from .models import Base, Artist, Artwork, Exhibition, artwork_exhibitions
from .repository import Repository

__all__ = ['Database', 'Base', 'Artist', 'Artwork', 'Exhibition', 'artwork_exhibitions', 'Repository']
