import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.orm.session import Session
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger(__name__)

IN_MEMORY_URLS = ('sqlite://', 'sqlite:///:memory:')

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

class Database:
    def __init__(self, database_url: str, echo: bool = False):
        self.url = database_url
        engine_kwargs = {'echo': echo}

        if database_url.startswith('sqlite'):
            # Request handlers run in a threadpool
            engine_kwargs['connect_args'] = {'check_same_thread': False}
            if database_url in IN_MEMORY_URLS:
                engine_kwargs['poolclass'] = StaticPool

        self.engine = create_engine(database_url, **engine_kwargs)

        if database_url.startswith('sqlite'):
            event.listen(self.engine, 'connect', _enable_sqlite_foreign_keys)

        self._SessionFactory = sessionmaker(bind=self.engine)

    def create_tables(self):
        """Create all tables in the database"""
        Base.metadata.create_all(self.engine)
        logger.info(f"Created catalogue tables on {self.engine.url}")

    def get_session(self) -> Session:
        """Get a new database session"""
        return self._SessionFactory()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Unit of work for one request: a fresh session, always closed afterwards.

        Commits happen inside the repository; anything left uncommitted when the
        scope exits is rolled back.
        """
        session = self.get_session()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self):
        self.engine.dispose()
