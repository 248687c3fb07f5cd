"""
Engine and session handling for the movie store.

The service runs against one SQLite database, either a file (the default
``data/movies.db``) or ``:memory:`` for throwaway runs. A single
``DatabaseManager`` is shared by the whole process through ``get_db_manager``.
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator, List
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from movie_api.database.models import Base

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "data/movies.db"
MEMORY_DB_PATH = ":memory:"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Build the SQLite URL for ``db_path``, creating its directory if needed.
    """
    if db_path == MEMORY_DB_PATH:
        return "sqlite:///:memory:"

    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    return f"sqlite:///{os.path.abspath(db_path)}"


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Turn on foreign keys so ON DELETE CASCADE from reviews to movies applies."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Owns the engine and the session factory for one movie database.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH, echo: bool = False):
        """
        Args:
            db_path: SQLite file path, or ":memory:"
            echo: If True, log all SQL statements
        """
        self.db_path = db_path
        self.database_url = get_database_url(db_path)

        engine_options = {"connect_args": {"check_same_thread": False}}
        if db_path == MEMORY_DB_PATH:
            # One shared connection, otherwise each session sees an empty database
            engine_options["poolclass"] = StaticPool
        self.engine = create_engine(self.database_url, echo=echo, **engine_options)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_tables(self):
        """Create the movies and reviews tables if they are missing."""
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop the movies and reviews tables.

        WARNING: This deletes every movie and review!
        """
        Base.metadata.drop_all(bind=self.engine)

    def table_names(self) -> List[str]:
        """Names of the tables currently present in the database."""
        return inspect(self.engine).get_table_names()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Session for one unit of work: committed on success, rolled back on error.

        Usage:
            with db_manager.session_scope() as session:
                crud.get_movies(session)
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


_db_manager = None


def get_db_manager(db_path: str = DEFAULT_DB_PATH, echo: bool = False) -> DatabaseManager:
    """
    Return the process-wide DatabaseManager, creating it and its tables on first use.

    Later calls return the same manager whatever ``db_path`` they pass.
    """
    global _db_manager
    if _db_manager is None:
        logger.info("Opening database at %s", db_path)
        _db_manager = DatabaseManager(db_path=db_path, echo=echo)
        _db_manager.create_tables()
    return _db_manager
