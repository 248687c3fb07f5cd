"""
Create or reset the movie database schema from the command line.

    python -m movie_api.database.init_db [--reset]
"""

import argparse
import logging

from movie_api.database.connection import DatabaseManager, get_db_manager, DEFAULT_DB_PATH

logger = logging.getLogger(__name__)

REQUIRED_TABLES = {"movies", "reviews"}


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False) -> DatabaseManager:
    """
    Make sure the movies and reviews tables exist.

    Args:
        db_path: SQLite file path, or ":memory:"
        reset: If True, drop every movie and review first

    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(db_path=db_path)

    if reset:
        logger.warning("Resetting database, all movies and reviews are dropped")
        db_manager.drop_tables()
    db_manager.create_tables()
    logger.info("Database tables ready at %s", db_manager.database_url)

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """True if both the movies and the reviews table exist."""
    existing_tables = set(db_manager.table_names())
    missing_tables = REQUIRED_TABLES - existing_tables

    if missing_tables:
        logger.error("Missing tables: %s", sorted(missing_tables))
        return False

    logger.info("All tables exist: %s", sorted(existing_tables))
    return True


if __name__ == "__main__":
    from movie_api.api.config import get_database_path, get_log_level
    from movie_api.utils.logging_config import setup_logging

    parser = argparse.ArgumentParser(description="Create the movie review database tables")
    parser.add_argument("--reset", action="store_true", help="drop existing movies and reviews first")
    args = parser.parse_args()

    setup_logging(level=get_log_level())
    manager = init_database(get_database_path(), reset=args.reset)
    if not verify_schema(manager):
        raise SystemExit(1)
