"""Database factory functions for creating database instances."""

from typing import Optional

from invoicedash.config import default_db_path, get_config
from invoicedash.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks INVOICEDASH_DB_PATH
            environment variable, then defaults to ~/.invoicedash/invoicedash.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = get_config().db_path

    if database_path is None:
        database_path = default_db_path()

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)


def create_database(
    database_url: Optional[str] = None, database_path: Optional[str] = None
) -> SQLAlchemyDatabase:
    """Create a database instance for a hosted backend or a local SQLite file.

    Args:
        database_url: SQLAlchemy URL. If None, checks INVOICEDASH_DATABASE_URL.
        database_path: SQLite file used when no URL is available.

    Returns:
        SQLAlchemyDatabase instance
    """
    if database_url is None:
        database_url = get_config().database_url

    if database_url is None:
        return create_sqlite_database(database_path)

    return SQLAlchemyDatabase(database_url)
