"""
Database connection for the alias table.

No module-level engine: the store factory builds one from settings, and
tests build their own on a temporary SQLite file.
"""

import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def create_sqlite_engine(database_url: str, timeout: float = 5.0) -> Engine:
    """
    Create an engine for a SQLite database.

    - check_same_thread=False: sessions are opened from request threads
    - timeout: busy timeout, so concurrent writers wait instead of failing
    """
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False, "timeout": timeout},
    )


def init_db(engine: Engine) -> None:
    """Create the parent directory of the SQLite file and the schema."""
    # Import models to ensure they're registered with Base
    from alias_shortener.models import URL  # noqa: F401

    database = engine.url.database
    if database and database != ":memory:":
        directory = os.path.dirname(os.path.abspath(database))
        os.makedirs(directory, exist_ok=True)

    Base.metadata.create_all(bind=engine)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
