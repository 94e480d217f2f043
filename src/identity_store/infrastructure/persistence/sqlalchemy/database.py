"""Engine and session factories for the identity database."""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import event, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from identity_config.settings import get_settings

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    if not url.startswith("sqlite"):
        return
    db_path = make_url(url).database
    if db_path and db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def get_database_url() -> str:
    """
    Get database URL from settings.

    Ensures the data directory exists for file-based SQLite databases.
    """
    url = get_settings().database_url
    _ensure_sqlite_directory(url)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores REFERENCES/ON DELETE unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_identity_engine(url: str | None = None, **kwargs: Any) -> AsyncEngine:
    """Create an async engine for the identity database.

    Uses the configured database URL unless ``url`` is given. Extra keyword
    arguments are passed to ``create_async_engine``.
    """
    kwargs.setdefault("echo", get_settings().database_echo)
    kwargs.setdefault("pool_pre_ping", True)
    if url is None:
        url = get_database_url()
    else:
        _ensure_sqlite_directory(url)
    engine = create_async_engine(url, **kwargs)

    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.debug("Created %s engine", engine.dialect.name)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for identity stores."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
