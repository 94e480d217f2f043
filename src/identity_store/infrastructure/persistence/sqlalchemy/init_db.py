"""Database initialization utilities."""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncEngine

from identity_config import configure_logging, get_settings
from identity_store.infrastructure.persistence.sqlalchemy.database import (
    create_identity_engine,
)
from identity_store.infrastructure.persistence.sqlalchemy.default_schema import (
    get_identity_schema,
)
from identity_store.infrastructure.persistence.sqlalchemy.schema import IdentitySchema

logger = logging.getLogger(__name__)


async def create_tables(
    engine: AsyncEngine | None = None,
    schema: IdentitySchema | None = None,
) -> None:
    """
    Create the identity tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    An engine passed in is left open; one created here is disposed.
    """
    schema = schema or get_identity_schema()
    owned = engine is None
    engine = engine or create_identity_engine()
    logger.info("Ensuring identity tables exist...")

    try:
        async with engine.begin() as conn:
            await conn.run_sync(schema.metadata.create_all, tables=schema.sorted_tables)
    finally:
        if owned:
            await engine.dispose()
    logger.info("Identity schema is up to date (missing tables created if needed)")


async def drop_tables(
    engine: AsyncEngine | None = None,
    schema: IdentitySchema | None = None,
) -> None:
    """
    Drop the identity tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    schema = schema or get_identity_schema()
    owned = engine is None
    engine = engine or create_identity_engine()
    logger.warning("Dropping identity tables...")

    try:
        async with engine.begin() as conn:
            await conn.run_sync(schema.metadata.drop_all, tables=schema.sorted_tables)
    finally:
        if owned:
            await engine.dispose()
    logger.info("Identity tables dropped successfully")


def _confirm_destruction() -> None:
    database_url = get_settings().database_url
    db_display = database_url.split("@")[-1] if "@" in database_url else database_url
    print(f"Database: {db_display}")
    print()
    print("WARNING: This will DELETE ALL IDENTITY DATA in the database!")
    print()
    response = input("Type 'yes' to confirm: ")
    if response.lower() != "yes":
        print("Aborted.")
        sys.exit(1)
    print()


async def _reset_database(force: bool = False) -> None:
    """Drop the identity tables and recreate them."""
    if not force:
        _confirm_destruction()

    await drop_tables()
    await create_tables()
    logger.info("Identity tables recreated successfully!")


def db_init() -> None:
    """Initialize the identity database (create tables)."""
    configure_logging()
    asyncio.run(create_tables())


def db_drop() -> None:
    """Drop the identity tables."""
    configure_logging()
    _confirm_destruction()
    asyncio.run(drop_tables())


def db_reset() -> None:
    """Drop and recreate the identity tables."""
    configure_logging()
    force = "--force" in sys.argv or "-f" in sys.argv
    asyncio.run(_reset_database(force=force))
