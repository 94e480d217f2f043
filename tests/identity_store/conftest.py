"""
Pytest configuration for identity_store tests.

Persistence tests run on in-memory SQLite; PostgreSQL tests use Testcontainers
and are marked ``integration``. Import the shared fixtures to make them
available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    db_session,
    identity_schema,
    identity_store,
    pg_engine,
    pg_session,
    postgres_container,
)

__all__ = [
    "db_session",
    "identity_schema",
    "identity_store",
    "pg_engine",
    "pg_session",
    "postgres_container",
]
