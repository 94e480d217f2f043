"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    db_session,
    identity_schema,
    identity_store,
    pg_engine,
    pg_session,
    postgres_container,
)
from tests.shared.fixtures.factories import fresh_entity_types, make_role, make_user

__all__ = [
    "db_session",
    "fresh_entity_types",
    "identity_schema",
    "identity_store",
    "make_role",
    "make_user",
    "pg_engine",
    "pg_session",
    "postgres_container",
]
