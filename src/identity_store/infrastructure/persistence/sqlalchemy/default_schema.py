"""Default identity schema mapped on the shared registry."""

from functools import lru_cache

from identity_config.settings import get_settings
from identity_store.infrastructure.persistence.sqlalchemy.base import mapper_registry
from identity_store.infrastructure.persistence.sqlalchemy.schema import IdentitySchema
from identity_store.infrastructure.persistence.sqlalchemy.schema_builder import (
    IdentitySchemaBuilder,
)


@lru_cache(maxsize=1)
def get_identity_schema() -> IdentitySchema:
    """Return the default schema, building it on first use.

    Key type, email uniqueness and key length come from settings. The default
    ``*Model`` types can only be mapped once, so the result is cached for the
    life of the process.
    """
    return IdentitySchemaBuilder.from_settings(get_settings()).build(mapper_registry)
