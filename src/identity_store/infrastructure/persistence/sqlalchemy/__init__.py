"""SQLAlchemy implementation of identity persistence.

Provides:
- IdentitySchemaBuilder: Maps identity entity types onto tables
- IdentitySchema: Result of a build (entity types and tables)
- get_identity_schema: Default schema built from settings
- IdentityStore: Typed per-session handles for each identity table
- create_identity_engine / create_session_factory: Database access
- create_tables / drop_tables: Identity table lifecycle
"""

from identity_store.infrastructure.persistence.sqlalchemy.base import (
    mapper_registry,
    metadata,
)
from identity_store.infrastructure.persistence.sqlalchemy.column_types import UtcDateTime
from identity_store.infrastructure.persistence.sqlalchemy.database import (
    create_identity_engine,
    create_session_factory,
    get_database_url,
)
from identity_store.infrastructure.persistence.sqlalchemy.default_schema import (
    get_identity_schema,
)
from identity_store.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from identity_store.infrastructure.persistence.sqlalchemy.key_types import KeyType
from identity_store.infrastructure.persistence.sqlalchemy.models import (
    RoleClaimModel,
    RoleModel,
    UserClaimModel,
    UserLoginModel,
    UserModel,
    UserRoleModel,
    UserTokenModel,
)
from identity_store.infrastructure.persistence.sqlalchemy.schema import (
    EntityKind,
    EntityMapping,
    IdentityEntityTypes,
    IdentitySchema,
)
from identity_store.infrastructure.persistence.sqlalchemy.schema_builder import (
    DEFAULT_TABLE_NAMES,
    IdentitySchemaBuilder,
)
from identity_store.infrastructure.persistence.sqlalchemy.store import IdentityStore

__all__ = [
    "DEFAULT_TABLE_NAMES",
    "EntityKind",
    "EntityMapping",
    "IdentityEntityTypes",
    "IdentitySchema",
    "IdentitySchemaBuilder",
    "IdentityStore",
    "KeyType",
    "RoleClaimModel",
    "RoleModel",
    "UserClaimModel",
    "UserLoginModel",
    "UserModel",
    "UserRoleModel",
    "UserTokenModel",
    "UtcDateTime",
    "create_identity_engine",
    "create_session_factory",
    "create_tables",
    "drop_tables",
    "get_database_url",
    "get_identity_schema",
    "mapper_registry",
    "metadata",
]
