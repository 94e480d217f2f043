"""Identity Store - persistence schema for users, roles, claims, logins and tokens.

This package maps an extensible identity data model onto relational tables:
- Entity contracts (IdentityUser, IdentityRole, ...) that application types
  derive from
- A schema builder parameterized over the key type and the entity types, with
  one overridable mapping step per entity kind
- Typed per-session handles for querying and writing each table

Authentication, password hashing and sign-in flows are not part of this
package; it only declares and accesses the stored structure.
"""

from identity_store.domain import (
    IdentityRole,
    IdentityRoleClaim,
    IdentityUser,
    IdentityUserClaim,
    IdentityUserLogin,
    IdentityUserRole,
    IdentityUserToken,
    normalize_key,
)
from identity_store.exceptions import (
    EntityAlreadyMappedError,
    IdentityStoreError,
    InvalidEntityTypeError,
    SchemaConfigurationError,
)
from identity_store.infrastructure.persistence.sqlalchemy import (
    EntityKind,
    EntityMapping,
    IdentityEntityTypes,
    IdentitySchema,
    IdentitySchemaBuilder,
    IdentityStore,
    KeyType,
    get_identity_schema,
)

__all__ = [
    # Domain
    "IdentityRole",
    "IdentityRoleClaim",
    "IdentityUser",
    "IdentityUserClaim",
    "IdentityUserLogin",
    "IdentityUserRole",
    "IdentityUserToken",
    "normalize_key",
    # Exceptions
    "EntityAlreadyMappedError",
    "IdentityStoreError",
    "InvalidEntityTypeError",
    "SchemaConfigurationError",
    # Schema
    "EntityKind",
    "EntityMapping",
    "IdentityEntityTypes",
    "IdentitySchema",
    "IdentitySchemaBuilder",
    "KeyType",
    "get_identity_schema",
    # Store
    "IdentityStore",
]
