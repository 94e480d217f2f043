"""Identity schema builder.

Maps the seven identity entity kinds onto relational tables:

| Table             | Primary key                      |
|-------------------|----------------------------------|
| AspNetUsers       | Id                               |
| AspNetRoles       | Id                               |
| AspNetUserClaims  | Id (surrogate)                   |
| AspNetRoleClaims  | Id (surrogate)                   |
| AspNetUserRoles   | (UserId, RoleId)                 |
| AspNetUserLogins  | (LoginProvider, ProviderKey)     |
| AspNetUserTokens  | (UserId, LoginProvider, Name)    |

Column and constraint names are kept compatible with existing identity
databases; Python attribute names are their snake_case forms.

Each entity kind has its own ``build_*_model`` method. Override one of them in a
subclass, or pass a customization hook for its ``EntityKind``, to change a
single entity without re-declaring the others.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import registry, relationship

from identity_store.exceptions import SchemaConfigurationError
from identity_store.infrastructure.persistence.sqlalchemy.column_types import UtcDateTime
from identity_store.infrastructure.persistence.sqlalchemy.key_types import KeyType
from identity_store.infrastructure.persistence.sqlalchemy.schema import (
    EntityCustomization,
    EntityKind,
    EntityMapping,
    IdentityEntityTypes,
    IdentitySchema,
)

if TYPE_CHECKING:
    from identity_config import Settings

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 256
DEFAULT_MAX_KEY_LENGTH = 128

DEFAULT_TABLE_NAMES: Mapping[EntityKind, str] = {
    EntityKind.USER: "AspNetUsers",
    EntityKind.ROLE: "AspNetRoles",
    EntityKind.USER_CLAIM: "AspNetUserClaims",
    EntityKind.ROLE_CLAIM: "AspNetRoleClaims",
    EntityKind.USER_ROLE: "AspNetUserRoles",
    EntityKind.USER_LOGIN: "AspNetUserLogins",
    EntityKind.USER_TOKEN: "AspNetUserTokens",
}


class IdentitySchemaBuilder:
    """Registers the identity entities on a SQLAlchemy registry.

    Args:
        key_type: Key type of users and roles (and of every column that
            references them).
        entity_types: Concrete entity types to map. Defaults to the
            ``*Model`` types of the default schema.
        table_names: Table name overrides per entity kind.
        require_unique_email: Whether ``EmailIndex`` is a unique index.
        max_key_length: Length of the login provider, provider key and token
            name columns. ``None`` leaves them unbounded.
        customizations: Hooks called with the default ``EntityMapping`` of
            their entity kind before it is mapped.
    """

    def __init__(
        self,
        key_type: KeyType | str = KeyType.UUID,
        entity_types: IdentityEntityTypes | None = None,
        *,
        table_names: Mapping[EntityKind, str] | None = None,
        require_unique_email: bool = True,
        max_key_length: int | None = DEFAULT_MAX_KEY_LENGTH,
        customizations: Mapping[EntityKind, EntityCustomization] | None = None,
    ):
        if max_key_length is not None and max_key_length <= 0:
            msg = f"max_key_length must be positive or None, got {max_key_length}"
            raise SchemaConfigurationError(msg)

        self.key_type = KeyType(key_type)
        self.entity_types = entity_types or IdentityEntityTypes()
        self.table_names = {**DEFAULT_TABLE_NAMES, **(table_names or {})}
        self.require_unique_email = require_unique_email
        self.max_key_length = max_key_length
        self._customizations = dict(customizations or {})

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> IdentitySchemaBuilder:
        options: dict[str, Any] = {
            "key_type": settings.identity_key_type,
            "require_unique_email": settings.identity_require_unique_email,
            "max_key_length": settings.max_key_length,
        }
        options.update(overrides)
        return cls(**options)

    def build(self, mapper_registry: registry) -> IdentitySchema:
        """Declare the identity tables and map the entity types.

        Runs once per registry during application startup. Entity types are
        validated before anything is mapped; the registry is configured at the
        end so relationship problems surface here instead of on first query.
        """
        self.entity_types.validate()
        metadata = mapper_registry.metadata

        users = self.build_user_model(metadata)
        roles = self.build_role_model(metadata)
        mappings = {
            EntityKind.USER: users,
            EntityKind.ROLE: roles,
            EntityKind.USER_CLAIM: self.build_user_claim_model(metadata, users.table),
            EntityKind.ROLE_CLAIM: self.build_role_claim_model(metadata, roles.table),
            EntityKind.USER_ROLE: self.build_user_role_model(
                metadata,
                users.table,
                roles.table,
            ),
            EntityKind.USER_LOGIN: self.build_user_login_model(metadata, users.table),
            EntityKind.USER_TOKEN: self.build_user_token_model(metadata, users.table),
        }

        for kind, mapping in mappings.items():
            customize = self._customizations.get(kind)
            if customize is not None:
                customize(mapping)

        for mapping in mappings.values():
            mapping.map(mapper_registry)
        mapper_registry.configure()

        logger.info(
            "Built identity schema (key type: %s, tables: %s)",
            self.key_type.value,
            ", ".join(m.table.name for m in mappings.values()),
        )
        return IdentitySchema(
            key_type=self.key_type,
            entity_types=self.entity_types,
            tables={kind: mapping.table for kind, mapping in mappings.items()},
            metadata=metadata,
        )

    def build_user_model(self, metadata: MetaData) -> EntityMapping:
        """Users: key, normalized lookup indexes, concurrency stamp, owned rows."""
        name = self.table_names[EntityKind.USER]
        table = Table(
            name,
            metadata,
            self._principal_key_column(),
            Column("UserName", String(NAME_MAX_LENGTH), key="user_name"),
            Column(
                "NormalizedUserName",
                String(NAME_MAX_LENGTH),
                key="normalized_user_name",
            ),
            Column("Email", String(NAME_MAX_LENGTH), key="email"),
            Column("NormalizedEmail", String(NAME_MAX_LENGTH), key="normalized_email"),
            Column(
                "EmailConfirmed",
                Boolean,
                key="email_confirmed",
                nullable=False,
                default=False,
            ),
            Column("PasswordHash", Text, key="password_hash"),
            Column("SecurityStamp", Text, key="security_stamp"),
            Column("ConcurrencyStamp", Text, key="concurrency_stamp"),
            Column("PhoneNumber", Text, key="phone_number"),
            Column(
                "PhoneNumberConfirmed",
                Boolean,
                key="phone_number_confirmed",
                nullable=False,
                default=False,
            ),
            Column(
                "TwoFactorEnabled",
                Boolean,
                key="two_factor_enabled",
                nullable=False,
                default=False,
            ),
            Column("LockoutEnd", UtcDateTime(), key="lockout_end"),
            Column(
                "LockoutEnabled",
                Boolean,
                key="lockout_enabled",
                nullable=False,
                default=False,
            ),
            Column(
                "AccessFailedCount",
                Integer,
                key="access_failed_count",
                nullable=False,
                default=0,
            ),
            PrimaryKeyConstraint("id", name=f"PK_{name}"),
            Index("UserNameIndex", "normalized_user_name", unique=True),
            Index("EmailIndex", "normalized_email", unique=self.require_unique_email),
        )

        types = self.entity_types
        return EntityMapping(
            entity_type=types.user,
            table=table,
            properties={
                "claims": self._owned_collection(types.user_claim),
                "logins": self._owned_collection(types.user_login),
                "roles": self._owned_collection(types.user_role),
                "tokens": self._owned_collection(types.user_token),
            },
            concurrency_token=table.c.concurrency_stamp,
        )

    def build_role_model(self, metadata: MetaData) -> EntityMapping:
        """Roles: key, normalized name index, concurrency stamp, owned rows."""
        name = self.table_names[EntityKind.ROLE]
        table = Table(
            name,
            metadata,
            self._principal_key_column(),
            Column("Name", String(NAME_MAX_LENGTH), key="name"),
            Column("NormalizedName", String(NAME_MAX_LENGTH), key="normalized_name"),
            Column("ConcurrencyStamp", Text, key="concurrency_stamp"),
            PrimaryKeyConstraint("id", name=f"PK_{name}"),
            Index("RoleNameIndex", "normalized_name", unique=True),
        )

        types = self.entity_types
        return EntityMapping(
            entity_type=types.role,
            table=table,
            properties={
                "users": self._owned_collection(types.user_role),
                "claims": self._owned_collection(types.role_claim),
            },
            concurrency_token=table.c.concurrency_stamp,
        )

    def build_user_claim_model(self, metadata: MetaData, users: Table) -> EntityMapping:
        name = self.table_names[EntityKind.USER_CLAIM]
        table = Table(
            name,
            metadata,
            Column("Id", Integer, key="id", autoincrement=True),
            self._reference_column("UserId", "user_id"),
            Column("ClaimType", Text, key="claim_type"),
            Column("ClaimValue", Text, key="claim_value"),
            PrimaryKeyConstraint("id", name=f"PK_{name}"),
            self._required_foreign_key(name, "UserId", "user_id", users),
            Index(f"IX_{name}_UserId", "user_id"),
        )
        return EntityMapping(entity_type=self.entity_types.user_claim, table=table)

    def build_role_claim_model(self, metadata: MetaData, roles: Table) -> EntityMapping:
        name = self.table_names[EntityKind.ROLE_CLAIM]
        table = Table(
            name,
            metadata,
            Column("Id", Integer, key="id", autoincrement=True),
            self._reference_column("RoleId", "role_id"),
            Column("ClaimType", Text, key="claim_type"),
            Column("ClaimValue", Text, key="claim_value"),
            PrimaryKeyConstraint("id", name=f"PK_{name}"),
            self._required_foreign_key(name, "RoleId", "role_id", roles),
            Index(f"IX_{name}_RoleId", "role_id"),
        )
        return EntityMapping(entity_type=self.entity_types.role_claim, table=table)

    def build_user_role_model(
        self,
        metadata: MetaData,
        users: Table,
        roles: Table,
    ) -> EntityMapping:
        name = self.table_names[EntityKind.USER_ROLE]
        table = Table(
            name,
            metadata,
            self._reference_column("UserId", "user_id"),
            self._reference_column("RoleId", "role_id"),
            PrimaryKeyConstraint("user_id", "role_id", name=f"PK_{name}"),
            self._required_foreign_key(name, "UserId", "user_id", users),
            self._required_foreign_key(name, "RoleId", "role_id", roles),
            # UserId lookups use the primary key
            Index(f"IX_{name}_RoleId", "role_id"),
        )
        return EntityMapping(entity_type=self.entity_types.user_role, table=table)

    def build_user_login_model(self, metadata: MetaData, users: Table) -> EntityMapping:
        name = self.table_names[EntityKind.USER_LOGIN]
        table = Table(
            name,
            metadata,
            Column("LoginProvider", String(self.max_key_length), key="login_provider"),
            Column("ProviderKey", String(self.max_key_length), key="provider_key"),
            Column("ProviderDisplayName", Text, key="provider_display_name"),
            self._reference_column("UserId", "user_id"),
            PrimaryKeyConstraint("login_provider", "provider_key", name=f"PK_{name}"),
            self._required_foreign_key(name, "UserId", "user_id", users),
            Index(f"IX_{name}_UserId", "user_id"),
        )
        return EntityMapping(entity_type=self.entity_types.user_login, table=table)

    def build_user_token_model(self, metadata: MetaData, users: Table) -> EntityMapping:
        name = self.table_names[EntityKind.USER_TOKEN]
        table = Table(
            name,
            metadata,
            self._reference_column("UserId", "user_id"),
            Column("LoginProvider", String(self.max_key_length), key="login_provider"),
            Column("Name", String(self.max_key_length), key="name"),
            Column("Value", Text, key="value"),
            PrimaryKeyConstraint(
                "user_id",
                "login_provider",
                "name",
                name=f"PK_{name}",
            ),
            self._required_foreign_key(name, "UserId", "user_id", users),
        )
        return EntityMapping(entity_type=self.entity_types.user_token, table=table)

    def _principal_key_column(self) -> Column[Any]:
        return Column(
            "Id",
            self.key_type.column_type(),
            key="id",
            default=self.key_type.default_factory(),
            autoincrement=self.key_type is KeyType.INTEGER,
        )

    def _reference_column(self, column_name: str, key: str) -> Column[Any]:
        return Column(column_name, self.key_type.column_type(), key=key, nullable=False)

    @staticmethod
    def _required_foreign_key(
        table_name: str,
        column_name: str,
        key: str,
        principal: Table,
    ) -> ForeignKeyConstraint:
        return ForeignKeyConstraint(
            [key],
            [principal.c.id],
            name=f"FK_{table_name}_{principal.name}_{column_name}",
            ondelete="CASCADE",
        )

    @staticmethod
    def _owned_collection(entity_type: type) -> Any:
        # Loaded children are deleted by the ORM, unloaded ones by ON DELETE CASCADE
        return relationship(
            entity_type,
            cascade="all",
            passive_deletes=True,
            lazy="selectin",
        )
