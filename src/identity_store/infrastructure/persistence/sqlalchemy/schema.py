"""Building blocks and result of an identity schema build."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any
from uuid import uuid4

from sqlalchemy import Column, MetaData, Table, inspect
from sqlalchemy.orm import Mapper, registry

from identity_store.domain import (
    IdentityRole,
    IdentityRoleClaim,
    IdentityUser,
    IdentityUserClaim,
    IdentityUserLogin,
    IdentityUserRole,
    IdentityUserToken,
)
from identity_store.exceptions import EntityAlreadyMappedError, InvalidEntityTypeError
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


class EntityKind(str, Enum):
    """The seven entity kinds of the identity schema."""

    USER = "user"
    ROLE = "role"
    USER_CLAIM = "user_claim"
    ROLE_CLAIM = "role_claim"
    USER_ROLE = "user_role"
    USER_LOGIN = "user_login"
    USER_TOKEN = "user_token"


BASE_ENTITY_TYPES: Mapping[EntityKind, type] = {
    EntityKind.USER: IdentityUser,
    EntityKind.ROLE: IdentityRole,
    EntityKind.USER_CLAIM: IdentityUserClaim,
    EntityKind.ROLE_CLAIM: IdentityRoleClaim,
    EntityKind.USER_ROLE: IdentityUserRole,
    EntityKind.USER_LOGIN: IdentityUserLogin,
    EntityKind.USER_TOKEN: IdentityUserToken,
}


@dataclass(frozen=True)
class IdentityEntityTypes:
    """Concrete entity types mapped by one identity schema.

    Field names match the ``EntityKind`` values. Replace any subset to
    substitute an application type; it must derive from the matching base
    entity.
    """

    user: type[IdentityUser] = UserModel
    role: type[IdentityRole] = RoleModel
    user_claim: type[IdentityUserClaim] = UserClaimModel
    role_claim: type[IdentityRoleClaim] = RoleClaimModel
    user_role: type[IdentityUserRole] = UserRoleModel
    user_login: type[IdentityUserLogin] = UserLoginModel
    user_token: type[IdentityUserToken] = UserTokenModel

    def for_kind(self, kind: EntityKind) -> type:
        return getattr(self, kind.value)

    def items(self) -> list[tuple[EntityKind, type]]:
        return [(EntityKind(f.name), getattr(self, f.name)) for f in fields(self)]

    def validate(self) -> None:
        """Check every type before any of them is mapped."""
        for kind, entity_type in self.items():
            base = BASE_ENTITY_TYPES[kind]
            if not (isinstance(entity_type, type) and issubclass(entity_type, base)):
                raise InvalidEntityTypeError(kind.value, entity_type, base)
            if any(_is_mapped(cls) for cls in entity_type.__mro__):
                raise EntityAlreadyMappedError(kind.value, entity_type)


def _is_mapped(cls: type) -> bool:
    return inspect(cls, raiseerr=False) is not None


def new_concurrency_stamp(current: str | None) -> str:
    """Version generator for concurrency stamp columns."""
    return str(uuid4())


@dataclass
class EntityMapping:
    """Table and mapper configuration for one entity kind.

    Produced by the builder's ``build_*_model`` methods and handed to
    customization hooks before the entity type is mapped.
    """

    entity_type: type
    table: Table
    properties: dict[str, Any] = field(default_factory=dict)
    concurrency_token: Column[Any] | None = None

    def map(self, mapper_registry: registry) -> Mapper[Any]:
        options: dict[str, Any] = {}
        if self.concurrency_token is not None:
            options["version_id_col"] = self.concurrency_token
            options["version_id_generator"] = new_concurrency_stamp
        return mapper_registry.map_imperatively(
            self.entity_type,
            self.table,
            properties=self.properties,
            **options,
        )


EntityCustomization = Callable[[EntityMapping], None]


@dataclass(frozen=True)
class IdentitySchema:
    """A built identity schema: mapped entity types and their tables."""

    key_type: KeyType
    entity_types: IdentityEntityTypes
    tables: Mapping[EntityKind, Table]
    metadata: MetaData

    def table_for(self, kind: EntityKind) -> Table:
        return self.tables[kind]

    def entity_for(self, kind: EntityKind) -> type:
        return self.entity_types.for_kind(kind)

    @property
    def sorted_tables(self) -> list[Table]:
        """Identity tables in dependency order (principals first)."""
        identity_tables = set(self.tables.values())
        return [t for t in self.metadata.sorted_tables if t in identity_tables]
