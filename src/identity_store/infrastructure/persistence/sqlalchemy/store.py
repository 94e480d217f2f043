"""Per-session access to every identity table."""

from __future__ import annotations

import logging
from functools import cached_property
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from identity_store.infrastructure.persistence.sqlalchemy.default_schema import (
    get_identity_schema,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories import (
    RoleClaimRepository,
    RoleRepository,
    UserClaimRepository,
    UserLoginRepository,
    UserRepository,
    UserRoleRepository,
    UserTokenRepository,
)
from identity_store.infrastructure.persistence.sqlalchemy.schema import IdentitySchema

logger = logging.getLogger(__name__)


class IdentityStore:
    """Typed handles for the identity tables of one schema, bound to a session.

    Handles are created on first access and reused. Without an explicit schema
    the default schema is used.
    """

    def __init__(self, session: AsyncSession, schema: IdentitySchema | None = None):
        self._session = session
        self._schema = schema or get_identity_schema()

    @property
    def session(self) -> AsyncSession:
        return self._session

    @property
    def schema(self) -> IdentitySchema:
        return self._schema

    @cached_property
    def users(self) -> UserRepository[Any]:
        return UserRepository(self._session, self._schema.entity_types.user)

    @cached_property
    def roles(self) -> RoleRepository[Any]:
        return RoleRepository(self._session, self._schema.entity_types.role)

    @cached_property
    def user_claims(self) -> UserClaimRepository[Any]:
        return UserClaimRepository(self._session, self._schema.entity_types.user_claim)

    @cached_property
    def role_claims(self) -> RoleClaimRepository[Any]:
        return RoleClaimRepository(self._session, self._schema.entity_types.role_claim)

    @cached_property
    def user_roles(self) -> UserRoleRepository[Any]:
        return UserRoleRepository(self._session, self._schema.entity_types.user_role)

    @cached_property
    def user_logins(self) -> UserLoginRepository[Any]:
        return UserLoginRepository(self._session, self._schema.entity_types.user_login)

    @cached_property
    def user_tokens(self) -> UserTokenRepository[Any]:
        return UserTokenRepository(self._session, self._schema.entity_types.user_token)

    async def save_changes(self) -> None:
        """Flush pending changes; committing stays with the session owner."""
        await self._session.flush()
        logger.debug("Flushed identity store changes")
