"""Handles for the user and role claim tables."""

from typing import Any, TypeVar

from identity_store.domain import IdentityRoleClaim, IdentityUserClaim
from identity_store.infrastructure.persistence.sqlalchemy.repositories.base import (
    IdentityRepository,
)

TUserClaim = TypeVar("TUserClaim", bound=IdentityUserClaim)
TRoleClaim = TypeVar("TRoleClaim", bound=IdentityRoleClaim)


class UserClaimRepository(IdentityRepository[TUserClaim]):
    async def list_for_user(self, user_id: Any) -> list[TUserClaim]:
        return await self._find_all(self._entity_type.user_id == user_id)  # type: ignore[attr-defined]


class RoleClaimRepository(IdentityRepository[TRoleClaim]):
    async def list_for_role(self, role_id: Any) -> list[TRoleClaim]:
        return await self._find_all(self._entity_type.role_id == role_id)  # type: ignore[attr-defined]
