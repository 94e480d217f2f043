"""Handle for the user/role link table."""

from typing import Any, TypeVar

from identity_store.domain import IdentityUserRole
from identity_store.infrastructure.persistence.sqlalchemy.repositories.base import (
    IdentityRepository,
)

TUserRole = TypeVar("TUserRole", bound=IdentityUserRole)


class UserRoleRepository(IdentityRepository[TUserRole]):
    """User/role links keyed by (user_id, role_id)."""

    async def find(self, user_id: Any, role_id: Any) -> TUserRole | None:
        return await self.get((user_id, role_id))

    async def list_for_user(self, user_id: Any) -> list[TUserRole]:
        return await self._find_all(self._entity_type.user_id == user_id)  # type: ignore[attr-defined]

    async def list_for_role(self, role_id: Any) -> list[TUserRole]:
        return await self._find_all(self._entity_type.role_id == role_id)  # type: ignore[attr-defined]
