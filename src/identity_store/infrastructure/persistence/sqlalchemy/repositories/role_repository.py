"""Handle for the roles table."""

from typing import TypeVar

from identity_store.domain import IdentityRole, normalize_key
from identity_store.infrastructure.persistence.sqlalchemy.repositories.base import (
    IdentityRepository,
)

TRole = TypeVar("TRole", bound=IdentityRole)


class RoleRepository(IdentityRepository[TRole]):
    """Roles, looked up by normalized name."""

    async def find_by_name(self, name: str) -> TRole | None:
        return await self._find_one(
            self._entity_type.normalized_name == normalize_key(name),  # type: ignore[attr-defined]
        )
