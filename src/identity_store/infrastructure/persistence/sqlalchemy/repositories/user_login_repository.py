"""Handle for the external login table."""

from typing import Any, TypeVar

from identity_store.domain import IdentityUserLogin
from identity_store.infrastructure.persistence.sqlalchemy.repositories.base import (
    IdentityRepository,
)

TUserLogin = TypeVar("TUserLogin", bound=IdentityUserLogin)


class UserLoginRepository(IdentityRepository[TUserLogin]):
    """External logins keyed by (login_provider, provider_key)."""

    async def find(self, login_provider: str, provider_key: str) -> TUserLogin | None:
        return await self.get((login_provider, provider_key))

    async def list_for_user(self, user_id: Any) -> list[TUserLogin]:
        return await self._find_all(self._entity_type.user_id == user_id)  # type: ignore[attr-defined]
