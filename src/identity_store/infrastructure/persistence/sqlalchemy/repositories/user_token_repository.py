"""Handle for the user token table."""

from typing import Any, TypeVar

from identity_store.domain import IdentityUserToken
from identity_store.infrastructure.persistence.sqlalchemy.repositories.base import (
    IdentityRepository,
)

TUserToken = TypeVar("TUserToken", bound=IdentityUserToken)


class UserTokenRepository(IdentityRepository[TUserToken]):
    """User tokens keyed by (user_id, login_provider, name)."""

    async def find(
        self,
        user_id: Any,
        login_provider: str,
        name: str,
    ) -> TUserToken | None:
        return await self.get((user_id, login_provider, name))

    async def list_for_user(self, user_id: Any) -> list[TUserToken]:
        return await self._find_all(self._entity_type.user_id == user_id)  # type: ignore[attr-defined]
