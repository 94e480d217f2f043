"""Handle for the users table."""

from typing import TypeVar

from identity_store.domain import IdentityUser, normalize_key
from identity_store.infrastructure.persistence.sqlalchemy.repositories.base import (
    IdentityRepository,
)

TUser = TypeVar("TUser", bound=IdentityUser)


class UserRepository(IdentityRepository[TUser]):
    """Users, looked up by normalized user name or email."""

    async def find_by_name(self, user_name: str) -> TUser | None:
        normalized = normalize_key(user_name)
        return await self._find_one(
            self._entity_type.normalized_user_name == normalized,  # type: ignore[attr-defined]
        )

    async def find_by_email(self, email: str) -> TUser | None:
        """Find the user with this email.

        When ``EmailIndex`` is not unique several users may share an email;
        the one with the lowest key is returned. Use ``list_by_email`` to get
        all of them.
        """
        normalized = normalize_key(email)
        return await self._find_first(
            self._entity_type.normalized_email == normalized,  # type: ignore[attr-defined]
        )

    async def list_by_email(self, email: str) -> list[TUser]:
        """All users with this email, ordered by key."""
        normalized = normalize_key(email)
        stmt = (
            self.select()
            .where(self._entity_type.normalized_email == normalized)  # type: ignore[attr-defined]
            .order_by(*self._primary_key())
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
