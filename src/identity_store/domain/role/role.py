"""Role entity for identity persistence."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

if TYPE_CHECKING:
    from identity_store.domain.role.role_claim import IdentityRoleClaim
    from identity_store.domain.user.user_role import IdentityUserRole


class IdentityRole:
    """Named permission group.

    ``users`` holds the user-role links pointing at this role, ``claims`` the
    claims granted to every member.
    """

    users: list[IdentityUserRole]
    claims: list[IdentityRoleClaim]

    def __init__(
        self,
        name: str | None = None,
        *,
        id: Any = None,
        normalized_name: str | None = None,
    ):
        if id is not None:
            self.id = id
        self.name = name
        self.normalized_name = normalized_name
        self.concurrency_stamp = str(uuid4())
        self.users = []
        self.claims = []

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={getattr(self, 'id', None)}, name={self.name})>"

    def __str__(self) -> str:
        return self.name or ""
