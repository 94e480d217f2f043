"""Link between a user and a role."""

from typing import Any


class IdentityUserRole:
    """Join entity of the many-to-many user/role relation."""

    def __init__(self, *, user_id: Any = None, role_id: Any = None):
        if user_id is not None:
            self.user_id = user_id
        if role_id is not None:
            self.role_id = role_id

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}(user_id={getattr(self, 'user_id', None)}, "
            f"role_id={getattr(self, 'role_id', None)})>"
        )
