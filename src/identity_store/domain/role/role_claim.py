"""Claim attached to a role."""

from typing import Any


class IdentityRoleClaim:
    """Key/value claim granted to every member of a role."""

    def __init__(
        self,
        claim_type: str | None = None,
        claim_value: str | None = None,
        *,
        role_id: Any = None,
        id: int | None = None,
    ):
        if id is not None:
            self.id = id
        if role_id is not None:
            self.role_id = role_id
        self.claim_type = claim_type
        self.claim_value = claim_value

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(type={self.claim_type}, value={self.claim_value})>"
