"""Claim attached to a user."""

from typing import Any


class IdentityUserClaim:
    """Key/value claim asserted about a user, identified by a surrogate id."""

    def __init__(
        self,
        claim_type: str | None = None,
        claim_value: str | None = None,
        *,
        user_id: Any = None,
        id: int | None = None,
    ):
        if id is not None:
            self.id = id
        if user_id is not None:
            self.user_id = user_id
        self.claim_type = claim_type
        self.claim_value = claim_value

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(type={self.claim_type}, value={self.claim_value})>"
