"""User entity for identity persistence."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any
from uuid import uuid4

if TYPE_CHECKING:
    from identity_store.domain.user.user_claim import IdentityUserClaim
    from identity_store.domain.user.user_login import IdentityUserLogin
    from identity_store.domain.user.user_role import IdentityUserRole
    from identity_store.domain.user.user_token import IdentityUserToken


class IdentityUser:
    """
    User principal.

    Base entity for every user type handed to the schema builder. Subclass it
    to add columns; the builder rejects user types that do not derive from it.

    The ``id`` is left unset when not given so the key column default (or the
    database, for integer keys) assigns it on flush. ``concurrency_stamp`` is
    replaced by the ORM on every insert and update.
    """

    claims: list[IdentityUserClaim]
    logins: list[IdentityUserLogin]
    roles: list[IdentityUserRole]
    tokens: list[IdentityUserToken]

    def __init__(
        self,
        user_name: str | None = None,
        *,
        id: Any = None,
        normalized_user_name: str | None = None,
        email: str | None = None,
        normalized_email: str | None = None,
        email_confirmed: bool = False,
        password_hash: str | None = None,
        security_stamp: str | None = None,
        phone_number: str | None = None,
        phone_number_confirmed: bool = False,
        two_factor_enabled: bool = False,
        lockout_end: datetime | None = None,
        lockout_enabled: bool = False,
        access_failed_count: int = 0,
    ):
        if id is not None:
            self.id = id
        self.user_name = user_name
        self.normalized_user_name = normalized_user_name
        self.email = email
        self.normalized_email = normalized_email
        self.email_confirmed = email_confirmed
        self.password_hash = password_hash
        self.security_stamp = security_stamp
        self.concurrency_stamp = str(uuid4())
        self.phone_number = phone_number
        self.phone_number_confirmed = phone_number_confirmed
        self.two_factor_enabled = two_factor_enabled
        self.lockout_end = lockout_end
        self.lockout_enabled = lockout_enabled
        self.access_failed_count = access_failed_count
        self.claims = []
        self.logins = []
        self.roles = []
        self.tokens = []

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}(id={getattr(self, 'id', None)}, "
            f"user_name={self.user_name})>"
        )

    def __str__(self) -> str:
        return self.user_name or ""
