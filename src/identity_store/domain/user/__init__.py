"""User entities."""

from identity_store.domain.user.user import IdentityUser
from identity_store.domain.user.user_claim import IdentityUserClaim
from identity_store.domain.user.user_login import IdentityUserLogin
from identity_store.domain.user.user_role import IdentityUserRole
from identity_store.domain.user.user_token import IdentityUserToken

__all__ = [
    "IdentityUser",
    "IdentityUserClaim",
    "IdentityUserLogin",
    "IdentityUserRole",
    "IdentityUserToken",
]
