"""Identity entities.

These classes are the contracts for the schema builder: every entity type it
maps must derive from the matching base class here.
"""

from identity_store.domain.normalizer import normalize_key
from identity_store.domain.role import IdentityRole, IdentityRoleClaim
from identity_store.domain.user import (
    IdentityUser,
    IdentityUserClaim,
    IdentityUserLogin,
    IdentityUserRole,
    IdentityUserToken,
)

__all__ = [
    "IdentityRole",
    "IdentityRoleClaim",
    "IdentityUser",
    "IdentityUserClaim",
    "IdentityUserLogin",
    "IdentityUserRole",
    "IdentityUserToken",
    "normalize_key",
]
