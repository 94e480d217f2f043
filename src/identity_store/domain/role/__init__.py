"""Role entities."""

from identity_store.domain.role.role import IdentityRole
from identity_store.domain.role.role_claim import IdentityRoleClaim

__all__ = [
    "IdentityRole",
    "IdentityRoleClaim",
]
