"""Default identity entity types.

The base entities in ``identity_store.domain`` are never mapped themselves, so
applications can derive their own entity types from them. These subclasses are
the types mapped by the default schema.
"""

from identity_store.domain import (
    IdentityRole,
    IdentityRoleClaim,
    IdentityUser,
    IdentityUserClaim,
    IdentityUserLogin,
    IdentityUserRole,
    IdentityUserToken,
)


class UserModel(IdentityUser):
    """User row of the default schema."""


class RoleModel(IdentityRole):
    """Role row of the default schema."""


class UserClaimModel(IdentityUserClaim):
    """User claim row of the default schema."""


class RoleClaimModel(IdentityRoleClaim):
    """Role claim row of the default schema."""


class UserRoleModel(IdentityUserRole):
    """User/role link row of the default schema."""


class UserLoginModel(IdentityUserLogin):
    """External login row of the default schema."""


class UserTokenModel(IdentityUserToken):
    """User token row of the default schema."""
