"""Entity factories for identity tests.

The default ``*Model`` types are mapped once by the default schema. Tests that
build their own schema need types nobody has mapped yet, which
``fresh_entity_types`` creates on demand.
"""

from itertools import count
from typing import Any
from uuid import UUID

from identity_store import (
    IdentityEntityTypes,
    IdentityRole,
    IdentityRoleClaim,
    IdentityUser,
    IdentityUserClaim,
    IdentityUserLogin,
    IdentityUserRole,
    IdentityUserToken,
    normalize_key,
)
from identity_store.infrastructure.persistence.sqlalchemy import RoleModel, UserModel

# Fixed UUIDs for testing - ensures deterministic behavior
TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")
TEST_ROLE_ID = UUID("00000000-0000-0000-0000-0000000000a1")

_generation = count(1)


def fresh_entity_types(**overrides: type) -> IdentityEntityTypes:
    """Return unmapped subclasses of every base entity.

    Keyword arguments replace individual kinds, e.g. ``user=AppUser``.
    """
    suffix = next(_generation)
    bases = {
        "user": IdentityUser,
        "role": IdentityRole,
        "user_claim": IdentityUserClaim,
        "role_claim": IdentityRoleClaim,
        "user_role": IdentityUserRole,
        "user_login": IdentityUserLogin,
        "user_token": IdentityUserToken,
    }
    types = {
        kind: type(f"{base.__name__}{suffix}", (base,), {})
        for kind, base in bases.items()
    }
    types.update(overrides)
    return IdentityEntityTypes(**types)


def make_user(
    user_name: str = "alice",
    *,
    email: str | None = None,
    entity_type: type[IdentityUser] = UserModel,
    **kwargs: Any,
) -> Any:
    """Create a user with its normalized lookup fields filled in."""
    return entity_type(
        user_name,
        normalized_user_name=normalize_key(user_name),
        email=email,
        normalized_email=normalize_key(email),
        **kwargs,
    )


def make_role(
    name: str = "admin",
    *,
    entity_type: type[IdentityRole] = RoleModel,
    **kwargs: Any,
) -> Any:
    """Create a role with its normalized name filled in."""
    return entity_type(name, normalized_name=normalize_key(name), **kwargs)
