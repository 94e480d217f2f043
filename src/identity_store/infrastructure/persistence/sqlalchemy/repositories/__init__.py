# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""Typed repositories, one per identity table."""

from identity_store.infrastructure.persistence.sqlalchemy.repositories.base import (
    IdentityRepository,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.claim_repositories import (
    RoleClaimRepository,
    UserClaimRepository,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.role_repository import (
    RoleRepository,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_login_repository import (
    UserLoginRepository,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepository,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_role_repository import (
    UserRoleRepository,
)
from identity_store.infrastructure.persistence.sqlalchemy.repositories.user_token_repository import (
    UserTokenRepository,
)

__all__ = [
    "IdentityRepository",
    "RoleClaimRepository",
    "RoleRepository",
    "UserClaimRepository",
    "UserLoginRepository",
    "UserRepository",
    "UserRoleRepository",
    "UserTokenRepository",
]
