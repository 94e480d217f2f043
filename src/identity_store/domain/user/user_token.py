"""Authentication token stored for a user."""

from typing import Any


class IdentityUserToken:
    """Named token value per user and login provider."""

    def __init__(
        self,
        login_provider: str,
        name: str,
        value: str | None = None,
        *,
        user_id: Any = None,
    ):
        if user_id is not None:
            self.user_id = user_id
        self.login_provider = login_provider
        self.name = name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}(user_id={getattr(self, 'user_id', None)}, "
            f"provider={self.login_provider}, name={self.name})>"
        )
