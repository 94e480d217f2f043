"""External login linked to a user."""

from typing import Any


class IdentityUserLogin:
    """Credential issued by an external login provider.

    Identified by the (login_provider, provider_key) pair.
    """

    def __init__(
        self,
        login_provider: str,
        provider_key: str,
        provider_display_name: str | None = None,
        *,
        user_id: Any = None,
    ):
        if user_id is not None:
            self.user_id = user_id
        self.login_provider = login_provider
        self.provider_key = provider_key
        self.provider_display_name = provider_display_name

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}(provider={self.login_provider}, "
            f"key={self.provider_key})>"
        )
