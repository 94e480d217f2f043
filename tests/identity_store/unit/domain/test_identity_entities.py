"""Unit tests for the identity entity contracts."""

from uuid import UUID

from identity_store import (
    IdentityRole,
    IdentityRoleClaim,
    IdentityUser,
    IdentityUserClaim,
    IdentityUserLogin,
    IdentityUserRole,
    IdentityUserToken,
)

TEST_USER_ID = UUID("12345678-1234-5678-1234-567812345678")


class TestIdentityUser:
    """Tests for the IdentityUser base entity."""

    def test_defaults(self):
        """Flags start cleared and the failure counter at zero."""
        user = IdentityUser("alice")

        assert user.user_name == "alice"
        assert user.email is None
        assert user.email_confirmed is False
        assert user.phone_number_confirmed is False
        assert user.two_factor_enabled is False
        assert user.lockout_enabled is False
        assert user.lockout_end is None
        assert user.access_failed_count == 0

    def test_id_unset_when_not_given(self):
        """Key assignment is left to the key column default."""
        user = IdentityUser("alice")

        assert not hasattr(user, "id")

    def test_id_kept_when_given(self):
        user = IdentityUser("alice", id=TEST_USER_ID)

        assert user.id == TEST_USER_ID

    def test_new_users_get_distinct_concurrency_stamps(self):
        first = IdentityUser("alice")
        second = IdentityUser("bob")

        assert first.concurrency_stamp
        assert first.concurrency_stamp != second.concurrency_stamp

    def test_owned_collections_start_empty(self):
        user = IdentityUser("alice")

        assert user.claims == []
        assert user.logins == []
        assert user.roles == []
        assert user.tokens == []

    def test_str_and_repr(self):
        user = IdentityUser("alice", id=TEST_USER_ID)

        assert str(user) == "alice"
        assert "alice" in repr(user)
        assert str(TEST_USER_ID) in repr(user)

    def test_str_without_user_name(self):
        assert str(IdentityUser()) == ""


class TestIdentityRole:
    """Tests for the IdentityRole base entity."""

    def test_fields(self):
        role = IdentityRole("admin", normalized_name="ADMIN")

        assert role.name == "admin"
        assert role.normalized_name == "ADMIN"
        assert role.concurrency_stamp
        assert role.users == []
        assert role.claims == []
        assert not hasattr(role, "id")

    def test_str(self):
        assert str(IdentityRole("admin")) == "admin"


class TestChildEntities:
    """Tests for claims, links, logins and tokens."""

    def test_user_claim(self):
        claim = IdentityUserClaim("department", "sales", user_id=TEST_USER_ID)

        assert claim.claim_type == "department"
        assert claim.claim_value == "sales"
        assert claim.user_id == TEST_USER_ID
        assert not hasattr(claim, "id")

    def test_user_claim_owner_set_by_relationship(self):
        """Without an explicit owner the foreign key is left to the ORM."""
        claim = IdentityUserClaim("department", "sales")

        assert not hasattr(claim, "user_id")

    def test_role_claim(self):
        claim = IdentityRoleClaim("permission", "users.read", role_id=7)

        assert claim.role_id == 7
        assert claim.claim_value == "users.read"

    def test_user_role(self):
        link = IdentityUserRole(user_id=1, role_id=2)

        assert (link.user_id, link.role_id) == (1, 2)
        assert "role_id=2" in repr(link)

    def test_user_login(self):
        login = IdentityUserLogin("github", "alice-gh", "GitHub", user_id=1)

        assert login.login_provider == "github"
        assert login.provider_key == "alice-gh"
        assert login.provider_display_name == "GitHub"
        assert login.user_id == 1

    def test_user_token(self):
        token = IdentityUserToken("github", "access_token", "secret", user_id=1)

        assert token.login_provider == "github"
        assert token.name == "access_token"
        assert token.value == "secret"
        assert token.user_id == 1
