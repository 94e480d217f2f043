"""Unit tests for the supported primary key types."""

from uuid import UUID

import pytest
from sqlalchemy import Integer, String, Uuid

from identity_store import KeyType


class TestKeyType:
    """Test column types and key generators per key type."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("uuid", KeyType.UUID), ("string", KeyType.STRING), ("int", KeyType.INTEGER)],
    )
    def test_from_setting_value(self, value, expected):
        assert KeyType(value) is expected

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            KeyType("guid")

    def test_uuid(self):
        new_key = KeyType.UUID.default_factory()

        assert isinstance(KeyType.UUID.column_type(), Uuid)
        assert isinstance(new_key(), UUID)

    def test_string(self):
        column_type = KeyType.STRING.column_type()
        new_key = KeyType.STRING.default_factory()

        assert isinstance(column_type, String)
        assert column_type.length == 450
        key = new_key()
        assert isinstance(key, str)
        assert UUID(key)
        assert key != new_key()

    def test_integer_keys_are_assigned_by_the_database(self):
        assert isinstance(KeyType.INTEGER.column_type(), Integer)
        assert KeyType.INTEGER.default_factory() is None

    def test_column_types_are_fresh_instances(self):
        """Every key column gets its own type object."""
        assert KeyType.STRING.column_type() is not KeyType.STRING.column_type()
