"""Primary key types supported for users and roles."""

from collections.abc import Callable
from enum import Enum
from typing import Any
from uuid import uuid4

from sqlalchemy import Integer, String, Uuid
from sqlalchemy.types import TypeEngine

STRING_KEY_LENGTH = 450


class KeyType(str, Enum):
    """Key type shared by users, roles and every column referencing them."""

    UUID = "uuid"
    STRING = "string"
    INTEGER = "int"

    def column_type(self) -> TypeEngine[Any]:
        """Return a fresh column type for a key or foreign key column."""
        if self is KeyType.UUID:
            return Uuid()
        if self is KeyType.STRING:
            return String(STRING_KEY_LENGTH)
        return Integer()

    def default_factory(self) -> Callable[[], Any] | None:
        """Return the client-side generator for new keys.

        Integer keys have no generator; the database assigns them.
        """
        if self is KeyType.UUID:
            return uuid4
        if self is KeyType.STRING:
            return _new_string_key
        return None


def _new_string_key() -> str:
    return str(uuid4())
