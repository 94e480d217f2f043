"""Lookup key normalization for case-insensitive uniqueness checks."""

import unicodedata


def normalize_key(value: str | None) -> str | None:
    """Return the normalized form of a user name, email or role name.

    The value is NFC-normalized and upper-cased so that visually identical
    names collide on the normalized unique indexes.
    """
    if value is None:
        return None
    return unicodedata.normalize("NFC", value).upper()
