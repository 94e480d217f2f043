"""Identity store exceptions.

Only schema configuration problems are reported with these types. Errors raised
while reading or writing rows (unique index violations, stale concurrency
stamps, foreign key violations) come straight from SQLAlchemy.
"""


class IdentityStoreError(Exception):
    """Base exception for all identity store errors."""

    def __init__(self, message: str = "Identity store error"):
        self.message = message
        super().__init__(self.message)


class SchemaConfigurationError(IdentityStoreError):
    """Raised when the identity schema cannot be built as configured."""

    def __init__(self, message: str = "Invalid identity schema configuration"):
        super().__init__(message)


class InvalidEntityTypeError(SchemaConfigurationError):
    """Raised when an entity type does not derive from its base entity."""

    def __init__(self, kind: str, entity_type: object, base: type):
        self.kind = kind
        self.entity_type = entity_type
        self.base = base
        type_name = getattr(entity_type, "__name__", repr(entity_type))
        super().__init__(
            f"{kind} entity type {type_name} must derive from {base.__name__}",
        )


class EntityAlreadyMappedError(SchemaConfigurationError):
    """Raised when an entity type is already mapped by another schema."""

    def __init__(self, kind: str, entity_type: type):
        self.kind = kind
        self.entity_type = entity_type
        super().__init__(
            f"{kind} entity type {entity_type.__name__} is already mapped; "
            "each entity type can belong to a single identity schema",
        )
