"""
Registry exceptions.

Raised by the service layer and translated to HTTP responses by the API.
"""

BASE_FIELD = "base"


class RegistryError(Exception):
    """Base registry error."""
    pass


class ValidationError(RegistryError):
    """
    A correction was rejected.

    Carries messages keyed by field name. Form-level messages use the
    ``base`` key.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{field}: {msg}" for field, msgs in errors.items() for msg in msgs)
        )

    @classmethod
    def on_field(cls, field: str, message: str) -> "ValidationError":
        return cls({field: [message]})

    @classmethod
    def on_base(cls, message: str) -> "ValidationError":
        return cls({BASE_FIELD: [message]})


class PersonNotFoundError(RegistryError):
    """No current identity exists for the requested WCA ID."""

    def __init__(self, wca_id: str):
        self.wca_id = wca_id
        super().__init__(f"Person not found: {wca_id}")


class IdentityIntegrityError(RegistryError):
    """Referential integrity is broken (should never happen)."""
    pass
