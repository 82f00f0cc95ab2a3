"""Validation errors raised at the mutation boundary."""


class ValidationError(ValueError):
    """Raised when an entity payload is malformed."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        return {"message": self.message, "field": self.field}


def require_text(data: dict, key: str) -> str:
    """Return a required, non-blank string from a payload."""
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"'{key}' is required", field=key)
    return value.strip()
