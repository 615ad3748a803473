"""Error types raised by galaxy generation."""

from typing import Any, Optional


class InvalidParameter(ValueError):
    """A galaxy parameter is outside its valid domain.

    Recoverable: callers reject the update and keep the previously
    generated galaxy.
    """

    def __init__(self, field: str, value: Any, reason: Optional[str] = None):
        self.field = field
        self.value = value
        self.reason = reason
        message = f"Invalid value for '{field}': {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
