"""Service-layer exceptions."""

from ffm.data.errors import PersistenceError


class InvalidInputError(ValueError):
    """Raised when caller-supplied values cannot be parsed."""


__all__ = ["InvalidInputError", "PersistenceError"]
