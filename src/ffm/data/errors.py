"""Custom exceptions for the storage layer."""


class DataError(Exception):
    """Base exception for the data layer."""


class PersistenceError(DataError):
    """Raised when the save store cannot be read or written."""
