"""
Custom exception classes for the LightBnB data access layer.
Separates "the store failed" from "no rows matched" so callers never have to guess.
"""

from typing import Any, Optional


class LightBnBError(Exception):
    """Base exception class."""

    error_code = "LIGHTBNB_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class DatabaseConnectionError(LightBnBError):
    """The database could not be reached."""

    error_code = "DATABASE_UNAVAILABLE"

    def __init__(self, detail: str = "Database is unreachable"):
        super().__init__(detail)


class QueryError(LightBnBError):
    """
    A statement failed inside the database driver.
    Wraps the original driver exception, which is also chained as ``__cause__``.
    """

    error_code = "QUERY_ERROR"

    def __init__(self, operation: str, original: Optional[BaseException] = None):
        detail = f"Query failed during {operation}"
        if original is not None:
            detail += f": {original}"
        super().__init__(detail)
        self.operation = operation
        self.original = original


class NotFoundError(LightBnBError):
    """Resource not found exception."""

    error_code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Optional[Any] = None):
        detail = f"{resource} not found"
        if resource_id is not None:
            detail += f" with ID: {resource_id}"
        super().__init__(detail)
        self.resource = resource
        self.resource_id = resource_id


class UserNotFoundError(NotFoundError):
    """User not found exception."""

    def __init__(self, user_id: Any):
        super().__init__("User", user_id)


class PropertyNotFoundError(NotFoundError):
    """Property not found exception."""

    def __init__(self, property_id: Any):
        super().__init__("Property", property_id)
