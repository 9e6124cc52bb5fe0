"""
Utility modules for the LightBnB data access layer.
"""

from lightbnb.utils.exceptions import (
    LightBnBError,
    DatabaseConnectionError,
    QueryError,
    NotFoundError,
    UserNotFoundError,
    PropertyNotFoundError,
)

__all__ = [
    "LightBnBError",
    "DatabaseConnectionError",
    "QueryError",
    "NotFoundError",
    "UserNotFoundError",
    "PropertyNotFoundError",
]
