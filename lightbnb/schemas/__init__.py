"""
Pydantic schemas for LightBnB records and search criteria.
"""

from lightbnb.schemas.user import UserBase, UserCreate, UserRead
from lightbnb.schemas.property import (
    PropertyBase,
    PropertyCreate,
    PropertyRead,
    PropertyWithRating,
    PropertySearchFilters,
)
from lightbnb.schemas.reservation import ReservationRead, ReservationWithProperty

__all__ = [
    "UserBase",
    "UserCreate",
    "UserRead",
    "PropertyBase",
    "PropertyCreate",
    "PropertyRead",
    "PropertyWithRating",
    "PropertySearchFilters",
    "ReservationRead",
    "ReservationWithProperty",
]
