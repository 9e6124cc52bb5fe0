"""
Repository layer for database access.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.property_query import Predicate, PropertySearchQuery, clause_prefix

__all__ = [
    "BaseRepository",
    "UserRepository",
    "PropertyRepository",
    "ReservationRepository",
    "Predicate",
    "PropertySearchQuery",
    "clause_prefix",
]
