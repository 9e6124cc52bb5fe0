"""
Service layer: the operations the web application calls.
"""

from lightbnb.services.user import UserService
from lightbnb.services.property import PropertyService
from lightbnb.services.reservation import ReservationService

__all__ = [
    "UserService",
    "PropertyService",
    "ReservationService",
]
