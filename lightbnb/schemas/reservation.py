"""
Pydantic schemas for reservations.
"""

from pydantic import BaseModel, ConfigDict
from datetime import date
from lightbnb.schemas.property import PropertyRead


class ReservationRead(BaseModel):
    """Reservation as stored."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    start_date: date
    end_date: date
    property_id: int
    guest_id: int


class ReservationWithProperty(ReservationRead):
    """Reservation joined with the reserved property."""

    property: PropertyRead
