"""
Reservation service.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.config import get_settings
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.schemas.property import PropertyRead
from lightbnb.schemas.reservation import ReservationWithProperty


class ReservationService:
    """Reservation operations consumed by the HTTP layer."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.reservation_repo = ReservationRepository(db_session)

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> List[ReservationWithProperty]:
        """
        Get all reservations for a single guest, each with its property.

        Raises:
            QueryError: If the lookup fails
        """
        if limit is None:
            limit = get_settings().default_limit

        rows = await self.reservation_repo.get_reservations_for_guest(guest_id, limit)
        return [
            ReservationWithProperty(
                id=reservation.id,
                start_date=reservation.start_date,
                end_date=reservation.end_date,
                property_id=reservation.property_id,
                guest_id=reservation.guest_id,
                property=PropertyRead.model_validate(property_obj),
            )
            for reservation, property_obj in rows
        ]
