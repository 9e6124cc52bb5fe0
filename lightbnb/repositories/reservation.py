"""
Reservation repository.
Reservations are always read together with the property they belong to.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.reservation import Reservation
from lightbnb.models.property import Property
from lightbnb.utils.exceptions import QueryError
from typing import List, Tuple
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """Repository for reservation lookups."""

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    async def get_reservations_for_guest(self, guest_id: int, limit: int = 10) -> List[Tuple[Reservation, Property]]:
        """
        Get a guest's reservations joined with their properties.

        Args:
            guest_id: ID of the guest user
            limit: Maximum number of rows to return

        Returns:
            List of (reservation, property) pairs ordered by stay start date
        """
        try:
            query = (
                select(Reservation, Property)
                .join(Property, Reservation.property_id == Property.id)
                .where(Reservation.guest_id == guest_id)
                .order_by(Reservation.start_date, Reservation.id)
                .limit(limit)
            )

            result = await self.db.execute(query)
            rows = [(row[0], row[1]) for row in result.all()]

            logger.debug(f"Retrieved {len(rows)} reservations for guest {guest_id}")
            return rows
        except SQLAlchemyError as e:
            logger.error(f"Failed to get reservations for guest {guest_id}: {e}")
            raise QueryError("get reservations for guest", e) from e
