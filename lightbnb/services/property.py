"""
Property service for listing search and creation.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.config import get_settings
from lightbnb.repositories.property import PropertyRepository
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyRead,
    PropertyWithRating,
    PropertySearchFilters,
)
from lightbnb.utils.exceptions import PropertyNotFoundError
import logging

logger = logging.getLogger(__name__)


class PropertyService:
    """Property operations consumed by the HTTP layer."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.property_repo = PropertyRepository(db_session)

    async def get_all_properties(
        self,
        filters: Optional[PropertySearchFilters] = None,
        limit: Optional[int] = None
    ) -> List[PropertyWithRating]:
        """
        Search properties.

        Args:
            filters: Optional search criteria (prices in dollars)
            limit: Maximum number of results; defaults to the configured limit

        Returns:
            Properties with their average rating, cheapest first

        Raises:
            QueryError: If the search statement fails
        """
        if limit is None:
            limit = get_settings().default_limit

        rows = await self.property_repo.search_properties(filters, limit)
        return [PropertyWithRating.model_validate(row) for row in rows]

    async def get_property(self, property_id: int) -> PropertyRead:
        """
        Get a property by id.

        Raises:
            PropertyNotFoundError: If the property doesn't exist
        """
        property_obj = await self.property_repo.get_by_id(property_id)
        if property_obj is None:
            raise PropertyNotFoundError(property_id)
        return PropertyRead.model_validate(property_obj)

    async def add_property(self, property_data: PropertyCreate) -> PropertyRead:
        """
        Add a property; the database assigns its id.

        Returns:
            The stored property
        """
        property_obj = await self.property_repo.create_property(property_data.model_dump())
        return PropertyRead.model_validate(property_obj)
