"""
Property repository for listing search and creation.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import text
from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.property_query import PropertySearchQuery
from lightbnb.models.property import Property
from lightbnb.schemas.property import PropertySearchFilters
from lightbnb.utils.exceptions import QueryError
from typing import Optional, List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """Repository for property listings."""

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def search_properties(
        self,
        filters: Optional[PropertySearchFilters] = None,
        limit: int = 10
    ) -> List[Dict[str, Any]]:
        """
        Search properties with optional filters.

        Args:
            filters: Search criteria; any subset may be set
            limit: Maximum number of rows to return

        Returns:
            Row mappings of property columns plus ``average_rating``,
            ordered by nightly cost ascending
        """
        sql, params = PropertySearchQuery(filters, limit).build()
        logger.debug(f"Property search: {sql} {params}")

        try:
            result = await self.db.execute(text(sql), params)
            rows = [dict(row) for row in result.mappings().all()]

            logger.debug(f"Property search returned {len(rows)} results")
            return rows
        except SQLAlchemyError as e:
            logger.error(f"Failed to search properties: {e}")
            raise QueryError("search properties", e) from e

    async def create_property(self, property_data: Dict[str, Any]) -> Property:
        """
        Insert a property.
        The id comes from the table's sequence, so it is stable under
        deletions and concurrent inserts.
        """
        property_obj = await self.create(property_data)
        logger.info(f"Created property: {property_obj.title} (ID: {property_obj.id})")
        return property_obj
