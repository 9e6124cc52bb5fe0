"""
Base repository class with common operations using async SQLAlchemy.
Driver failures are logged and re-raised as QueryError; zero rows is never an error here.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select
from lightbnb.database import Base
from lightbnb.utils.exceptions import QueryError
from typing import TypeVar, Generic, Optional, Dict, Any, Type
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common operations.
    Each method issues a single statement through the session.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """
        Insert a new record; the database assigns its id.

        Args:
            obj_in: Dictionary of field values for the new record

        Returns:
            Created model instance

        Raises:
            QueryError: If the insert fails (constraint violation, lost connection, ...)
        """
        try:
            db_obj = self.model(**obj_in)
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)
            logger.debug(f"Created {self.model.__name__} with id: {db_obj.id}")
            return db_obj
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to create {self.model.__name__}: {e}")
            raise QueryError(f"create {self.model.__name__}", e) from e

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Get a record by primary key.

        Returns:
            Model instance or None if not found
        """
        try:
            result = await self.db.execute(select(self.model).where(self.model.id == id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to get {self.model.__name__} by id {id}: {e}")
            raise QueryError(f"get {self.model.__name__} by id", e) from e

    async def get_by_field(self, field_name: str, value: Any) -> Optional[ModelType]:
        """
        Get the first record whose ``field_name`` equals ``value`` exactly.

        Returns:
            Model instance or None if not found
        """
        try:
            field = getattr(self.model, field_name)
            result = await self.db.execute(
                select(self.model).where(field == value).order_by(self.model.id).limit(1)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to get {self.model.__name__} by {field_name}: {e}")
            raise QueryError(f"get {self.model.__name__} by {field_name}", e) from e
