"""
User repository for login and session lookups.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for user records."""

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by exact email match.
        No case or whitespace normalization is applied.
        """
        return await self.get_by_field("email", email)

    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """
        Insert a user with the caller-supplied name, email and password.

        There is no uniqueness pre-check; a database constraint, if one
        exists, is the only guard and surfaces as QueryError.
        """
        user = await self.create(user_data)
        logger.info(f"Created user: {user.email} (ID: {user.id})")
        return user
