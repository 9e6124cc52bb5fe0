"""
User service: login and session lookups, registration and password checks.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.user import UserCreate, UserRead
from lightbnb.utils.auth import verify_password
from lightbnb.utils.exceptions import UserNotFoundError
import logging

logger = logging.getLogger(__name__)


class UserService:
    """
    User operations consumed by the HTTP layer.

    Lookups return None when nothing matches and raise QueryError when the
    database fails, so the two cases never look alike.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.user_repo = UserRepository(db_session)

    async def get_user_with_email(self, email: str) -> Optional[UserRead]:
        """
        Get a single user by exact email.

        Returns:
            The user, or None if no user has this email

        Raises:
            QueryError: If the lookup fails
        """
        user = await self.user_repo.get_by_email(email)
        return UserRead.model_validate(user) if user else None

    async def get_user_with_id(self, user_id: int) -> Optional[UserRead]:
        """Get a single user by id, or None if there is none."""
        user = await self.user_repo.get_by_id(user_id)
        return UserRead.model_validate(user) if user else None

    async def require_user_with_id(self, user_id: int) -> UserRead:
        """
        Like get_user_with_id, but a missing user is an error.

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = await self.get_user_with_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def add_user(self, user_data: UserCreate) -> UserRead:
        """
        Add a new user.

        Returns:
            The stored user including its generated id
        """
        user = await self.user_repo.create_user(user_data.model_dump())
        return UserRead.model_validate(user)

    async def authenticate(self, email: str, password: str) -> Optional[UserRead]:
        """
        Check a login attempt against the stored password hash.

        Returns:
            The user when the password verifies, otherwise None
        """
        user = await self.get_user_with_email(email)
        if user is None:
            logger.info(f"Login attempt for unknown email: {email}")
            return None

        if not verify_password(password, user.password):
            logger.info(f"Login attempt with wrong password for user {user.id}")
            return None

        return user
