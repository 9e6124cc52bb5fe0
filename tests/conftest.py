"""
Test configuration and fixtures for the LightBnB data access layer.
Provides an in-memory database per test, repository/service fixtures and test data factories.
"""

import pytest
import uuid
from datetime import date
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from lightbnb.config import Settings
from lightbnb.database import create_engine_from_settings, create_session_factory, create_tables
from lightbnb.models import User, Property, Reservation, PropertyReview
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.services.user import UserService
from lightbnb.services.property import PropertyService
from lightbnb.services.reservation import ReservationService


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at a private in-memory database."""
    return Settings(database_url=TEST_DATABASE_URL, environment="testing")


@pytest.fixture
async def test_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine with the full schema."""
    engine = create_engine_from_settings(test_settings)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def empty_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine whose database has no tables, so every statement fails."""
    engine = create_engine_from_settings(test_settings)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with create_session_factory(test_engine)() as session:
        yield session


@pytest.fixture
async def broken_session(empty_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a session on a database without schema."""
    async with create_session_factory(empty_engine)() as session:
        yield session


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    return ReservationRepository(db_session)


# Service fixtures
@pytest.fixture
def user_service(db_session: AsyncSession) -> UserService:
    return UserService(db_session)


@pytest.fixture
def property_service(db_session: AsyncSession) -> PropertyService:
    return PropertyService(db_session)


@pytest.fixture
def reservation_service(db_session: AsyncSession) -> ReservationService:
    return ReservationService(db_session)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        email: str = None,
        password: str = "$2b$12$placeholderhashvalue",
        name: str = "Test User"
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password,
        }

    @staticmethod
    async def create_user(user_repo: UserRepository, **kwargs) -> User:
        """Create a test user in the database."""
        return await user_repo.create_user(UserFactory.create_user_data(**kwargs))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Test Property",
        city: str = "Vancouver",
        cost_per_night: int = 10000,
        active: bool = True
    ) -> dict:
        """Create property data dictionary."""
        return {
            "owner_id": owner_id,
            "title": title,
            "description": "A cozy test property",
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "parking_spaces": 1,
            "number_of_bathrooms": 1,
            "number_of_bedrooms": 2,
            "country": "Canada",
            "street": "123 Test Street",
            "city": city,
            "province": "British Columbia",
            "post_code": "V5K 0A1",
            "active": active,
        }

    @staticmethod
    async def create_property(property_repo: PropertyRepository, owner_id: int, **kwargs) -> Property:
        """Create a test property in the database."""
        return await property_repo.create_property(
            PropertyFactory.create_property_data(owner_id=owner_id, **kwargs)
        )


class StayFactory:
    """Factory for reservations and reviews."""

    @staticmethod
    async def create_reservation(
        session: AsyncSession,
        property_id: int,
        guest_id: int,
        start_date: date = date(2023, 6, 1),
        end_date: date = date(2023, 6, 7)
    ) -> Reservation:
        reservation = Reservation(
            property_id=property_id,
            guest_id=guest_id,
            start_date=start_date,
            end_date=end_date,
        )
        session.add(reservation)
        await session.commit()
        return reservation

    @staticmethod
    async def create_review(
        session: AsyncSession,
        property_id: int,
        guest_id: int,
        rating: int,
        reservation_id: Optional[int] = None
    ) -> PropertyReview:
        review = PropertyReview(
            property_id=property_id,
            guest_id=guest_id,
            reservation_id=reservation_id,
            rating=rating,
            message="Lovely stay",
        )
        session.add(review)
        await session.commit()
        return review


# Common test fixtures
@pytest.fixture
async def test_owner(user_repository: UserRepository) -> User:
    """Create a property owner."""
    return await UserFactory.create_user(user_repository, email="owner@example.com", name="Olive Owner")


@pytest.fixture
async def test_guest(user_repository: UserRepository) -> User:
    """Create a guest."""
    return await UserFactory.create_user(user_repository, email="guest@example.com", name="Gus Guest")


@pytest.fixture
async def listed_properties(
    db_session: AsyncSession,
    property_repository: PropertyRepository,
    test_owner: User,
    test_guest: User
) -> dict:
    """
    Create four properties keyed by title:

    - "Cheap Vancouver": $50/night, ratings 4 and 5 (avg 4.5)
    - "Mid Vancouver": $150/night, rating 2
    - "Pricey Toronto": $300/night, rating 5, owned by the guest
    - "Unreviewed Vancouver": $80/night, no reviews
    """
    cheap = await PropertyFactory.create_property(
        property_repository, test_owner.id, title="Cheap Vancouver", city="Vancouver", cost_per_night=5000
    )
    mid = await PropertyFactory.create_property(
        property_repository, test_owner.id, title="Mid Vancouver", city="North Vancouver", cost_per_night=15000
    )
    pricey = await PropertyFactory.create_property(
        property_repository, test_guest.id, title="Pricey Toronto", city="Toronto", cost_per_night=30000
    )
    unreviewed = await PropertyFactory.create_property(
        property_repository, test_owner.id, title="Unreviewed Vancouver", city="Vancouver", cost_per_night=8000
    )

    await StayFactory.create_review(db_session, cheap.id, test_guest.id, 4)
    await StayFactory.create_review(db_session, cheap.id, test_guest.id, 5)
    await StayFactory.create_review(db_session, mid.id, test_guest.id, 2)
    await StayFactory.create_review(db_session, pricey.id, test_owner.id, 5)

    return {p.title: p for p in [cheap, mid, pricey, unreviewed]}
