"""
Tests for error handling.
A failing statement raises QueryError; no rows is a plain None or empty list.
"""

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from lightbnb.config import Settings
from lightbnb.database import create_engine_from_settings, verify_database_connection
from lightbnb.schemas import UserCreate, PropertySearchFilters
from lightbnb.services.user import UserService
from lightbnb.services.property import PropertyService
from lightbnb.services.reservation import ReservationService
from lightbnb.utils.exceptions import (
    LightBnBError,
    DatabaseConnectionError,
    QueryError,
    NotFoundError,
    PropertyNotFoundError,
)


class TestQueryErrors:
    """Driver failures surface as QueryError, distinct from empty results."""

    @pytest.mark.asyncio
    async def test_lookup_failure_is_not_none(self, broken_session: AsyncSession):
        service = UserService(broken_session)

        with pytest.raises(QueryError) as exc_info:
            await service.get_user_with_email("owner@example.com")

        assert isinstance(exc_info.value.__cause__, SQLAlchemyError)
        assert exc_info.value.original is exc_info.value.__cause__
        assert "get User by email" in exc_info.value.operation

    @pytest.mark.asyncio
    async def test_lookup_zero_rows_is_none(self, user_service: UserService):
        assert await user_service.get_user_with_email("owner@example.com") is None

    @pytest.mark.asyncio
    async def test_get_user_with_id_failure(self, broken_session: AsyncSession):
        with pytest.raises(QueryError):
            await UserService(broken_session).get_user_with_id(1)

    @pytest.mark.asyncio
    async def test_insert_failure_rolls_back(self, broken_session: AsyncSession):
        service = UserService(broken_session)
        user = UserCreate(name="Test User", email="test@example.com", password="hash")

        with pytest.raises(QueryError):
            await service.add_user(user)

        # Session is usable again after the rollback
        with pytest.raises(QueryError):
            await service.add_user(user)

    @pytest.mark.asyncio
    async def test_search_failure(self, broken_session: AsyncSession):
        with pytest.raises(QueryError) as exc_info:
            await PropertyService(broken_session).get_all_properties(PropertySearchFilters(city="Paris"), limit=5)

        assert exc_info.value.operation == "search properties"

    @pytest.mark.asyncio
    async def test_search_zero_rows_is_empty_list(self, property_service: PropertyService):
        assert await property_service.get_all_properties(PropertySearchFilters(city="Paris"), limit=5) == []

    @pytest.mark.asyncio
    async def test_reservation_failure(self, broken_session: AsyncSession):
        with pytest.raises(QueryError):
            await ReservationService(broken_session).get_all_reservations(1, limit=5)


class TestConnectionErrors:
    """Startup connectivity check."""

    @pytest.mark.asyncio
    async def test_reachable_database(self, test_engine: AsyncEngine):
        await verify_database_connection(test_engine)

    @pytest.mark.asyncio
    async def test_unreachable_database(self, tmp_path):
        missing = tmp_path / "missing" / "lightbnb.db"
        engine = create_engine_from_settings(
            Settings(database_url=f"sqlite+aiosqlite:///{missing}", environment="testing")
        )
        try:
            with pytest.raises(DatabaseConnectionError):
                await verify_database_connection(engine)
        finally:
            await engine.dispose()


class TestExceptionTaxonomy:
    """Test exception classes."""

    def test_query_error_message(self):
        original = RuntimeError("relation does not exist")
        error = QueryError("search properties", original)

        assert isinstance(error, LightBnBError)
        assert error.error_code == "QUERY_ERROR"
        assert "search properties" in str(error)
        assert "relation does not exist" in str(error)

    def test_not_found_message(self):
        error = PropertyNotFoundError(42)

        assert isinstance(error, NotFoundError)
        assert error.detail == "Property not found with ID: 42"
        assert error.resource_id == 42

    def test_connection_error_default(self):
        assert DatabaseConnectionError().error_code == "DATABASE_UNAVAILABLE"
