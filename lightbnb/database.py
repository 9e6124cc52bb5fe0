"""
Database connection and session management.
Handles async database operations with SQLAlchemy and connection pooling.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import Integer, text
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator, Optional, Any, Dict
from lightbnb.config import Settings, get_settings
from lightbnb.utils.exceptions import DatabaseConnectionError
import logging

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every table carries a database-generated integer primary key.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create an async engine for the configured store.

    PostgreSQL gets a sized connection pool; SQLite in-memory databases share
    a single connection so every session sees the same schema.
    """
    engine_kwargs: Dict[str, Any] = {"echo": settings.echo_sql}

    if settings.is_sqlite:
        if ":memory:" in settings.database_url:
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update(
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_pre_ping=True,
            pool_recycle=settings.pool_recycle,
            pool_timeout=settings.pool_timeout,
            connect_args={
                "server_settings": {
                    "application_name": settings.app_name.lower(),
                }
            },
        )

    return create_async_engine(settings.database_url, **engine_kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Create an async session factory bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@lru_cache()
def get_engine() -> AsyncEngine:
    """Get the process-wide engine built from cached settings."""
    return create_engine_from_settings(get_settings())


@lru_cache()
def get_session_factory() -> async_sessionmaker:
    return create_session_factory(get_engine())


@asynccontextmanager
async def get_session() -> AsyncIterator[AsyncSession]:
    """
    Yield an async database session and ensure it's closed after use.
    Any exception escaping the block rolls the session back.
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def verify_database_connection(engine: Optional[AsyncEngine] = None) -> None:
    """
    Check that the store is reachable.

    Raises:
        DatabaseConnectionError: If a trivial statement cannot be executed
    """
    target_engine = engine or get_engine()
    try:
        async with target_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Database connection failed: {e}")
        raise DatabaseConnectionError(str(e)) from e
    logger.info("Database connection successful")


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Create all tables known to the model metadata."""
    # Register models on the metadata
    import lightbnb.models  # noqa: F401

    target_engine = engine or get_engine()
    async with target_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created successfully")


async def drop_tables(engine: Optional[AsyncEngine] = None, settings: Optional[Settings] = None) -> None:
    """
    Drop all tables.
    Refuses to run against a production environment.
    """
    import lightbnb.models  # noqa: F401

    settings = settings or get_settings()
    if settings.is_production:
        raise RuntimeError("Cannot drop tables in production environment")

    target_engine = engine or get_engine()
    async with target_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database tables dropped successfully")


async def close_db_connection() -> None:
    """
    Dispose of the pooled connections.
    This should be called during application shutdown.
    """
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
    logger.info("Database connections closed")
