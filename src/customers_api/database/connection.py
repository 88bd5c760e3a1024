"""
Database connection management
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import settings
from ..dbmodels import target_metadata
from ..errors import ConstraintViolation, CustomerServiceError, StoreError
from ..logging import get_logger

logger = get_logger(__name__)


def to_async_url(database_url: str) -> str:
    """Map a plain database URL onto the async driver used for it."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


def describe_integrity_error(error: IntegrityError) -> str:
    """Turn a store-reported constraint failure into a caller-facing message."""
    detail = str(error.orig).lower()
    if "email" in detail:
        return "a customer with this email already exists"
    if "pkey" in detail or "customers.id" in detail:
        return "a customer with this id already exists"
    return "customer violates a uniqueness constraint"


class Database:
    """Async engine plus session factory shared by every resolver call.

    Connections come from the engine's bounded pool; each `session()` scope
    checks one out and returns it on exit.
    """

    def __init__(
        self,
        database_url: str,
        *,
        pool_size: int | None = None,
        max_overflow: int | None = None,
        echo: bool | None = None,
    ):
        self.url = to_async_url(database_url)

        engine_kwargs: dict[str, Any] = {
            "echo": settings.sql_echo if echo is None else echo,
        }
        # SQLite engines use their own pool classes which take no sizing options
        if not self.url.startswith("sqlite"):
            engine_kwargs["pool_size"] = pool_size or settings.database_pool_size
            engine_kwargs["max_overflow"] = (
                settings.database_max_overflow if max_overflow is None else max_overflow
            )
            engine_kwargs["pool_pre_ping"] = True

        self.engine: AsyncEngine = create_async_engine(self.url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls) -> Database:
        return cls(settings.database_url)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session as one unit of work.

        Commits on success and rolls back on any failure. Store exceptions are
        translated into domain errors; domain errors pass through unchanged.
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except CustomerServiceError:
                await session.rollback()
                raise
            except IntegrityError as e:
                await session.rollback()
                logger.info("Store rejected write", error=str(e.orig))
                raise ConstraintViolation(describe_integrity_error(e)) from e
            except (SQLAlchemyError, OSError) as e:
                await session.rollback()
                logger.error("Store operation failed", error=str(e), error_type=type(e).__name__)
                raise StoreError(f"database error: {type(e).__name__}") from e

    async def create_schema(self) -> None:
        """Create the customers table if it does not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(target_metadata.create_all, checkfirst=True)
        logger.info("Database schema ensured", tables=sorted(target_metadata.tables))

    async def check_connection(self) -> tuple[bool, str | None]:
        """
        Test the database connection and return helpful error messages.

        Returns:
            tuple: (success: bool, error_message: str | None)
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                return True, None
        except Exception as e:
            error_str = str(e)
            error_type = type(e).__name__

            if "does not exist" in error_str and "role" in error_str:
                return False, (
                    f"Cannot connect to database: {error_str}\n"
                    f"The database user/role does not exist. "
                    f"Please check your database credentials."
                )
            elif "Connection refused" in error_str or "could not connect" in error_str:
                return False, (
                    f"Cannot connect to database server: {error_str}\n"
                    f"The database server appears to be down or unreachable."
                )
            elif "password authentication failed" in error_str:
                return False, (
                    f"Database authentication failed: {error_str}\n"
                    f"Please check your database credentials."
                )
            else:
                return False, f"Database connection error ({error_type}): {error_str}"

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connection pool closed")


async def init_database(database_url: str | None = None) -> Database:
    """Connect to the store and ensure the schema exists.

    Raises:
        StoreError: if the store is unreachable or the schema cannot be created
    """
    database = Database(database_url) if database_url else Database.from_settings()

    ok, error_message = await database.check_connection()
    if not ok:
        logger.error("Database connection failed", error=error_message)
        await database.dispose()
        raise StoreError(error_message or "database connection failed")

    try:
        await database.create_schema()
    except SQLAlchemyError as e:
        logger.error("Could not create customers table", error=str(e))
        await database.dispose()
        raise StoreError(f"could not create customers table: {e}") from e

    logger.info("Database initialized", database_url=database.engine.url.render_as_string())
    return database
