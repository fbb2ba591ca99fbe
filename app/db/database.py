import asyncio
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import AppSettings
from app.core.errors import DatabaseUnavailableError
from app.core.logging import get_logger
from app.schemas.products import Product

logger = get_logger(__name__)


class ConnectionProvider:
    """
    Owns the one AsyncEngine (and its pool) shared by every request.

    The connect attempt runs once. Callers that arrive while it is in flight
    await the same task. If it fails the error is logged and the handle stays
    empty for the life of the process: no retry, no reconnect.
    """

    def __init__(self, settings: AppSettings):
        self.settings = settings
        self._task: Optional[asyncio.Task] = None
        self._engine: Optional[AsyncEngine] = None

    def start(self) -> None:
        """Schedule the single connect attempt. Safe to call more than once."""
        if self._task is None:
            self._task = asyncio.ensure_future(self._connect())

    async def get_connection(self) -> AsyncEngine:
        self.start()
        engine = await self._task
        if engine is None:
            raise DatabaseUnavailableError("Database connection is not available")
        return engine

    async def _connect(self) -> Optional[AsyncEngine]:
        engine = None
        try:
            engine = create_async_engine(self.settings.database_url, echo=self.settings.DB_ECHO)
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error("Database connection failed: %s", e)
            if engine is not None:
                await engine.dispose()
            return None

        logger.info("Database connected successfully")
        self._engine = engine
        return engine

    async def dispose(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None


# Create the Products table if missing. No drops and no migrations.
async def create_db_and_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all, tables=[Product.__table__])


# Dependency yielding an AsyncSession bound to the shared engine for each request
async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    provider: ConnectionProvider = request.app.state.connection_provider
    engine = await provider.get_connection()
    async with AsyncSession(engine) as session:
        try:
            yield session
        except Exception:
            # If an error occurs mid-request, rollback before the session closes
            await session.rollback()
            raise
