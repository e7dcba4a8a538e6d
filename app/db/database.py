import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.core.settings import Settings
from app.db.accounts import metadata

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, settings: Settings, engine: AsyncEngine | None = None):
        self.settings = settings
        self.engine = engine or self._create_engine(settings)

    @staticmethod
    def _create_engine(settings: Settings) -> AsyncEngine:
        url = settings.sqlalchemy_url
        if url.startswith("sqlite"):
            return create_async_engine(url)
        return create_async_engine(
            url,
            pool_size=settings.db_pool_size,
            max_overflow=0,
            pool_pre_ping=True,
            pool_recycle=1800,
        )

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connected", extra={"dialect": self.engine.dialect.name})

    async def create_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info("Database schema initialized", extra={"tables": sorted(metadata.tables)})

    async def close(self) -> None:
        await self.engine.dispose()
