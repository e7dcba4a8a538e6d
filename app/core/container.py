import logging

import httpx

from app.core.settings import Settings
from app.db.accounts import AccountRepository
from app.db.database import Database
from app.services.account_service import AccountService
from app.services.batch_fetcher import BatchFetcher
from app.services.catalog_lists import CatalogLists
from app.services.catalog_service import CatalogService
from app.services.omdb_client import OMDbClient

logger = logging.getLogger(__name__)


class AppContainer:
    def __init__(
        self,
        settings: Settings,
        *,
        omdb_transport: httpx.AsyncBaseTransport | None = None,
        catalog_lists: CatalogLists | None = None,
        database: Database | None = None,
    ):
        self.settings = settings

        self.omdb_client = OMDbClient(settings, transport=omdb_transport)
        self.batch_fetcher = BatchFetcher(self.omdb_client, concurrency=settings.omdb_concurrency)
        self.catalog_service = CatalogService(
            client=self.omdb_client,
            fetcher=self.batch_fetcher,
            lists=catalog_lists or CatalogLists(),
        )

        self.database = database or Database(settings)
        self.account_repository = AccountRepository(self.database.engine)
        self.account_service = AccountService(self.account_repository, hash_rounds=settings.password_hash_rounds)

        logger.info(
            "App container initialized",
            extra={
                "environment": settings.environment,
                "omdb_base_url": settings.omdb_base_url,
                "omdb_configured": settings.omdb_configured,
                "omdb_timeout_seconds": settings.omdb_timeout_seconds,
                "omdb_concurrency": settings.omdb_concurrency,
                "database_dialect": self.database.engine.dialect.name,
                "db_pool_size": settings.db_pool_size,
                "allowed_origins": settings.cors_origins,
            },
        )

    async def startup(self) -> None:
        # any failure here aborts bootstrap instead of serving half-broken
        await self.database.ping()
        await self.database.create_schema()
        if self.settings.omdb_verify_on_startup:
            await self.omdb_client.ping()
        elif not self.settings.omdb_configured:
            logger.warning("OMDB_API_KEY is not set; movie endpoints will return 500")

    async def close(self) -> None:
        await self.omdb_client.close()
        await self.database.close()
