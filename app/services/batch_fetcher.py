import asyncio
import logging
from dataclasses import dataclass
from typing import Literal

from app.models.movie import NormalizedMovie
from app.services.normalizer import normalize_omdb_movie
from app.services.omdb_client import OMDbClient, ProviderFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupKey:
    kind: Literal["title", "imdb_id"]
    value: str

    @classmethod
    def title(cls, value: str) -> "LookupKey":
        return cls("title", value)

    @classmethod
    def imdb_id(cls, value: str) -> "LookupKey":
        return cls("imdb_id", value)


@dataclass(frozen=True)
class FetchSuccess:
    key: LookupKey
    movie: NormalizedMovie


@dataclass(frozen=True)
class FetchFailure:
    key: LookupKey
    reason: str


FetchOutcome = FetchSuccess | FetchFailure


class BatchFetcher:
    def __init__(self, client: OMDbClient, concurrency: int = 8):
        self.client = client
        self.concurrency = concurrency

    async def fetch_one(self, key: LookupKey) -> FetchOutcome:
        try:
            if key.kind == "imdb_id":
                payload = await self.client.fetch_by_id(key.value)
            else:
                payload = await self.client.fetch_by_title(key.value)
            return FetchSuccess(key, normalize_omdb_movie(payload))
        except ProviderFailure as exc:
            return FetchFailure(key, str(exc))
        except ValueError as exc:
            # pydantic validation errors land here too
            return FetchFailure(key, f"malformed record: {exc}")

    async def settle(self, keys: list[LookupKey]) -> list[FetchOutcome]:
        semaphore = asyncio.Semaphore(self.concurrency)

        async def _bounded(key: LookupKey) -> FetchOutcome:
            async with semaphore:
                return await self.fetch_one(key)

        results = await asyncio.gather(*[_bounded(key) for key in keys], return_exceptions=True)
        outcomes: list[FetchOutcome] = []
        for key, result in zip(keys, results):
            if isinstance(result, Exception):
                # one failing lookup never aborts the others
                logger.error(
                    "Unexpected error during OMDb lookup",
                    exc_info=result,
                    extra={"lookup_kind": key.kind, "lookup_value": key.value},
                )
                outcomes.append(FetchFailure(key, f"unexpected error: {result.__class__.__name__}"))
            elif isinstance(result, BaseException):
                raise result
            else:
                outcomes.append(result)
        return outcomes

    async def fetch_many(self, keys: list[LookupKey]) -> list[NormalizedMovie]:
        self.client.ensure_configured()

        outcomes = await self.settle(keys)
        movies: list[NormalizedMovie] = []
        for outcome in outcomes:
            if isinstance(outcome, FetchSuccess):
                movies.append(outcome.movie)
            else:
                logger.warning(
                    "Dropping failed OMDb lookup",
                    extra={"lookup_kind": outcome.key.kind, "lookup_value": outcome.key.value, "reason": outcome.reason},
                )

        logger.info("OMDb batch completed", extra={"requested": len(keys), "fetched": len(movies)})
        return movies
