import logging
import math

from app.core.errors import NotFoundError, UpstreamError, ValidationError
from app.models.movie import MovieDetailResponse, MoviePage, SearchResult
from app.services.batch_fetcher import BatchFetcher, LookupKey
from app.services.catalog_lists import CatalogLists
from app.services.normalizer import normalize_omdb_movie
from app.services.omdb_client import OMDbClient, ProviderFailure

logger = logging.getLogger(__name__)

LIST_NAMES = ("popular", "top_rated", "upcoming", "now_playing")
SEARCH_DETAIL_LIMIT = 8
# OMDb always pages search results ten at a time
PROVIDER_PAGE_SIZE = 10


def _parse_total(value: str | None) -> int:
    try:
        return max(int(value or 0), 0)
    except ValueError:
        return 0


class CatalogService:
    def __init__(self, client: OMDbClient, fetcher: BatchFetcher, lists: CatalogLists | None = None):
        self.client = client
        self.fetcher = fetcher
        self.lists = lists or CatalogLists()

    async def list_movies(self, name: str) -> MoviePage:
        if name not in LIST_NAMES:
            raise NotFoundError(f"Unknown movie list: {name}")
        self.client.ensure_configured()

        titles = self.lists.titles_for(name)
        movies = await self.fetcher.fetch_many([LookupKey.title(title) for title in titles])
        logger.info("Movie list served", extra={"list_name": name, "requested": len(titles), "fetched": len(movies)})

        return MoviePage(page=1, total_pages=1, total_results=len(movies), movies=movies)

    async def search(self, query: str | None, page: int = 1) -> MoviePage:
        query = (query or "").strip()
        if not query:
            raise ValidationError("Search query is required")
        self.client.ensure_configured()

        try:
            payload = await self.client.search(query, page)
            result = SearchResult.model_validate(payload)
        except (ProviderFailure, ValueError) as exc:
            logger.error(
                "OMDb search failed",
                extra={"query": query, "page": page, "error": str(exc)},
            )
            raise UpstreamError("Failed to search movies") from exc

        ids = [hit.imdb_id for hit in result.hits[:SEARCH_DETAIL_LIMIT] if hit.imdb_id]
        movies = await self.fetcher.fetch_many([LookupKey.imdb_id(imdb_id) for imdb_id in ids])

        # totals describe the provider's result set, not the detail fetches above
        total_results = _parse_total(result.total_results)
        logger.info(
            "OMDb search completed",
            extra={"query": query, "page": page, "hits": len(result.hits), "detailed": len(movies)},
        )
        return MoviePage(
            page=page,
            total_pages=math.ceil(total_results / PROVIDER_PAGE_SIZE),
            total_results=total_results,
            movies=movies,
        )

    async def detail(self, imdb_id: str) -> MovieDetailResponse:
        self.client.ensure_configured()
        try:
            payload = await self.client.fetch_by_id(imdb_id)
            movie = normalize_omdb_movie(payload)
        except (ProviderFailure, ValueError) as exc:
            logger.error("OMDb detail lookup failed", extra={"imdb_id": imdb_id, "error": str(exc)})
            raise UpstreamError("Failed to fetch movie details") from exc
        return MovieDetailResponse(movie=movie)
