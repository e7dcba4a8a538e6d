import logging
from typing import Any

import httpx

from app.core.errors import ConfigError
from app.core.settings import Settings

logger = logging.getLogger(__name__)


class ProviderFailure(Exception):
    """Base for failed OMDb calls. Never rendered to HTTP callers directly."""


class ProviderError(ProviderFailure):
    """OMDb answered but flagged the call as failed (``Response: "False"``)."""


class TransportError(ProviderFailure):
    """OMDb could not be reached or did not answer in time."""


class OMDbClient:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.omdb_base_url,
            timeout=settings.omdb_timeout_seconds,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    def ensure_configured(self) -> None:
        if not self.settings.omdb_configured:
            raise ConfigError("OMDb API key not configured")

    async def fetch(self, params: dict[str, Any]) -> dict[str, Any]:
        merged_params = {"apikey": self.settings.omdb_api_key, **params}
        try:
            response = await self._client.get("/", params=merged_params)
        except httpx.TimeoutException as exc:
            raise TransportError("OMDb request timed out") from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"OMDb request failed: {exc.__class__.__name__}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError(f"OMDb returned a non-JSON body (HTTP {response.status_code})") from exc

        if not isinstance(payload, dict):
            raise ProviderError("OMDb returned an unexpected payload")
        # OMDb reports most failures in the body, sometimes with a 200 status
        if payload.get("Response") == "False":
            raise ProviderError(payload.get("Error") or "OMDb API error")
        if response.status_code >= 400:
            raise ProviderError(f"OMDb request failed with HTTP {response.status_code}")
        return payload

    async def fetch_by_title(self, title: str) -> dict[str, Any]:
        return await self.fetch({"t": title, "type": "movie"})

    async def fetch_by_id(self, imdb_id: str) -> dict[str, Any]:
        return await self.fetch({"i": imdb_id})

    async def search(self, query: str, page: int = 1) -> dict[str, Any]:
        return await self.fetch({"s": query, "type": "movie", "page": page})

    async def ping(self) -> None:
        self.ensure_configured()
        await self.fetch_by_id("tt0111161")
        logger.info("OMDb connectivity check passed")
