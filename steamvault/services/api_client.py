# analytics api client — single choke point for outbound calls
# wraps httpx.AsyncClient, normalizes errors, decodes json into pydantic models
#
# failure handling:
#   transport failure (dns, refused, timeout) -> NetworkError
#   non-2xx response                          -> HttpError(status)
#   bad content-encoding, non-json body,
#   or unexpected shape                       -> DecodeError
# every failure is logged with the endpoint, then raised. no retries.

import logging
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from steamvault.models.analytics import HeatmapDay, StreakStats, SummaryStats, TrendsResponse
from steamvault.models.game import ComparisonData, GameDetails, SearchResult, TopGamesResponse
from steamvault.services.errors import DecodeError, HttpError, NetworkError

logger = logging.getLogger(__name__)

TOP_GAMES_PERIODS = ("week", "month", "lifetime")
MIN_SEARCH_LENGTH = 2

DEFAULT_HEADERS = {"Content-Type": "application/json"}

_heatmap_adapter = TypeAdapter(list[HeatmapDay])
_search_adapter = TypeAdapter(list[SearchResult])
_comparison_adapter = TypeAdapter(ComparisonData)


class AnalyticsClient:
    """async client for the analytics service.

    base_url is passed in explicitly so tests never depend on process config;
    transport lets tests swap in httpx.MockTransport.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """release the connection pool"""
        await self._client.aclose()

    async def request(
        self,
        path: str,
        method: str = "GET",
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        json: Optional[Any] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """issue a request against base_url + path and return the decoded json body"""
        url = f"{self.base_url}{path}"
        merged_headers = {**self.headers, **(headers or {})}

        try:
            response = await self._client.request(
                method, path, params=params, json=json, headers=merged_headers
            )
        except httpx.DecodingError as e:
            logger.error(f"Undecodable body from {url}: {e!r}")
            raise DecodeError(url, f"Failed to decode response: {e!r}") from e
        except httpx.RequestError as e:
            logger.error(f"Fetch error for {url}: {e!r}")
            raise NetworkError(url, f"Request failed: {e!r}") from e

        if not response.is_success:
            logger.error(f"API Error {response.status_code} for {url}")
            raise HttpError(url, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise DecodeError(url, f"Failed to decode response: {e}") from e

    def _decode(self, path: str, payload: Any, model):
        """validate a decoded body against a model or TypeAdapter"""
        try:
            if isinstance(model, TypeAdapter):
                return model.validate_python(payload)
            return model.model_validate(payload)
        except ValidationError as e:
            url = f"{self.base_url}{path}"
            logger.error(f"Unexpected response shape from {url}: {e.error_count()} errors")
            raise DecodeError(url, f"Unexpected response shape: {e}") from e

    # endpoint wrappers

    async def get_latest_summary(self) -> SummaryStats:
        path = "/demo/analytics/summary/latest"
        return self._decode(path, await self.request(path), SummaryStats)

    async def get_top_games(
        self, period: str = "week", page: int = 1, limit: int = 10
    ) -> TopGamesResponse:
        if period not in TOP_GAMES_PERIODS:
            raise ValueError(f"period must be one of {TOP_GAMES_PERIODS}, got {period!r}")
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")

        path = "/demo/analytics/top_games"
        payload = await self.request(path, params={"period": period, "page": page, "limit": limit})
        return self._decode(path, payload, TopGamesResponse)

    async def get_trends(self) -> TrendsResponse:
        path = "/demo/analytics/trends"
        return self._decode(path, await self.request(path), TrendsResponse)

    async def get_streaks(self, appid: Optional[int] = None) -> StreakStats:
        path = "/demo/analytics/streaks"
        params = {"appid": appid} if appid is not None else None
        return self._decode(path, await self.request(path, params=params), StreakStats)

    async def get_heatmap(self, limit_days: int = 90) -> list[HeatmapDay]:
        path = "/demo/analytics/activity/heatmap"
        payload = await self.request(path, params={"limit_days": limit_days})
        return self._decode(path, payload, _heatmap_adapter)

    async def search_games(self, query: str) -> list[SearchResult]:
        """search by name. queries under two characters return [] without a call."""
        query = (query or "").strip()
        if len(query) < MIN_SEARCH_LENGTH:
            return []
        path = "/demo/games/search"
        payload = await self.request(path, params={"q": query})
        return self._decode(path, payload, _search_adapter)

    async def get_game_details(self, appid: int, days: int = 30) -> GameDetails:
        path = f"/demo/games/{appid}"
        payload = await self.request(path, params={"days": days})
        return self._decode(path, payload, GameDetails)

    async def compare_games(self, appids: list[int]) -> ComparisonData:
        """fetch full history for each appid. the date window is applied client-side."""
        unique_ids = list(dict.fromkeys(appids))
        if not unique_ids:
            return {}
        path = "/demo/analytics/games/compare"
        payload = await self.request(path, params=[("appids", appid) for appid in unique_ids])
        return self._decode(path, payload, _comparison_adapter)
