# shared fixtures for dashboard api tests
# provides a fake analytics service behind httpx.MockTransport, a real
# AnalyticsClient wired to it, and an httpx test client for the app

from contextlib import asynccontextmanager

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from steamvault.main import app
from steamvault.dependencies import get_api_client
from steamvault.services.api_client import AnalyticsClient


BASE_URL = "http://analytics.test"


# sample analytics api payloads (as the service returns them)

SAMPLE_SUMMARY = {
    "date": "2025-11-20",
    "total_playtime_minutes": 185,
    "total_games_tracked": 42,
    "new_games_count": 1,
    "average_playtime_per_game": 61.7,
    "total_playtime_change": -35,
    "most_played_name": "Counter-Strike 2",
    "most_played_minutes": 120,
}

SAMPLE_GAMES = [
    {"appid": 730, "name": "Counter-Strike 2", "img_icon_url": "cs2.jpg", "total_playtime": 540},
    {"appid": 570, "name": "Dota 2", "img_icon_url": "dota2.jpg", "total_playtime": 300},
    {"appid": 440, "name": "Team Fortress 2", "img_icon_url": None, "playtime_forever": 95},
]

SAMPLE_TRENDS = {
    "trends": {
        "this_week": {"total_playtime": 720},
        "last_week": {"total_playtime": 600},
        "change_vs_last_week": "120",
    }
}

SAMPLE_OVERALL_STREAK = {"current_streak": 4, "longest_streak": 12}

SAMPLE_GAME_STREAKS = {
    "730": {"current_streak": 3, "longest_streak": 10, "name": "Counter-Strike 2"},
    "570": {"current_streak": 0, "longest_streak": 0, "name": "Dota 2"},
    # 440 fails with a server error
}

SAMPLE_HEATMAP = [
    {"date": "2025-01-30", "total_playtime": 0, "games_played": 0},
    {"date": "2025-01-31", "total_playtime": 50, "games_played": 1},
    {"date": "2025-02-01", "total_playtime": 100, "games_played": 2},
]

SAMPLE_GAME_DETAILS = {
    "appid": 730,
    "name": "Counter-Strike 2",
    "img_icon_url": "cs2.jpg",
    "playtime_forever": 700,
    "history": [
        {"date": "2025-09-01", "playtime_forever": 100},
        {"date": "2025-09-11", "playtime_forever": 300},
        {"date": "2025-10-11", "playtime_forever": 700},
    ],
}

SAMPLE_SEARCH = [
    {"appid": 730, "name": "Counter-Strike 2", "img_icon_url": "cs2.jpg"},
    {"appid": 10, "name": "Counter-Strike", "img_icon_url": None},
]

SAMPLE_COMPARE = {
    "730": [
        {"date": "2025-01-01", "playtime_forever": 10},
        {"date": "2025-01-03", "playtime_forever": 30},
    ],
    "570": [
        {"date": "2025-01-02", "playtime_forever": 5},
    ],
}


# route handlers

def _top_games(request: httpx.Request) -> httpx.Response:
    params = request.url.params
    page = int(params.get("page", 1))
    limit = int(params.get("limit", 10))
    start = (page - 1) * limit
    return httpx.Response(200, json={
        "top_games": SAMPLE_GAMES[start:start + limit],
        "total": len(SAMPLE_GAMES),
        "total_pages": max(1, -(-len(SAMPLE_GAMES) // limit)),
        "page": page,
        "limit": limit,
    })


def _streaks(request: httpx.Request) -> httpx.Response:
    appid = request.url.params.get("appid")
    if appid is None:
        return httpx.Response(200, json=SAMPLE_OVERALL_STREAK)
    if appid in SAMPLE_GAME_STREAKS:
        return httpx.Response(200, json=SAMPLE_GAME_STREAKS[appid])
    return httpx.Response(500, json={"detail": "streak computation failed"})


def _search(request: httpx.Request) -> httpx.Response:
    q = request.url.params.get("q", "").lower()
    return httpx.Response(200, json=[g for g in SAMPLE_SEARCH if q in g["name"].lower()])


def _compare(request: httpx.Request) -> httpx.Response:
    ids = request.url.params.get_list("appids")
    return httpx.Response(200, json={k: v for k, v in SAMPLE_COMPARE.items() if k in ids})


DEFAULT_ROUTES = {
    "/demo/analytics/summary/latest": SAMPLE_SUMMARY,
    "/demo/analytics/top_games": _top_games,
    "/demo/analytics/trends": SAMPLE_TRENDS,
    "/demo/analytics/streaks": _streaks,
    "/demo/analytics/activity/heatmap": SAMPLE_HEATMAP,
    "/demo/games/search": _search,
    "/demo/games/730": SAMPLE_GAME_DETAILS,
    "/demo/analytics/games/compare": _compare,
}


class FakeAnalyticsService:
    """in-memory analytics api served through httpx.MockTransport.

    routes map a path to a json payload or to a handler(request) -> Response.
    every request is recorded for assertions.
    """

    def __init__(self, routes=None):
        self.routes = {**DEFAULT_ROUTES, **(routes or {})}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)

    def client(self) -> AnalyticsClient:
        return AnalyticsClient(BASE_URL, transport=httpx.MockTransport(self.handler))


def _server_error(request: httpx.Request) -> httpx.Response:
    return httpx.Response(503, json={"detail": "service unavailable"})


@pytest.fixture
def service():
    """fresh fake analytics service for each test"""
    return FakeAnalyticsService()


@pytest.fixture
def down_service():
    """analytics service that answers 503 on every route"""
    return FakeAnalyticsService({path: _server_error for path in DEFAULT_ROUTES})


@pytest_asyncio.fixture
async def api(service):
    """analytics client talking to the fake service"""
    async with service.client() as api_client:
        yield api_client


@asynccontextmanager
async def app_client_for(service: FakeAnalyticsService):
    """httpx client for the app with its analytics api pointed at `service`"""
    async with service.client() as api_client:

        async def override_get_api_client():
            return api_client

        app.dependency_overrides[get_api_client] = override_get_api_client
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(service):
    """httpx async test client with the analytics api faked out"""
    async with app_client_for(service) as ac:
        yield ac


@pytest_asyncio.fixture
async def down_client(down_service):
    """test client whose analytics api is down"""
    async with app_client_for(down_service) as ac:
        yield ac
