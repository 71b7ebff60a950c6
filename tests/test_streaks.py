# tests for streaks router — overall streak plus per-game streaks fetched concurrently

import httpx
import pytest
from tests.conftest import FakeAnalyticsService, app_client_for


def _server_error(request):
    return httpx.Response(500, json={"detail": "boom"})


class TestStreaks:
    """streaks section"""

    async def test_get_streaks(self, client):
        resp = await client.get("/streaks")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["overall"]["current_streak"] == 4
        assert data["overall"]["longest_streak"] == 12

    async def test_failed_and_inactive_games_dropped(self, client):
        data = (await client.get("/streaks")).json()["data"]
        # 570 has no streak, 440's lookup fails
        assert [g["appid"] for g in data["games"]] == [730]
        game = data["games"][0]
        assert game["name"] == "Counter-Strike 2"
        assert game["icon"] == "cs2.jpg"
        assert game["currentStreak"] == 3
        assert game["longestStreak"] == 10

    async def test_fetches_top_lifetime_games(self, client, service):
        await client.get("/streaks")
        top = [r for r in service.requests if r.url.path == "/demo/analytics/top_games"]
        assert len(top) == 1
        assert top[0].url.params["period"] == "lifetime"
        assert top[0].url.params["limit"] == "5"

    async def test_one_streak_lookup_per_game(self, client, service):
        await client.get("/streaks")
        appids = [
            r.url.params.get("appid")
            for r in service.requests
            if r.url.path == "/demo/analytics/streaks"
        ]
        assert appids[0] is None
        assert sorted(appids[1:]) == ["440", "570", "730"]

    async def test_top_games_failure_keeps_overall(self):
        service = FakeAnalyticsService({"/demo/analytics/top_games": _server_error})
        async with app_client_for(service) as ac:
            body = (await ac.get("/streaks")).json()
        assert body["status"] == "success"
        assert body["data"]["overall"]["current_streak"] == 4
        assert body["data"]["games"] == []

    async def test_overall_failure(self, down_client):
        body = (await down_client.get("/streaks")).json()
        assert body["status"] == "failure"
        assert body["data"] is None
