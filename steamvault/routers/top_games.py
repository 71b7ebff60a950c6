# top games router — paginated ranking by period

import logging
from typing import Literal
from fastapi import APIRouter, Depends, Query

from steamvault.dependencies import get_api_client
from steamvault.models.dashboard import RankedGame, TopGamesView
from steamvault.models.game import TopGamesResponse
from steamvault.models.section import SectionState
from steamvault.services.api_client import AnalyticsClient
from steamvault.services.metrics import (
    format_minutes,
    game_minutes,
    has_next_page,
    has_previous_page,
    rank_offset,
)
from steamvault.services.view_state import load_section

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/top-games", tags=["top-games"])

TopGamesState = SectionState[TopGamesView]


def _to_view(resp: TopGamesResponse, period: str, page: int, limit: int) -> TopGamesView:
    # ranks follow the requested page, the server echoes it back anyway
    start = rank_offset(page, limit)
    games = []
    for i, game in enumerate(resp.top_games):
        minutes = game_minutes(game)
        games.append(RankedGame(
            rank=start + i + 1,
            game=game,
            playtimeMinutes=minutes,
            playtimeLabel=format_minutes(minutes),
        ))

    return TopGamesView(
        period=period,
        page=page,
        limit=limit,
        total=resp.total,
        totalPages=resp.total_pages,
        hasPrevious=has_previous_page(page),
        hasNext=has_next_page(page, resp.total_pages),
        games=games,
    )


@router.get("", response_model=TopGamesState)
async def get_top_games(
    period: Literal["week", "month", "lifetime"] = "week",
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=50),
    client: AnalyticsClient = Depends(get_api_client),
):
    """one page of the most played games for a period"""
    return await load_section(
        client.get_top_games(period, page, limit),
        lambda resp: _to_view(resp, period, page, limit),
        TopGamesState,
    )
