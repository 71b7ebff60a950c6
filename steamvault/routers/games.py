# games router — game details modal
# totals, last-30-days playtime from cumulative history, history newest first

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query

from steamvault.config import settings
from steamvault.dependencies import get_api_client
from steamvault.models.dashboard import GameDetailsView
from steamvault.models.game import GameDetails
from steamvault.models.section import SectionState
from steamvault.services.api_client import AnalyticsClient
from steamvault.services.metrics import last_played, recent_window_delta, total_playtime
from steamvault.services.view_state import load_section

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/games", tags=["games"])

GameDetailsState = SectionState[GameDetailsView]


def _to_view(game: GameDetails) -> GameDetailsView:
    window = settings.RECENT_WINDOW_DAYS
    return GameDetailsView(
        game=game,
        totalPlaytime=total_playtime(game),
        recentPlaytime=recent_window_delta(game.history, window),
        recentWindowDays=window,
        lastPlayed=last_played(game),
        history=list(reversed(game.history)),
    )


@router.get("/{appid}", response_model=GameDetailsState)
async def get_game_details(
    appid: int = Path(..., ge=1),
    days: Optional[int] = Query(None, ge=1, le=365),
    client: AnalyticsClient = Depends(get_api_client),
):
    """game details with recent playtime.

    defaults to a wide history window so the recent delta is anchored to the
    latest recorded day even when that day is well in the past.
    """
    days = days or settings.GAME_DETAILS_DAYS
    return await load_section(client.get_game_details(appid, days), _to_view, GameDetailsState)
