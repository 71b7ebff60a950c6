# streaks router — overall play streak plus per-game streaks for the top lifetime games
# per-game lookups run concurrently; a failed lookup drops that game only

import logging
from fastapi import APIRouter, Depends

from steamvault.config import settings
from steamvault.dependencies import get_api_client
from steamvault.models.dashboard import StreaksView
from steamvault.models.section import SectionState
from steamvault.services.api_client import AnalyticsClient
from steamvault.services.errors import AnalyticsAPIError
from steamvault.services.metrics import active_streaks
from steamvault.services.view_state import gather_in_order

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/streaks", tags=["streaks"])

StreaksState = SectionState[StreaksView]


@router.get("", response_model=StreaksState)
async def get_streaks(client: AnalyticsClient = Depends(get_api_client)):
    """overall streaks, then streaks for each of the top lifetime games"""
    try:
        overall = await client.get_streaks()
    except AnalyticsAPIError as e:
        logger.warning(f"Failed to load streaks data: {e.message}")
        return StreaksState.failure(e.message)

    try:
        top = await client.get_top_games("lifetime", 1, settings.STREAK_TOP_GAMES)
    except AnalyticsAPIError as e:
        # the overall card still renders without the per-game list
        logger.warning(f"Failed to load top games for streaks: {e.message}")
        return StreaksState.success(StreaksView(overall=overall))

    games = top.top_games
    streaks = await gather_in_order(client.get_streaks(game.appid) for game in games)

    return StreaksState.success(StreaksView(
        overall=overall,
        games=active_streaks(games, streaks),
    ))
