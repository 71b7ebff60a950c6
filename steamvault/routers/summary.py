# summary router — latest daily summary card

import logging
from fastapi import APIRouter, Depends

from steamvault.dependencies import get_api_client
from steamvault.models.analytics import SummaryStats
from steamvault.models.dashboard import SummaryView
from steamvault.models.section import SectionState
from steamvault.services.api_client import AnalyticsClient
from steamvault.services.metrics import format_minutes, format_signed_minutes, round_half_up
from steamvault.services.view_state import load_section

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/summary", tags=["summary"])

SummaryState = SectionState[SummaryView]


def _to_view(summary: SummaryStats) -> SummaryView:
    most_played = None
    if summary.most_played_name:
        most_played = format_minutes(summary.most_played_minutes or 0)

    return SummaryView(
        summary=summary,
        totalPlaytimeLabel=format_minutes(summary.total_playtime_minutes),
        averagePlaytimeLabel=format_minutes(round_half_up(summary.average_playtime_per_game)),
        changeLabel=format_signed_minutes(summary.total_playtime_change),
        isChangePositive=summary.total_playtime_change >= 0,
        mostPlayedLabel=most_played,
    )


@router.get("", response_model=SummaryState)
async def get_summary(client: AnalyticsClient = Depends(get_api_client)):
    """latest daily summary, or a failure state when the api is unavailable"""
    return await load_section(client.get_latest_summary(), _to_view, SummaryState)
