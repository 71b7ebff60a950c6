# trends router — this week vs last week

import logging
from fastapi import APIRouter, Depends

from steamvault.dependencies import get_api_client
from steamvault.models.analytics import TrendsResponse
from steamvault.models.dashboard import TrendsView
from steamvault.models.section import SectionState
from steamvault.services.api_client import AnalyticsClient
from steamvault.services.metrics import parse_change
from steamvault.services.view_state import load_section

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/trends", tags=["trends"])

TrendsState = SectionState[TrendsView]


def _to_view(resp: TrendsResponse) -> TrendsView:
    trends = resp.trends
    change = parse_change(trends.change_vs_last_week)
    if change is None:
        logger.warning(f"Unparsable trend change: {trends.change_vs_last_week!r}")

    return TrendsView(
        thisWeekMinutes=trends.this_week.total_playtime,
        lastWeekMinutes=trends.last_week.total_playtime,
        change=change,
        changeLabel=trends.change_vs_last_week,
        isPositive=change is not None and change >= 0,
    )


@router.get("", response_model=TrendsState)
async def get_trends(client: AnalyticsClient = Depends(get_api_client)):
    return await load_section(client.get_trends(), _to_view, TrendsState)
