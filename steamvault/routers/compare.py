# compare router — side-by-side playtime for 2 to 5 games
# the api returns full history; the trailing date window is applied here

import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status

from steamvault.config import settings
from steamvault.dependencies import get_api_client
from steamvault.models.dashboard import ComparisonView
from steamvault.models.game import ComparisonData
from steamvault.models.section import SectionState
from steamvault.services.api_client import AnalyticsClient
from steamvault.services.metrics import align_comparison_series
from steamvault.services.view_state import ComparisonSelection, SelectionLimitError, load_section

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/compare", tags=["compare"])

ComparisonState = SectionState[ComparisonView]


@router.get("", response_model=ComparisonState)
async def compare_games(
    appids: list[int] = Query(..., description="repeat for each game"),
    days: int = Query(30, ge=1, le=365),
    client: AnalyticsClient = Depends(get_api_client),
):
    """aligned playtime series for the selected games over the last N dates"""
    try:
        selection = ComparisonSelection.from_appids(
            appids,
            max_games=settings.COMPARE_MAX_GAMES,
            min_games=settings.COMPARE_MIN_GAMES,
        )
    except SelectionLimitError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    if not selection.can_compare:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Select at least {selection.min_games} different games to compare",
        )

    selected = selection.appids

    def to_view(data: ComparisonData) -> ComparisonView:
        return ComparisonView(
            appids=selected,
            days=days,
            rows=align_comparison_series(data, selected, days),
        )

    return await load_section(client.compare_games(selected), to_view, ComparisonState)
