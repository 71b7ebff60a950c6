# heatmap router — daily activity grouped into months and intensity buckets

import logging
from fastapi import APIRouter, Depends, Query

from steamvault.dependencies import get_api_client
from steamvault.models.analytics import HeatmapDay
from steamvault.models.dashboard import HeatmapView
from steamvault.models.section import SectionState
from steamvault.services.api_client import AnalyticsClient
from steamvault.services.metrics import bucket_heatmap
from steamvault.services.view_state import load_section

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/heatmap", tags=["heatmap"])

HeatmapState = SectionState[HeatmapView]


@router.get("", response_model=HeatmapState)
async def get_heatmap(
    days: int = Query(60, ge=1, le=365),
    client: AnalyticsClient = Depends(get_api_client),
):
    """activity heatmap for the last N days"""

    def to_view(heatmap: list[HeatmapDay]) -> HeatmapView:
        return HeatmapView(
            days=days,
            maxPlaytime=max([d.total_playtime for d in heatmap] + [1]),
            months=bucket_heatmap(heatmap),
        )

    return await load_section(client.get_heatmap(days), to_view, HeatmapState)
