# search router — game search, one-shot and debounced websocket session
# websocket clients send the raw search box text on every keystroke;
# the server answers with section states once the input settles

import logging
from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect

from steamvault.config import settings
from steamvault.dependencies import get_api_client
from steamvault.models.game import SearchResult
from steamvault.models.section import SectionState
from steamvault.services.api_client import AnalyticsClient
from steamvault.services.view_state import SearchDebouncer, load_section

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/search", tags=["search"])

SearchState = SectionState[list[SearchResult]]


@router.get("", response_model=SearchState)
async def search_games(
    q: str = Query("", max_length=200),
    client: AnalyticsClient = Depends(get_api_client),
):
    """search games by name. queries under two characters return no results."""
    return await load_section(client.search_games(q), state_type=SearchState)


@router.websocket("/ws")
async def search_socket(
    websocket: WebSocket,
    client: AnalyticsClient = Depends(get_api_client),
):
    """debounced search: every message replaces the pending query"""
    await websocket.accept()

    async def send_state(state: SectionState):
        await websocket.send_json(state.model_dump(mode="json"))

    debouncer = SearchDebouncer(
        search=client.search_games,
        on_state=send_state,
        delay=settings.SEARCH_DEBOUNCE_MS / 1000,
        min_length=settings.SEARCH_MIN_LENGTH,
    )

    try:
        while True:
            query = await websocket.receive_text()
            await debouncer.submit(query)
    except WebSocketDisconnect:
        logger.info("Search socket disconnected")
    finally:
        await debouncer.close()
