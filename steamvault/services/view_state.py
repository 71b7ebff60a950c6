# view state — loading glue between the api client and the dashboard sections
# turns façade calls into SectionState results, runs per-item fetches jointly,
# debounces the search box, and enforces comparison selection limits

import asyncio
import logging
from typing import Any, Awaitable, Callable, Iterable, Optional, TypeVar

from steamvault.models.section import SectionState
from steamvault.services.errors import AnalyticsAPIError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def load_section(
    fetch: Awaitable[Any],
    transform: Optional[Callable[[Any], T]] = None,
    state_type: type[SectionState] = SectionState,
) -> SectionState:
    """await a fetch and wrap the outcome. api failures degrade to a failure state.

    pass the parametrized state_type (e.g. SectionState[SummaryView]) when the
    result is returned from a route with that response_model.
    """
    try:
        data = await fetch
    except AnalyticsAPIError as e:
        logger.warning(f"Section degraded to no-data: {e.message} ({e.url})")
        return state_type.failure(e.message)

    if transform is not None:
        data = transform(data)
    return state_type.success(data)


async def gather_in_order(fetches: Iterable[Awaitable[T]]) -> list[Optional[T]]:
    """run fetches concurrently and return results in request order.

    a fetch that fails with an api error comes back as None instead of failing
    its siblings. anything else is a bug and propagates.
    """
    results = await asyncio.gather(*fetches, return_exceptions=True)

    ordered: list[Optional[T]] = []
    for i, result in enumerate(results):
        if isinstance(result, AnalyticsAPIError):
            logger.warning(f"Dropping item {i}: {result.message} ({result.url})")
            ordered.append(None)
        elif isinstance(result, BaseException):
            raise result
        else:
            ordered.append(result)
    return ordered


class SearchDebouncer:
    """debounced search session.

    each submitted query supersedes the previous one. short queries clear the
    results immediately without a network call; others wait `delay` seconds,
    emit a pending state, call `search` once, and emit the result unless a
    newer query arrived in the meantime.
    """

    def __init__(
        self,
        search: Callable[[str], Awaitable[list]],
        on_state: Callable[[SectionState], Awaitable[None]],
        delay: float = 0.3,
        min_length: int = 2,
    ):
        self._search = search
        self._on_state = on_state
        self.delay = delay
        self.min_length = min_length
        self._generation = 0
        self._task: Optional[asyncio.Task] = None

    async def submit(self, query: str):
        self._cancel_pending()
        self._generation += 1

        query = query.strip()
        if len(query) < self.min_length:
            await self._on_state(SectionState.success([]))
            return

        self._task = asyncio.create_task(self._run(query, self._generation))

    async def _run(self, query: str, generation: int):
        await asyncio.sleep(self.delay)
        if generation != self._generation:
            return

        await self._on_state(SectionState.pending())
        state = await load_section(self._search(query))

        # a newer query may have been submitted while the request was in flight
        if generation == self._generation:
            await self._on_state(state)

    def _cancel_pending(self):
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def drain(self):
        """wait for the in-flight query, if any, to finish"""
        await self._settle(self._task)

    async def close(self):
        task = self._task
        self._cancel_pending()
        await self._settle(task)

    async def _settle(self, task: Optional[asyncio.Task]):
        # a failed emit (e.g. the socket already closed) ends that query only
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.warning(f"Search query task failed: {e!r}")


class SelectionLimitError(ValueError):
    """raised when adding a game to a full comparison selection"""


class ComparisonSelection:
    """the set of games picked for comparison — unique, ordered, capped"""

    def __init__(self, max_games: int = 5, min_games: int = 2):
        self.max_games = max_games
        self.min_games = min_games
        self._appids: list[int] = []

    @classmethod
    def from_appids(cls, appids: Iterable[int], max_games: int = 5, min_games: int = 2):
        selection = cls(max_games=max_games, min_games=min_games)
        for appid in appids:
            selection.add(appid)
        return selection

    def add(self, appid: int) -> bool:
        """add a game. returns False for duplicates, raises when the selection is full."""
        if appid in self._appids:
            return False
        if len(self._appids) >= self.max_games:
            raise SelectionLimitError(f"Max {self.max_games} games")
        self._appids.append(appid)
        return True

    def remove(self, appid: int):
        self._appids = [a for a in self._appids if a != appid]

    @property
    def appids(self) -> list[int]:
        return list(self._appids)

    @property
    def can_compare(self) -> bool:
        return len(self._appids) >= self.min_games

    def __len__(self):
        return len(self._appids)
