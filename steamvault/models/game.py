# game models — games, top games page, details, search, comparison
# mirrors frontend types/index.ts Game, TopGamesResponse, GameDetails, ComparisonData

import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Game(BaseModel):
    appid: int
    name: str
    img_icon_url: Optional[str] = None
    playtime_forever: Optional[int] = None  # minutes, present on some endpoints
    total_playtime: Optional[int] = None  # minutes, present on others


class TopGamesResponse(BaseModel):
    """one server-computed page of the top games ranking"""
    top_games: list[Game] = Field(default_factory=list)
    total: int = 0
    total_pages: int = 1
    page: int = 1
    limit: int = 10


class GameHistoryItem(BaseModel):
    """cumulative lifetime minutes recorded on a date"""
    date: datetime.date
    playtime_forever: int


class GameDetails(Game):
    history: list[GameHistoryItem] = Field(default_factory=list)


class SearchResult(BaseModel):
    appid: int
    name: str
    img_icon_url: Optional[str] = None


class ComparisonPoint(BaseModel):
    date: datetime.date
    playtime_forever: int


# appid (as string) -> ascending series; requested ids may be missing
ComparisonData = dict[str, list[ComparisonPoint]]
