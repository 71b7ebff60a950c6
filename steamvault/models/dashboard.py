# dashboard view models — derived data handed to the frontend sections
# mirrors frontend section props: summary, top games, trends, streaks, heatmap, details, compare

import datetime
from typing import Optional
from pydantic import BaseModel, Field

from steamvault.models.analytics import StreakStats, SummaryStats
from steamvault.models.game import Game, GameDetails, GameHistoryItem


class SummaryView(BaseModel):
    """latest daily summary with display helpers"""
    summary: SummaryStats
    total_playtime_label: str = Field(..., alias="totalPlaytimeLabel")
    average_playtime_label: str = Field(..., alias="averagePlaytimeLabel")
    change_label: str = Field(..., alias="changeLabel")
    is_change_positive: bool = Field(..., alias="isChangePositive")
    most_played_label: Optional[str] = Field(None, alias="mostPlayedLabel")

    model_config = {"populate_by_name": True}


class RankedGame(BaseModel):
    rank: int
    game: Game
    playtime_minutes: int = Field(0, alias="playtimeMinutes")
    playtime_label: str = Field("0m", alias="playtimeLabel")

    model_config = {"populate_by_name": True}


class TopGamesView(BaseModel):
    """one page of the top games ranking with pagination flags"""
    period: str
    page: int
    limit: int
    total: int
    total_pages: int = Field(..., alias="totalPages")
    has_previous: bool = Field(..., alias="hasPrevious")
    has_next: bool = Field(..., alias="hasNext")
    games: list[RankedGame] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class TrendsView(BaseModel):
    """this week vs last week"""
    this_week_minutes: int = Field(..., alias="thisWeekMinutes")
    last_week_minutes: int = Field(..., alias="lastWeekMinutes")
    change: Optional[float] = None
    change_label: str = Field(..., alias="changeLabel")
    is_positive: bool = Field(..., alias="isPositive")

    model_config = {"populate_by_name": True}


class GameStreak(BaseModel):
    appid: int
    name: str
    icon: Optional[str] = None
    current_streak: int = Field(0, alias="currentStreak")
    longest_streak: int = Field(0, alias="longestStreak")

    model_config = {"populate_by_name": True}


class StreaksView(BaseModel):
    overall: StreakStats
    games: list[GameStreak] = Field(default_factory=list)


class HeatmapCell(BaseModel):
    date: datetime.date
    total_playtime: int = Field(0, alias="totalPlaytime")
    games_played: int = Field(0, alias="gamesPlayed")
    intensity: float = 0.0
    bucket: str = "none"

    model_config = {"populate_by_name": True}


class HeatmapMonth(BaseModel):
    """one calendar month of heatmap cells, keyed YYYY-MM"""
    month: str
    label: str
    days: list[HeatmapCell] = Field(default_factory=list)


class HeatmapView(BaseModel):
    days: int
    max_playtime: int = Field(1, alias="maxPlaytime")
    months: list[HeatmapMonth] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class GameDetailsView(BaseModel):
    """game details modal — totals, recent window, history newest first"""
    game: GameDetails
    total_playtime: int = Field(0, alias="totalPlaytime")
    recent_playtime: int = Field(0, alias="recentPlaytime")
    recent_window_days: int = Field(30, alias="recentWindowDays")
    last_played: Optional[datetime.date] = Field(None, alias="lastPlayed")
    history: list[GameHistoryItem] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class ComparisonRow(BaseModel):
    """one chart row: a date and a value per requested appid"""
    date: datetime.date
    minutes: dict[str, int] = Field(default_factory=dict)
    hours: dict[str, int] = Field(default_factory=dict)


class ComparisonView(BaseModel):
    appids: list[int]
    days: int
    rows: list[ComparisonRow] = Field(default_factory=list)
