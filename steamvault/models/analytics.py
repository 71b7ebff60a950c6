# analytics models — summary, trends, streaks, heatmap
# mirrors frontend types/index.ts SummaryStats, TrendsResponse, StreakStats, HeatmapDay
# these are the analytics api wire shapes, parsed as-is (snake_case)

import datetime
from typing import Optional
from pydantic import BaseModel


class SummaryStats(BaseModel):
    """one daily summary record"""
    date: datetime.date
    total_playtime_minutes: int
    total_games_tracked: int
    new_games_count: int
    average_playtime_per_game: float
    total_playtime_change: float
    most_played_name: Optional[str] = None
    most_played_minutes: Optional[int] = None


class TrendStats(BaseModel):
    total_playtime: int


class Trends(BaseModel):
    this_week: TrendStats
    last_week: TrendStats
    change_vs_last_week: str  # "123" or "-123"


class TrendsResponse(BaseModel):
    trends: Trends


class StreakStats(BaseModel):
    """consecutive-day streaks, global or for a single appid"""
    current_streak: int
    longest_streak: int
    name: Optional[str] = None


class HeatmapDay(BaseModel):
    """one calendar day of activity — missing days mean zero"""
    date: datetime.date
    total_playtime: int
    games_played: int = 0
