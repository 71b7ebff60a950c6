# derived metrics — pure functions over already-fetched analytics data
# recent-window delta, heatmap bucketing, comparison-series alignment,
# plus the small display helpers the dashboard sections share.
# no i/o and no hidden state: same input, same output.

import calendar
import math
from datetime import timedelta
from typing import Iterable, Optional, Sequence

from steamvault.models.analytics import HeatmapDay, StreakStats
from steamvault.models.dashboard import ComparisonRow, GameStreak, HeatmapCell, HeatmapMonth
from steamvault.models.game import ComparisonData, Game, GameDetails, GameHistoryItem

# (upper bound, bucket) — intensity below the bound falls in the bucket
HEATMAP_BUCKETS = (
    (0.25, "low"),
    (0.5, "mid-low"),
    (0.75, "mid-high"),
)


# recent window


def recent_window_delta(history: Sequence[GameHistoryItem], window_days: int = 30) -> int:
    """minutes played in the last `window_days` days, ending at the latest recorded date.

    the window is anchored to the newest history entry, not to today. the baseline
    is the first entry on or after the window start. a history that begins inside
    the window uses its first entry as the baseline, so short histories are never
    extrapolated. non-monotonic source data is clamped at zero.
    """
    if not history:
        return 0

    latest = history[-1]
    target = latest.date - timedelta(days=window_days)

    baseline = next((h for h in history if h.date >= target), None)
    if baseline is None:
        return max(latest.playtime_forever, 0)

    return max(latest.playtime_forever - baseline.playtime_forever, 0)


def total_playtime(game: GameDetails) -> int:
    """lifetime minutes: the game's own counter, else the last history value"""
    if game.playtime_forever:
        return game.playtime_forever
    if game.history:
        return game.history[-1].playtime_forever
    return 0


def last_played(game: GameDetails):
    if not game.history:
        return None
    return game.history[-1].date


# heatmap


def heatmap_bucket(minutes: int, max_playtime: int) -> tuple[float, str]:
    """intensity relative to the busiest day and its discrete bucket"""
    if minutes <= 0:
        return 0.0, "none"
    intensity = minutes / max(max_playtime, 1)
    for bound, bucket in HEATMAP_BUCKETS:
        if intensity < bound:
            return intensity, bucket
    return intensity, "high"


def month_label(month_key: str) -> str:
    """'2025-01' -> 'January 2025'"""
    year, month = month_key.split("-")
    return f"{calendar.month_name[int(month)]} {year}"


def bucket_heatmap(days: Sequence[HeatmapDay]) -> list[HeatmapMonth]:
    """group days by YYYY-MM and bucket each day against the max across all input.

    months come out in chronological (lexicographic YYYY-MM) order,
    days keep their input order within a month.
    """
    max_playtime = max([d.total_playtime for d in days] + [1])

    by_month: dict[str, list[HeatmapCell]] = {}
    for day in days:
        key = day.date.strftime("%Y-%m")
        intensity, bucket = heatmap_bucket(day.total_playtime, max_playtime)
        by_month.setdefault(key, []).append(HeatmapCell(
            date=day.date,
            total_playtime=day.total_playtime,
            games_played=day.games_played,
            intensity=round(intensity, 4),
            bucket=bucket,
        ))

    return [
        HeatmapMonth(month=key, label=month_label(key), days=by_month[key])
        for key in sorted(by_month)
    ]


# comparison


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def align_comparison_series(
    data: ComparisonData, appids: Iterable[int], days: int
) -> list[ComparisonRow]:
    """align per-game series onto a shared date axis for charting.

    takes the trailing `days` dates (by count) from the union of all dates,
    then emits one row per date with a value per requested appid. an appid
    with no entry on a date gets 0: never interpolated, never carried forward.
    """
    if days <= 0:
        return []

    all_dates = {point.date for series in data.values() for point in series}
    recent_dates = sorted(all_dates)[-days:]

    # first entry wins if a series repeats a date
    lookup: dict[str, dict] = {}
    for key, series in data.items():
        by_date = lookup.setdefault(key, {})
        for point in series:
            by_date.setdefault(point.date, point.playtime_forever)

    columns = [str(appid) for appid in appids]
    rows = []
    for day in recent_dates:
        minutes = {col: lookup.get(col, {}).get(day, 0) for col in columns}
        rows.append(ComparisonRow(
            date=day,
            minutes=minutes,
            hours={col: round_half_up(value / 60) for col, value in minutes.items()},
        ))
    return rows


# streaks


def active_streaks(games: Sequence[Game], streaks: Sequence[Optional[StreakStats]]) -> list[GameStreak]:
    """pair games with their streaks, dropping failed lookups and games with no streak at all"""
    result = []
    for game, streak in zip(games, streaks):
        if streak is None:
            continue
        if streak.current_streak > 0 or streak.longest_streak > 0:
            result.append(GameStreak(
                appid=game.appid,
                name=game.name,
                icon=game.img_icon_url,
                current_streak=streak.current_streak,
                longest_streak=streak.longest_streak,
            ))
    return result


# display helpers


def parse_change(change: str) -> Optional[float]:
    """parse a signed numeric string like '123', '-45.5' or '+12%'"""
    if change is None:
        return None
    text = str(change).strip().rstrip("%").strip()
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def format_minutes(minutes: Optional[float]) -> str:
    """minutes -> '45m', '2h', '2h 5m'"""
    if not minutes or minutes < 0:
        return "0m"
    total = int(round(minutes))
    hours, mins = divmod(total, 60)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def format_signed_minutes(minutes: float) -> str:
    """signed change label: '+45m', '-1h 5m', '+0m' for no change"""
    minutes = minutes or 0
    sign = "+" if minutes >= 0 else "-"
    return f"{sign}{format_minutes(abs(minutes))}"


def game_minutes(game: Game) -> int:
    """top games carry either total_playtime (period) or playtime_forever (lifetime)"""
    return game.total_playtime or game.playtime_forever or 0


def rank_offset(page: int, limit: int) -> int:
    return (max(page, 1) - 1) * limit


def has_previous_page(page: int) -> bool:
    return page > 1


def has_next_page(page: int, total_pages: int) -> bool:
    return page < total_pages
