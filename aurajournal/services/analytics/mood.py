"""
Mood aggregation.
Pure reads over mood points. No DB access.

Every function expects points NEWEST FIRST, the way the record store
returns them. Anything with .date / .mood / .intensity works.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence

from aurajournal.models.enums import Mood
from aurajournal.utils.numbers import round_half_up

DEFAULT_MOOD = Mood.neutral.value
WEEK_POINTS = 7


class MoodPoint(Protocol):
    date: date
    mood: Any
    intensity: int


def _label(mood: Any) -> str:
    return mood.value if isinstance(mood, Mood) else str(mood)


def _in_range(d: date, start: Optional[date], end: Optional[date]) -> bool:
    if start is not None and d < start:
        return False
    if end is not None and d > end:
        return False
    return True


def mood_distribution(points: Iterable[MoodPoint]) -> Dict[str, int]:
    """Mood label -> number of points, over the full history."""
    return dict(Counter(_label(p.mood) for p in points))


def mood_trend(
    points: Sequence[MoodPoint],
    *,
    limit: int = 30,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[Dict[str, Any]]:
    """
    Chart series, oldest -> newest.

    With a date range: every point inside it.
    Without one: the `limit` most recent points.
    """
    if start is not None or end is not None:
        selected = [p for p in points if _in_range(p.date, start, end)]
    else:
        selected = list(points[: max(limit, 0)])

    return [
        {"date": p.date.isoformat(), "intensity": p.intensity}
        for p in reversed(selected)
    ]


def weekly_average(points: Sequence[MoodPoint]) -> Optional[float]:
    """
    Mean intensity of the most recent min(7, N) points, one decimal
    (halves round up). None when there is no data.
    """
    recent = list(points[:WEEK_POINTS])
    if not recent:
        return None
    return round_half_up(sum(p.intensity for p in recent) / len(recent))


def most_frequent_mood(points: Iterable[MoodPoint]) -> str:
    """
    Highest count wins; ties go to the alphabetically first label.
    "neutral" when there is no data.
    """
    counts = mood_distribution(points)
    if not counts:
        return DEFAULT_MOOD

    return min(counts.items(), key=lambda kv: (-kv[1], kv[0]))[0]


def entries_in_last_n_days(points: Iterable[MoodPoint], n: int, reference_date: date) -> int:
    """Points dated within [reference_date - n days, reference_date]."""
    window_start = reference_date - timedelta(days=n)
    return sum(1 for p in points if window_start <= p.date <= reference_date)


def mood_calendar(points: Iterable[MoodPoint], year: int, month: int) -> Dict[str, Dict[str, Any]]:
    """
    One cell per day that has data: ISO date -> {"mood", "intensity"}.
    The newest point of a day wins.
    """
    cells: Dict[str, Dict[str, Any]] = {}

    for p in points:
        if p.date.year != year or p.date.month != month:
            continue

        key = p.date.isoformat()
        if key in cells:
            continue

        cells[key] = {"mood": _label(p.mood), "intensity": p.intensity}

    return dict(sorted(cells.items()))


def weekly_summary(points: Sequence[MoodPoint], reference_date: date) -> Dict[str, Any]:
    """The "This Week" card: count, average, most common mood."""
    if not points:
        return {
            "entries_this_week": 0,
            "average_intensity": None,
            "most_common_mood": None,
        }

    return {
        "entries_this_week": entries_in_last_n_days(points, 7, reference_date),
        "average_intensity": weekly_average(points),
        "most_common_mood": most_frequent_mood(points),
    }
