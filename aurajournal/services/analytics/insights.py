from __future__ import annotations

import calendar
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from aurajournal.config import DEFAULT_ENCOURAGEMENT_INSIGHTS, DEFAULT_ONBOARDING_INSIGHTS
from aurajournal.services.analytics.mood import MoodPoint
from aurajournal.utils.numbers import round_half_up

# Monday .. Sunday, also the tie-break order
WEEKDAYS = list(calendar.day_name)


def weekday_averages(points: Iterable[MoodPoint]) -> Dict[str, float]:
    """Weekday name -> mean intensity, only for weekdays that have data."""
    buckets: Dict[int, List[int]] = defaultdict(list)
    for p in points:
        buckets[p.date.weekday()].append(p.intensity)

    return {
        WEEKDAYS[day]: sum(values) / len(values)
        for day, values in sorted(buckets.items())
    }


def most_challenging_day(points: Iterable[MoodPoint]) -> Optional[str]:
    """
    Weekday with the LOWEST mean intensity.
    Ties go to the earlier weekday (Monday first).
    """
    averages = weekday_averages(points)
    if not averages:
        return None

    # dict is already in Monday..Sunday order and min() keeps the first minimum
    return min(averages, key=averages.get)


def average_intensity(points: Sequence[MoodPoint]) -> Optional[float]:
    if not points:
        return None
    return sum(p.intensity for p in points) / len(points)


def synthesize_insights(
    mood_points: Sequence[MoodPoint],
    journal_entries: Sequence = (),
    *,
    onboarding: Optional[List[str]] = None,
    encouragement: Optional[List[str]] = None,
) -> List[str]:
    """
    Human-readable analytics lines for the dashboard.

    No data -> onboarding lines.
    Otherwise:
      [challenging day] + encouragement lines + [overall average]

    journal_entries is part of the call contract; the current lines
    only read mood points.
    """
    onboarding = list(DEFAULT_ONBOARDING_INSIGHTS if onboarding is None else onboarding)
    encouragement = list(DEFAULT_ENCOURAGEMENT_INSIGHTS if encouragement is None else encouragement)

    if not mood_points:
        return onboarding

    challenging = most_challenging_day(mood_points)
    overall = average_intensity(mood_points)

    return [
        f"Most challenging day: {challenging}",
        *encouragement,
        f"Average mood intensity: {round_half_up(overall):.1f}/5",
    ]
