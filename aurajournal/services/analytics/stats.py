from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, Sequence

from aurajournal.services.analytics.mood import most_frequent_mood, mood_distribution

POSITIVE_SENTIMENT_THRESHOLD = 0.1


def positive_percentage(entries: Sequence) -> int:
    """
    Share of CLASSIFIED entries with sentiment > 0.1, as a whole percent.
    Entries still waiting on the sentiment service don't count either way.
    """
    classified = [e for e in entries if e.sentiment_score is not None]
    if not classified:
        return 0

    positive = sum(1 for e in classified if e.sentiment_score > POSITIVE_SENTIMENT_THRESHOLD)
    # half-up, not round()'s banker's rounding
    return int(positive * 100 / len(classified) + 0.5)


def entries_created_since(entries: Sequence, n_days: int, today: date) -> int:
    window_start = today - timedelta(days=n_days)
    return sum(1 for e in entries if window_start <= e.created_at.date() <= today)


def compute_user_stats(
    *,
    entries: Sequence,
    mood_points: Sequence,
    today: date,
) -> Dict[str, Any]:
    """
    Dashboard stats block.

    {
      "most_frequent_mood": str,
      "positive_percentage": int,
      "entries_this_week": int,
      "total_entries": int,
      "mood_distribution": {"happy": int, ...}
    }
    """
    return {
        "most_frequent_mood": most_frequent_mood(mood_points),
        "positive_percentage": positive_percentage(entries),
        "entries_this_week": entries_created_since(entries, 7, today),
        "total_entries": len(entries),
        "mood_distribution": mood_distribution(mood_points),
    }
