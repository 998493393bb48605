from datetime import date, datetime

from aurajournal.models.enums import Mood
from aurajournal.services.analytics.stats import compute_user_stats, positive_percentage


class FakeEntry:
    def __init__(self, sentiment_score=None, created_at=None):
        self.sentiment_score = sentiment_score
        self.created_at = created_at or datetime(2024, 3, 15, 12, 0)


class FakePoint:
    def __init__(self, mood, d="2024-03-15"):
        self.mood = Mood(mood)
        self.date = date.fromisoformat(d)
        self.intensity = 3


def test_positive_percentage_counts_only_classified_entries():
    entries = [
        FakeEntry(0.8),
        FakeEntry(0.1),  # not above the threshold
        FakeEntry(-0.5),
        FakeEntry(None),  # still waiting on the sentiment service
    ]

    # 1 positive out of 3 classified -> 33
    assert positive_percentage(entries) == 33


def test_positive_percentage_rounds_half_up():
    entries = [FakeEntry(0.5), FakeEntry(-0.5)] * 4
    assert positive_percentage(entries) == 50

    # 1 of 8 = 12.5 -> 13
    eighth = [FakeEntry(0.5)] + [FakeEntry(-0.2)] * 7
    assert positive_percentage(eighth) == 13


def test_positive_percentage_without_classified_entries():
    assert positive_percentage([]) == 0
    assert positive_percentage([FakeEntry(None), FakeEntry(None)]) == 0


def test_compute_user_stats():
    entries = [
        FakeEntry(0.6, datetime(2024, 3, 15, 8)),
        FakeEntry(0.2, datetime(2024, 3, 10, 8)),
        FakeEntry(-0.4, datetime(2024, 3, 1, 8)),  # older than a week
    ]
    points = [FakePoint("happy"), FakePoint("happy"), FakePoint("sad")]

    stats = compute_user_stats(entries=entries, mood_points=points, today=date(2024, 3, 15))

    assert stats == {
        "most_frequent_mood": "happy",
        "positive_percentage": 67,
        "entries_this_week": 2,
        "total_entries": 3,
        "mood_distribution": {"happy": 2, "sad": 1},
    }


def test_compute_user_stats_empty():
    stats = compute_user_stats(entries=[], mood_points=[], today=date(2024, 3, 15))

    assert stats["most_frequent_mood"] == "neutral"
    assert stats["positive_percentage"] == 0
    assert stats["entries_this_week"] == 0
    assert stats["total_entries"] == 0
    assert stats["mood_distribution"] == {}
