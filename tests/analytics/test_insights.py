from datetime import date

from aurajournal.config import DEFAULT_ENCOURAGEMENT_INSIGHTS
from aurajournal.models.enums import Mood
from aurajournal.services.analytics.insights import (
    most_challenging_day,
    synthesize_insights,
    weekday_averages,
)


class FakePoint:
    def __init__(self, iso, intensity):
        self.date = date.fromisoformat(iso)
        self.intensity = intensity
        self.mood = Mood.neutral


# 2024-03-11 is a Monday
MON, TUE, WED, FRI = "2024-03-11", "2024-03-12", "2024-03-13", "2024-03-15"


def test_no_data_returns_onboarding_lines():
    insights = synthesize_insights([], [])

    assert insights == [
        "Start journaling regularly to unlock personalized insights!",
        "Your emotional journey begins with your first entry.",
        "AI insights will become more accurate as you write more.",
    ]


def test_insights_with_data():
    points = [
        FakePoint(MON, 4),
        FakePoint(TUE, 2),
        FakePoint(WED, 5),
        FakePoint("2024-03-19", 4),  # another Tuesday -> Tuesday avg 3.0
    ]

    insights = synthesize_insights(points, [])

    assert insights[0] == "Most challenging day: Tuesday"
    assert insights[1:3] == DEFAULT_ENCOURAGEMENT_INSIGHTS
    assert insights[-1] == "Average mood intensity: 3.8/5"
    assert len(insights) == 4


def test_weekday_averages_groups_by_weekday():
    points = [FakePoint(MON, 2), FakePoint("2024-03-18", 4), FakePoint(FRI, 5)]

    assert weekday_averages(points) == {"Monday": 3.0, "Friday": 5.0}


def test_challenging_day_tie_goes_to_earlier_weekday():
    points = [FakePoint(FRI, 2), FakePoint(WED, 2), FakePoint(MON, 5)]
    assert most_challenging_day(points) == "Wednesday"


def test_challenging_day_none_without_data():
    assert most_challenging_day([]) is None


def test_encouragement_lines_are_configurable():
    points = [FakePoint(MON, 3)]

    insights = synthesize_insights(points, [], encouragement=["Keep going"])
    assert insights == [
        "Most challenging day: Monday",
        "Keep going",
        "Average mood intensity: 3.0/5",
    ]

    bare = synthesize_insights(points, [], encouragement=[])
    assert len(bare) == 2


def test_onboarding_lines_are_configurable():
    assert synthesize_insights([], [], onboarding=["Write something!"]) == ["Write something!"]


def test_average_line_rounds_exact_halves_up():
    points = [FakePoint(MON, 2), FakePoint(TUE, 2), FakePoint(WED, 2), FakePoint(FRI, 3)]

    assert synthesize_insights(points, [])[-1] == "Average mood intensity: 2.3/5"
