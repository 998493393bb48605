from enum import Enum


class Mood(str, Enum):
    happy = "happy"
    sad = "sad"
    anxious = "anxious"
    excited = "excited"
    neutral = "neutral"
    angry = "angry"
    calm = "calm"


class Badge(str, Enum):
    # positivity, resilience, calm_mind and introspection_expert have no unlock rules yet.
    first_entry = "first_entry"
    streak_keeper = "streak_keeper"
    positivity = "positivity"
    resilience = "resilience"
    calm_mind = "calm_mind"
    week_warrior = "week_warrior"
    month_master = "month_master"
    introspection_expert = "introspection_expert"


MOOD_VALUES = tuple(m.value for m in Mood)
