from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from aurajournal.models.enums import Mood
from aurajournal.models.mood import INTENSITY_MAX, INTENSITY_MIN


# -------------------------
# MOOD DATA
# -------------------------
class MoodDataCreate(BaseModel):
    date: date
    mood: Mood
    intensity: int = Field(ge=INTENSITY_MIN, le=INTENSITY_MAX)
    notes: Optional[str] = None
    entry_id: Optional[int] = None


class MoodDataOut(BaseModel):
    id: int
    date: date
    mood: Mood
    intensity: int
    notes: Optional[str] = None
    entry_id: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True


# -------------------------
# ANALYTICS
# -------------------------
class TrendPoint(BaseModel):
    date: date
    intensity: int


class CalendarCell(BaseModel):
    mood: Mood
    intensity: int


class MoodCalendarOut(BaseModel):
    year: int
    month: int
    days: Dict[str, CalendarCell]


class WeeklySummaryOut(BaseModel):
    entries_this_week: int
    average_intensity: Optional[float] = None
    most_common_mood: Optional[str] = None


class InsightsOut(BaseModel):
    insights: List[str]


class MusicRecommendationOut(BaseModel):
    id: int
    mood: Mood
    title: str
    artist: str
    genre: str
    spotify_url: Optional[str] = None
    youtube_url: Optional[str] = None

    class Config:
        from_attributes = True
