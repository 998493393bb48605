from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from aurajournal.models.enums import Badge


class UserProgressOut(BaseModel):
    id: int
    streak: int
    total_entries: int
    badges: List[Badge]
    aura_level: int
    last_entry_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class UserStats(BaseModel):
    most_frequent_mood: str
    positive_percentage: int
    entries_this_week: int
    total_entries: int
    mood_distribution: Dict[str, int]


class UserStatsOut(BaseModel):
    progress: UserProgressOut
    stats: UserStats
