from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from aurajournal.models.enums import Mood
from aurajournal.schemas.progress import UserProgressOut
from aurajournal.schemas.sentiment import AiInsights, SentimentAnalysis


# -------------------------
# JOURNAL ENTRIES
# -------------------------
class JournalEntryCreate(BaseModel):
    content: str = Field(min_length=1)
    mood: Mood

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content must not be blank")
        return v


class JournalEntryOut(BaseModel):
    id: int
    content: str
    mood: Mood
    sentiment_score: Optional[float] = None
    confidence: Optional[float] = None
    ai_insights: Optional[AiInsights] = None
    created_at: datetime

    class Config:
        from_attributes = True


class JournalEntryCreated(BaseModel):
    entry: JournalEntryOut
    progress: UserProgressOut
    sentiment: Optional[SentimentAnalysis] = None


# Body for attaching a classification produced elsewhere
class ClassificationIn(SentimentAnalysis):
    pass
