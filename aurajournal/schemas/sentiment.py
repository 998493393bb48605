from typing import List

from pydantic import BaseModel, Field

from aurajournal.models.enums import Mood


class AiInsights(BaseModel):
    emotions: List[str] = Field(default_factory=list)
    themes: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class SentimentAnalysis(BaseModel):
    mood: Mood = Mood.neutral
    sentiment_score: float = Field(default=0.0, ge=-1, le=1)
    confidence: float = Field(default=0.5, ge=0, le=1)
    insights: AiInsights = Field(default_factory=AiInsights)
