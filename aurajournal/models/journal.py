# aurajournal/models/journal.py

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Enum,
    Float,
    Integer,
    Text,
)

from aurajournal.db.database import Base
from aurajournal.models.enums import Mood
from aurajournal.utils.timeutils import utcnow


# -------------------------
# JOURNAL ENTRY
# -------------------------
class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True)
    content = Column(Text, nullable=False)

    mood = Column(
        Enum(Mood, name="mood_enum", native_enum=False, length=20),
        nullable=False,
    )

    # Filled in once the sentiment service answers
    sentiment_score = Column(Float, nullable=True)  # -1 .. 1
    confidence = Column(Float, nullable=True)  # 0 .. 1
    ai_insights = Column(JSON, nullable=True)  # {"emotions": [], "themes": [], "suggestions": []}

    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)

    @property
    def is_classified(self) -> bool:
        return self.sentiment_score is not None
