from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Enum,
    Integer,
    Text,
)

from aurajournal.db.database import Base
from aurajournal.models.enums import Mood
from aurajournal.utils.timeutils import utcnow


INTENSITY_MIN = 1
INTENSITY_MAX = 5


class MoodDataPoint(Base):
    __tablename__ = "mood_data"
    __table_args__ = (
        CheckConstraint(
            f"intensity BETWEEN {INTENSITY_MIN} AND {INTENSITY_MAX}",
            name="ck_mood_data_intensity_range",
        ),
    )

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False, index=True)

    mood = Column(
        Enum(Mood, name="mood_enum", native_enum=False, length=20),
        nullable=False,
    )
    intensity = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)

    # Weak link back to the journal entry: no FK, deleting the entry leaves the point alone
    entry_id = Column(Integer, nullable=True, index=True)

    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
