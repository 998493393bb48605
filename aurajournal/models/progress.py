from sqlalchemy import JSON, Column, Date, DateTime, Integer

from aurajournal.db.database import Base
from aurajournal.utils.timeutils import utcnow


class UserProgress(Base):
    """
    Singleton progress record for the (only) user.

    badges is a JSON list of Badge values. Always assign a new list,
    in-place mutation is not tracked by the JSON column.
    """

    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True)

    streak = Column(Integer, nullable=False, default=0)
    total_entries = Column(Integer, nullable=False, default=0)
    badges = Column(JSON, nullable=False, default=list)
    aura_level = Column(Integer, nullable=False, default=1)
    last_entry_date = Column(Date, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
