# aurajournal/models/__init__.py
# Central import registry so Base.metadata.create_all sees every table

from aurajournal.models.journal import JournalEntry
from aurajournal.models.mood import MoodDataPoint
from aurajournal.models.progress import UserProgress
from aurajournal.models.music import MusicRecommendation  # noqa: F401
