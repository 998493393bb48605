"""
Journal service: the write path and the read paths the API serves.

Write path:
    create_entry   -> entry + progress update, one transaction
    classify_entry -> sentiment call (outside the lock), then
    attach_classification -> AI fields on the entry + one mood point

Progress tracks "did the user write", so it moves at creation time and
a failed or retried classification never touches streak / totals.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

from aurajournal.config import Settings
from aurajournal.db.store import RecordStore
from aurajournal.errors import (
    AlreadyClassifiedError,
    InvalidInputError,
    NotFoundError,
    UpstreamClassificationError,
)
from aurajournal.models import JournalEntry, MoodDataPoint, MusicRecommendation, UserProgress
from aurajournal.models.enums import MOOD_VALUES, Mood
from aurajournal.models.mood import INTENSITY_MAX, INTENSITY_MIN
from aurajournal.schemas.sentiment import AiInsights, SentimentAnalysis
from aurajournal.services import records
from aurajournal.services.analytics import mood as mood_analytics
from aurajournal.services.analytics.insights import synthesize_insights
from aurajournal.services.analytics.stats import compute_user_stats
from aurajournal.services.progress import record_new_entry
from aurajournal.services.sentiment import SentimentClassifier, sentiment_to_intensity
from aurajournal.utils.timeutils import utcnow

logger = logging.getLogger(__name__)


# =================================================
# Helpers
# =================================================
def _coerce_mood(value: Any) -> Mood:
    if isinstance(value, Mood):
        return value
    label = str(value or "").strip().lower()
    if label not in MOOD_VALUES:
        raise InvalidInputError(f"Unknown mood {value!r}; expected one of {', '.join(MOOD_VALUES)}")
    return Mood(label)


def _require_content(content: Optional[str]) -> str:
    if content is None or not content.strip():
        raise InvalidInputError("Journal entry content is required")
    return content


def _require_intensity(intensity: Any) -> int:
    if isinstance(intensity, bool) or not isinstance(intensity, int):
        raise InvalidInputError("Intensity must be an integer")
    if not INTENSITY_MIN <= intensity <= INTENSITY_MAX:
        raise InvalidInputError(f"Intensity must be between {INTENSITY_MIN} and {INTENSITY_MAX}")
    return intensity


def _resolve_range(start_date: Optional[date], end_date: Optional[date]) -> Optional[Tuple[date, date]]:
    # a range only applies when both ends are given
    if start_date is None or end_date is None:
        return None
    if start_date > end_date:
        raise InvalidInputError("start_date must not be after end_date")
    return start_date, end_date


class JournalService:
    def __init__(
        self,
        store: RecordStore,
        classifier: SentimentClassifier,
        *,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.store = store
        self.classifier = classifier
        self.settings = settings or Settings()
        self.clock = clock

    def today(self) -> date:
        return self.clock().date()

    # =================================================
    # WRITE PATH
    # =================================================
    async def create_entry(self, content: str, mood: Any) -> Tuple[JournalEntry, UserProgress]:
        """
        Persist the entry and move progress forward.
        Both commit together or neither does.
        """
        content = _require_content(content)
        mood = _coerce_mood(mood)
        now = self.clock()

        async with self.store.write_lock:
            async with self.store.session() as db:
                try:
                    entry = await records.add_journal_entry(db, content=content, mood=mood, created_at=now)
                    progress = await records.get_progress(db)
                    record_new_entry(progress, now.date(), now=now)
                    await records.save_progress(db, progress)
                    await db.commit()
                except Exception:
                    await db.rollback()
                    raise

        logger.info(
            "Journal entry %s created (streak=%s total=%s badges=%s)",
            entry.id,
            progress.streak,
            progress.total_entries,
            progress.badges,
        )
        return entry, progress

    async def attach_classification(
        self,
        entry_id: int,
        *,
        mood: Any,
        sentiment_score: float,
        confidence: Optional[float] = None,
        insights: Optional[AiInsights | Dict[str, Any]] = None,
    ) -> JournalEntry:
        """
        Merge AI output into an existing entry and add the matching mood point.

        The entry keeps the mood the user picked; the AI mood goes on the point.
        NotFoundError if the entry is gone, AlreadyClassifiedError on a second attach.
        """
        mood = _coerce_mood(mood)
        if sentiment_score is None or not -1 <= sentiment_score <= 1:
            raise InvalidInputError("sentiment_score must be between -1 and 1")
        if confidence is not None and not 0 <= confidence <= 1:
            raise InvalidInputError("confidence must be between 0 and 1")

        if isinstance(insights, AiInsights):
            insights_payload = insights.model_dump()
        elif insights is not None:
            insights_payload = AiInsights(**insights).model_dump()
        else:
            insights_payload = None

        now = self.clock()

        async with self.store.write_lock:
            async with self.store.session() as db:
                try:
                    existing = await records.get_journal_entry_or_raise(db, entry_id)
                    if existing.is_classified:
                        raise AlreadyClassifiedError(f"Journal entry {entry_id} is already classified")

                    entry = await records.update_journal_entry(
                        db,
                        entry_id,
                        {
                            "sentiment_score": sentiment_score,
                            "confidence": confidence,
                            "ai_insights": insights_payload,
                        },
                    )
                    await records.add_mood_point(
                        db,
                        point_date=now.date(),
                        mood=mood,
                        intensity=sentiment_to_intensity(sentiment_score),
                        notes=f"AI detected mood: {mood.value}",
                        entry_id=entry.id,
                        created_at=now,
                    )
                    await db.commit()
                except Exception:
                    await db.rollback()
                    raise

        logger.info("Classification attached to entry %s (mood=%s score=%.2f)", entry_id, mood.value, sentiment_score)
        return entry

    async def classify_entry(self, entry_id: int) -> Tuple[JournalEntry, SentimentAnalysis]:
        """
        Ask the sentiment service about an existing entry and attach the result.

        Safe to retry: progress is not touched here. On failure the entry
        stays unclassified and UpstreamClassificationError propagates.
        """
        entry = await self.get_entry(entry_id)
        if entry.is_classified:
            raise AlreadyClassifiedError(f"Journal entry {entry_id} is already classified")

        try:
            analysis = await self.classifier.classify(entry.content)
        except UpstreamClassificationError as exc:
            exc.entry_id = entry_id
            logger.warning("Classification failed for entry %s: %s", entry_id, exc)
            raise

        updated = await self.attach_classification(
            entry_id,
            mood=analysis.mood,
            sentiment_score=analysis.sentiment_score,
            confidence=analysis.confidence,
            insights=analysis.insights,
        )
        return updated, analysis

    async def submit_entry(self, content: str, mood: Any) -> Dict[str, Any]:
        """
        Full POST flow: create, then classify.

        {"entry": JournalEntry, "progress": UserProgress, "sentiment": SentimentAnalysis}
        """
        entry, progress = await self.create_entry(content, mood)
        updated, analysis = await self.classify_entry(entry.id)
        return {"entry": updated, "progress": progress, "sentiment": analysis}

    async def record_mood(
        self,
        *,
        point_date: date,
        mood: Any,
        intensity: Any,
        notes: Optional[str] = None,
        entry_id: Optional[int] = None,
    ) -> MoodDataPoint:
        """Manual mood check-in."""
        mood = _coerce_mood(mood)
        intensity = _require_intensity(intensity)

        async with self.store.write_lock:
            async with self.store.session() as db:
                point = await records.add_mood_point(
                    db,
                    point_date=point_date,
                    mood=mood,
                    intensity=intensity,
                    notes=notes,
                    entry_id=entry_id,
                    created_at=self.clock(),
                )
                await db.commit()

        logger.info("Mood check-in recorded for %s (%s, %s/5)", point_date, mood.value, intensity)
        return point

    async def delete_entry(self, entry_id: int) -> None:
        async with self.store.write_lock:
            async with self.store.session() as db:
                deleted = await records.delete_journal_entry(db, entry_id)
                if not deleted:
                    raise NotFoundError(f"Journal entry {entry_id} not found")
                await db.commit()

        logger.info("Journal entry %s deleted", entry_id)

    # =================================================
    # READ PATHS
    # =================================================
    async def list_entries(self) -> List[JournalEntry]:
        async with self.store.read_session() as db:
            return await records.list_journal_entries(db)

    async def get_entry(self, entry_id: int) -> JournalEntry:
        async with self.store.read_session() as db:
            return await records.get_journal_entry_or_raise(db, entry_id)

    async def list_mood(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[MoodDataPoint]:
        date_range = _resolve_range(start_date, end_date)
        async with self.store.read_session() as db:
            if date_range is not None:
                return await records.list_mood_points_between(db, *date_range)
            return await records.list_mood_points(db)

    async def get_progress(self) -> UserProgress:
        async with self.store.read_session() as db:
            return await records.get_progress(db)

    async def get_stats(self) -> Tuple[UserProgress, Dict[str, Any]]:
        async with self.store.read_session() as db:
            progress = await records.get_progress(db)
            entries = await records.list_journal_entries(db)
            points = await records.list_mood_points(db)

        return progress, compute_user_stats(entries=entries, mood_points=points, today=self.today())

    async def get_insights(self) -> List[str]:
        async with self.store.read_session() as db:
            points = await records.list_mood_points(db)
            entries = await records.list_journal_entries(db)

        return synthesize_insights(
            points,
            entries,
            onboarding=self.settings.onboarding_insights,
            encouragement=self.settings.encouragement_insights,
        )

    async def mood_trend(
        self,
        *,
        limit: int = 30,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Dict[str, Any]]:
        date_range = _resolve_range(start_date, end_date)
        if date_range is None:
            return mood_analytics.mood_trend(await self.list_mood(), limit=limit)

        points = await self.list_mood(*date_range)
        return mood_analytics.mood_trend(points, limit=limit, start=date_range[0], end=date_range[1])

    async def weekly_summary(self) -> Dict[str, Any]:
        points = await self.list_mood()
        return mood_analytics.weekly_summary(points, self.today())

    async def mood_calendar(self, year: int, month: int) -> Dict[str, Dict[str, Any]]:
        if not 1 <= month <= 12:
            raise InvalidInputError("month must be between 1 and 12")
        points = await self.list_mood()
        return mood_analytics.mood_calendar(points, year, month)

    async def music_recommendations(self, mood: Any = None) -> List[MusicRecommendation]:
        mood = _coerce_mood(mood) if mood is not None else None
        async with self.store.read_session() as db:
            return await records.list_music(db, mood)
