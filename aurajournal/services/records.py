"""
Record store queries.

Plain data access over one AsyncSession. No business rules here:
streaks, badges and aggregation live in their own modules.
Callers own the transaction (commit / rollback).
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from aurajournal.errors import InvalidInputError, NotFoundError, UninitializedStoreError
from aurajournal.models import JournalEntry, MoodDataPoint, MusicRecommendation, UserProgress
from aurajournal.models.enums import Mood

# Fields the classification step is allowed to write
UPDATABLE_ENTRY_FIELDS = {"mood", "sentiment_score", "confidence", "ai_insights"}


# =================================================
# JOURNAL ENTRIES
# =================================================
async def add_journal_entry(db: AsyncSession, *, content: str, mood: Mood, created_at=None) -> JournalEntry:
    entry = JournalEntry(content=content, mood=mood)
    if created_at is not None:
        entry.created_at = created_at

    db.add(entry)
    await db.flush()
    return entry


async def list_journal_entries(db: AsyncSession) -> List[JournalEntry]:
    """Newest first."""
    result = await db.execute(
        select(JournalEntry).order_by(JournalEntry.created_at.desc(), JournalEntry.id.desc())
    )
    return list(result.scalars().all())


async def get_journal_entry(db: AsyncSession, entry_id: int) -> Optional[JournalEntry]:
    result = await db.execute(select(JournalEntry).where(JournalEntry.id == entry_id))
    return result.scalar_one_or_none()


async def get_journal_entry_or_raise(db: AsyncSession, entry_id: int) -> JournalEntry:
    entry = await get_journal_entry(db, entry_id)
    if entry is None:
        raise NotFoundError(f"Journal entry {entry_id} not found")
    return entry


async def update_journal_entry(db: AsyncSession, entry_id: int, updates: Dict[str, Any]) -> JournalEntry:
    entry = await get_journal_entry_or_raise(db, entry_id)

    unknown = set(updates) - UPDATABLE_ENTRY_FIELDS
    if unknown:
        raise InvalidInputError(f"Cannot update journal entry fields: {sorted(unknown)}")

    for field, value in updates.items():
        setattr(entry, field, value)

    await db.flush()
    return entry


async def delete_journal_entry(db: AsyncSession, entry_id: int) -> bool:
    result = await db.execute(delete(JournalEntry).where(JournalEntry.id == entry_id))
    return bool(result.rowcount)


# =================================================
# MOOD DATA
# =================================================
async def add_mood_point(
    db: AsyncSession,
    *,
    point_date: date,
    mood: Mood,
    intensity: int,
    notes: Optional[str] = None,
    entry_id: Optional[int] = None,
    created_at=None,
) -> MoodDataPoint:
    point = MoodDataPoint(
        date=point_date,
        mood=mood,
        intensity=intensity,
        notes=notes,
        entry_id=entry_id,
    )
    if created_at is not None:
        point.created_at = created_at

    db.add(point)
    await db.flush()
    return point


async def list_mood_points(db: AsyncSession) -> List[MoodDataPoint]:
    """Newest first (by creation, not by calendar date)."""
    result = await db.execute(
        select(MoodDataPoint).order_by(MoodDataPoint.created_at.desc(), MoodDataPoint.id.desc())
    )
    return list(result.scalars().all())


async def list_mood_points_between(db: AsyncSession, start_date: date, end_date: date) -> List[MoodDataPoint]:
    """Inclusive on both ends, newest first."""
    result = await db.execute(
        select(MoodDataPoint)
        .where(MoodDataPoint.date >= start_date, MoodDataPoint.date <= end_date)
        .order_by(MoodDataPoint.created_at.desc(), MoodDataPoint.id.desc())
    )
    return list(result.scalars().all())


# =================================================
# PROGRESS (singleton)
# =================================================
async def get_progress(db: AsyncSession) -> UserProgress:
    result = await db.execute(select(UserProgress).order_by(UserProgress.id.asc()).limit(1))
    progress = result.scalar_one_or_none()
    if progress is None:
        raise UninitializedStoreError("User progress not initialized")
    return progress


async def save_progress(db: AsyncSession, progress: UserProgress) -> UserProgress:
    db.add(progress)
    await db.flush()
    return progress


# =================================================
# MUSIC
# =================================================
async def list_music(db: AsyncSession, mood: Optional[Mood] = None) -> List[MusicRecommendation]:
    stmt = select(MusicRecommendation).order_by(MusicRecommendation.id.asc())
    if mood is not None:
        stmt = stmt.where(MusicRecommendation.mood == mood)
    return list((await db.execute(stmt)).scalars().all())
