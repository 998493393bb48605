from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from aurajournal.api.deps import get_journal_service, http_error
from aurajournal.errors import JournalError
from aurajournal.schemas.mood import (
    MoodCalendarOut,
    MoodDataCreate,
    MoodDataOut,
    TrendPoint,
    WeeklySummaryOut,
)
from aurajournal.services.journal import JournalService

router = APIRouter(prefix="/api/mood-data", tags=["mood"])


@router.get("", response_model=List[MoodDataOut])
async def list_mood_data(
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    service: JournalService = Depends(get_journal_service),
):
    """
    Mood points, newest first.
    The range only applies when BOTH ends are given (inclusive).
    """
    try:
        return await service.list_mood(start_date, end_date)
    except JournalError as exc:
        raise http_error(exc) from exc


@router.post("", response_model=MoodDataOut)
async def create_mood_data(
    payload: MoodDataCreate,
    service: JournalService = Depends(get_journal_service),
):
    """Manual mood check-in."""
    try:
        return await service.record_mood(
            point_date=payload.date,
            mood=payload.mood,
            intensity=payload.intensity,
            notes=payload.notes,
            entry_id=payload.entry_id,
        )
    except JournalError as exc:
        raise http_error(exc) from exc


@router.get("/trend", response_model=List[TrendPoint])
async def mood_trend(
    limit: int = Query(default=30, ge=1, le=365),
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    service: JournalService = Depends(get_journal_service),
):
    """Chart series, oldest -> newest. Same range rules as GET /api/mood-data."""
    try:
        return await service.mood_trend(limit=limit, start_date=start_date, end_date=end_date)
    except JournalError as exc:
        raise http_error(exc) from exc


@router.get("/weekly", response_model=WeeklySummaryOut)
async def weekly_summary(service: JournalService = Depends(get_journal_service)):
    return await service.weekly_summary()


@router.get("/calendar", response_model=MoodCalendarOut)
async def mood_calendar(
    year: int = Query(..., ge=1970, le=9999),
    month: int = Query(..., ge=1, le=12),
    service: JournalService = Depends(get_journal_service),
):
    try:
        days = await service.mood_calendar(year, month)
    except JournalError as exc:
        raise http_error(exc) from exc

    return {"year": year, "month": month, "days": days}
