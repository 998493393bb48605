from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from aurajournal.api.deps import get_journal_service, http_error
from aurajournal.errors import JournalError
from aurajournal.schemas.journal import ClassificationIn, JournalEntryCreate, JournalEntryCreated, JournalEntryOut
from aurajournal.services.journal import JournalService

router = APIRouter(prefix="/api/journal-entries", tags=["journal"])


@router.get("", response_model=List[JournalEntryOut])
async def list_journal_entries(service: JournalService = Depends(get_journal_service)):
    """All entries, newest first."""
    return await service.list_entries()


@router.post("", response_model=JournalEntryCreated)
async def create_journal_entry(
    payload: JournalEntryCreate,
    service: JournalService = Depends(get_journal_service),
):
    """
    Save the entry, update streak / badges, then classify it.

    If the sentiment service fails the entry and progress are still
    saved; the response is a 502 carrying the entry_id so the client
    can retry POST /{entry_id}/classify.
    """
    try:
        return await service.submit_entry(payload.content, payload.mood)
    except JournalError as exc:
        raise http_error(exc) from exc


@router.get("/{entry_id}", response_model=JournalEntryOut)
async def get_journal_entry(entry_id: int, service: JournalService = Depends(get_journal_service)):
    try:
        return await service.get_entry(entry_id)
    except JournalError as exc:
        raise http_error(exc) from exc


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_journal_entry(entry_id: int, service: JournalService = Depends(get_journal_service)):
    try:
        await service.delete_entry(entry_id)
    except JournalError as exc:
        raise http_error(exc) from exc


@router.post("/{entry_id}/classify", response_model=JournalEntryOut)
async def classify_journal_entry(entry_id: int, service: JournalService = Depends(get_journal_service)):
    """Retry sentiment classification for an entry that doesn't have one yet."""
    try:
        entry, _ = await service.classify_entry(entry_id)
        return entry
    except JournalError as exc:
        raise http_error(exc) from exc


@router.post("/{entry_id}/classification", response_model=JournalEntryOut)
async def attach_journal_classification(
    entry_id: int,
    payload: ClassificationIn,
    service: JournalService = Depends(get_journal_service),
):
    """Attach a classification produced outside this service."""
    try:
        return await service.attach_classification(
            entry_id,
            mood=payload.mood,
            sentiment_score=payload.sentiment_score,
            confidence=payload.confidence,
            insights=payload.insights,
        )
    except JournalError as exc:
        raise http_error(exc) from exc
