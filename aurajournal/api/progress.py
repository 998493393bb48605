from fastapi import APIRouter, Depends

from aurajournal.api.deps import get_journal_service, http_error
from aurajournal.errors import JournalError
from aurajournal.schemas.progress import UserProgressOut, UserStatsOut
from aurajournal.services.journal import JournalService

router = APIRouter(prefix="/api/user", tags=["progress"])


@router.get("/progress", response_model=UserProgressOut)
async def user_progress(service: JournalService = Depends(get_journal_service)):
    try:
        return await service.get_progress()
    except JournalError as exc:
        raise http_error(exc) from exc


@router.get("/stats", response_model=UserStatsOut)
async def user_stats(service: JournalService = Depends(get_journal_service)):
    """
    Progress plus dashboard stats:
    most frequent mood, positive %, entries this week, totals, distribution.
    """
    try:
        progress, stats = await service.get_stats()
    except JournalError as exc:
        raise http_error(exc) from exc

    return {"progress": progress, "stats": stats}
