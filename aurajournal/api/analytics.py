from fastapi import APIRouter, Depends

from aurajournal.api.deps import get_journal_service
from aurajournal.schemas.mood import InsightsOut
from aurajournal.services.journal import JournalService

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/insights", response_model=InsightsOut)
async def analytics_insights(service: JournalService = Depends(get_journal_service)):
    return {"insights": await service.get_insights()}
