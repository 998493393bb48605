from typing import List, Optional

from fastapi import APIRouter, Depends

from aurajournal.api.deps import get_journal_service
from aurajournal.models.enums import Mood
from aurajournal.schemas.mood import MusicRecommendationOut
from aurajournal.services.journal import JournalService

router = APIRouter(prefix="/api/music", tags=["music"])


@router.get("/recommendations", response_model=List[MusicRecommendationOut])
async def music_recommendations(
    mood: Optional[Mood] = None,
    service: JournalService = Depends(get_journal_service),
):
    """Seeded catalog, optionally filtered by mood."""
    return await service.music_recommendations(mood)
