import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aurajournal.api import analytics as analytics_router
from aurajournal.api import journal as journal_router
from aurajournal.api import mood as mood_router
from aurajournal.api import music as music_router
from aurajournal.api import progress as progress_router
from aurajournal.config import Settings
from aurajournal.db.store import RecordStore
from aurajournal.services.journal import JournalService
from aurajournal.services.sentiment import OpenAISentimentClassifier, SentimentClassifier

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    classifier: Optional[SentimentClassifier] = None,
    clock=None,
) -> FastAPI:
    """
    Build the app. Nothing is created at import time; serve with
        uvicorn aurajournal.main:create_app --factory
    """
    settings = settings or Settings.from_env()

    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # init -> serve -> shutdown; the store lives on app.state, never as a global
        store = RecordStore(settings.database_url, echo=settings.database_echo)
        await store.init()

        sentiment = classifier or OpenAISentimentClassifier.from_settings(settings)

        service_kwargs = {"settings": settings}
        if clock is not None:
            service_kwargs["clock"] = clock

        app.state.store = store
        app.state.journal_service = JournalService(store, sentiment, **service_kwargs)
        logger.info("Aura Journal API started")

        try:
            yield
        finally:
            await sentiment.aclose()
            await store.shutdown()
            logger.info("Aura Journal API stopped")

    app = FastAPI(title="Aura Journal API", lifespan=lifespan)

    # CORS - permissive by default for local dev, set CORS_ORIGINS in production
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(journal_router.router)
    app.include_router(mood_router.router)
    app.include_router(progress_router.router)
    app.include_router(analytics_router.router)
    app.include_router(music_router.router)

    return app
