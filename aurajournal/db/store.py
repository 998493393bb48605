from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from aurajournal.db.database import Base, build_engine, build_sessionmaker, is_memory_sqlite
from aurajournal.models import MusicRecommendation, UserProgress
from aurajournal.models.music import DEFAULT_MUSIC
from aurajournal.services.progress import new_progress

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Owns the engine, the session factory and the write lock.

    One instance per process:
        store = RecordStore(url)
        await store.init()      # tables, progress row, music seed
        ...                     # serve
        await store.shutdown()
    """

    def __init__(self, database_url: str, *, echo: bool = False):
        self.database_url = database_url
        self.engine = build_engine(database_url, echo=echo)
        self.sessionmaker = build_sessionmaker(self.engine)
        # Single writer for entries + the progress singleton
        self.write_lock = asyncio.Lock()
        # StaticPool: every session shares one connection, and closing a
        # session rolls that connection back
        self.single_connection = is_memory_sqlite(database_url)
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def session(self) -> AsyncSession:
        """Writer session. Callers hold write_lock."""
        return self.sessionmaker()

    @asynccontextmanager
    async def read_session(self) -> AsyncIterator[AsyncSession]:
        """
        Session for read paths.

        Pooled engines give readers their own connection, so reads run
        alongside the writer. On a single shared connection a reader
        closing mid-write would roll back the writer's transaction, so
        reads wait for the write lock there.
        """
        if self.single_connection:
            async with self.write_lock:
                async with self.sessionmaker() as db:
                    yield db
        else:
            async with self.sessionmaker() as db:
                yield db

    async def init(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        async with self.session() as db:
            progress = (
                await db.execute(select(UserProgress).order_by(UserProgress.id.asc()).limit(1))
            ).scalar_one_or_none()

            if progress is None:
                db.add(new_progress())
                logger.info("Created initial progress record")

            music_count = (
                await db.execute(select(func.count()).select_from(MusicRecommendation))
            ).scalar_one()

            if not music_count:
                db.add_all([MusicRecommendation(**row) for row in DEFAULT_MUSIC])
                logger.info("Seeded %d music recommendations", len(DEFAULT_MUSIC))

            await db.commit()

        self._initialized = True
        logger.info("Record store ready (%s)", self.engine.url.render_as_string(hide_password=True))

    async def shutdown(self) -> None:
        await self.engine.dispose()
        self._initialized = False
        logger.info("Record store disposed")
