from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from aurajournal.config import Settings
from aurajournal.db.store import RecordStore
from aurajournal.main import create_app
from aurajournal.models.enums import Mood
from aurajournal.schemas.sentiment import AiInsights, SentimentAnalysis
from aurajournal.services.journal import JournalService
from aurajournal.services.sentiment import SentimentClassifier

# In-memory SQLite for tests, same as the default runtime store.
DATABASE_URL = "sqlite+aiosqlite://"


class FakeClock:
    """Controllable clock: naive UTC datetimes, move it with advance()."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, days: int = 0, **kwargs) -> None:
        self.now = self.now + timedelta(days=days, **kwargs)


class FakeClassifier(SentimentClassifier):
    """Returns queued results (or raises queued errors) in order."""

    def __init__(self, default: SentimentAnalysis | None = None):
        self.default = default or SentimentAnalysis(
            mood=Mood.neutral,
            sentiment_score=0.0,
            confidence=0.5,
        )
        self.queue = []
        self.calls = []

    def push(self, result) -> None:
        self.queue.append(result)

    async def classify(self, text: str) -> SentimentAnalysis:
        self.calls.append(text)
        result = self.queue.pop(0) if self.queue else self.default
        if isinstance(result, Exception):
            raise result
        return result


def _analysis(mood="happy", score=0.8, confidence=0.9, **insights) -> SentimentAnalysis:
    return SentimentAnalysis(
        mood=Mood(mood),
        sentiment_score=score,
        confidence=confidence,
        insights=AiInsights(**insights),
    )


@pytest.fixture()
def make_analysis():
    return _analysis


@pytest.fixture()
def clock():
    return FakeClock(datetime(2024, 3, 11, 9, 0, 0))  # a Monday


@pytest.fixture()
def classifier():
    return FakeClassifier()


@pytest_asyncio.fixture()
async def store():
    s = RecordStore(DATABASE_URL)
    await s.init()
    try:
        yield s
    finally:
        await s.shutdown()


@pytest_asyncio.fixture()
async def service(store, classifier, clock):
    return JournalService(store, classifier, settings=Settings(), clock=clock)


@pytest.fixture()
def client(classifier, clock):
    app = create_app(Settings(), classifier=classifier, clock=clock)
    with TestClient(app) as c:
        yield c
