"""
Sentiment classification client (OpenAI-compatible chat completions).

The model is treated as a black box: we send the entry text, it sends
back JSON with mood / sentimentScore / confidence / insights. Anything
that goes wrong on the way surfaces as UpstreamClassificationError.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from aurajournal.config import Settings
from aurajournal.errors import UpstreamClassificationError
from aurajournal.models.enums import MOOD_VALUES, Mood
from aurajournal.models.mood import INTENSITY_MAX, INTENSITY_MIN
from aurajournal.schemas.sentiment import AiInsights, SentimentAnalysis

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an empathetic AI therapist analyzing journal entries. Analyze the sentiment and provide insights in JSON format.

Respond with this exact JSON structure:
{
  "mood": "happy|sad|anxious|excited|neutral|angry|calm",
  "sentimentScore": number between -1 and 1,
  "confidence": number between 0 and 1,
  "insights": {
    "emotions": ["array of detected emotions"],
    "themes": ["array of main themes"],
    "suggestions": ["array of helpful suggestions"]
  }
}"""


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _number_or(value: Any, default: float) -> float:
    # missing, zero or non-numeric -> default (a 0 confidence means "not given")
    try:
        f = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(f) or f == 0:
        return default
    return f


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def parse_sentiment_payload(payload: Dict[str, Any]) -> SentimentAnalysis:
    """
    Normalise whatever the model returned.

    - unknown or missing mood -> neutral
    - sentimentScore clamped to [-1, 1], default 0
    - confidence clamped to [0, 1], default 0.5
    - missing insight lists -> []
    """
    mood_raw = str(payload.get("mood") or "").strip().lower()
    mood = Mood(mood_raw) if mood_raw in MOOD_VALUES else Mood.neutral

    score = _number_or(payload.get("sentimentScore"), 0.0)
    confidence = _number_or(payload.get("confidence"), 0.5)

    insights_raw = payload.get("insights") or {}
    if not isinstance(insights_raw, dict):
        insights_raw = {}

    return SentimentAnalysis(
        mood=mood,
        sentiment_score=_clamp(score, -1.0, 1.0),
        confidence=_clamp(confidence, 0.0, 1.0),
        insights=AiInsights(
            emotions=_str_list(insights_raw.get("emotions")),
            themes=_str_list(insights_raw.get("themes")),
            suggestions=_str_list(insights_raw.get("suggestions")),
        ),
    )


def sentiment_to_intensity(sentiment_score: float) -> int:
    """
    Map a [-1, 1] score onto the 1-5 intensity scale.

    round_half_up((score + 1) * 2.5 + 1), clamped: a raw 6 (score >= 0.8)
    is stored as 5.
    """
    raw = math.floor((sentiment_score + 1) * 2.5 + 1 + 0.5)
    return int(_clamp(raw, INTENSITY_MIN, INTENSITY_MAX))


class SentimentClassifier:
    """Interface: anything with `async classify(text) -> SentimentAnalysis`."""

    async def classify(self, text: str) -> SentimentAnalysis:  # pragma: no cover
        raise NotImplementedError

    async def aclose(self) -> None:
        return None


class OpenAISentimentClassifier(SentimentClassifier):
    def __init__(
        self,
        *,
        api_key: Optional[str],
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-5",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.model = model
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {api_key or ''}",
                "Content-Type": "application/json",
            },
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenAISentimentClassifier":
        return cls(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            model=settings.openai_model,
            timeout=settings.openai_timeout_seconds,
        )

    def _request_body(self, text: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f'Please analyze this journal entry: "{text}"'},
            ],
            "response_format": {"type": "json_object"},
            "temperature": 0.3,
        }

    async def classify(self, text: str) -> SentimentAnalysis:
        try:
            resp = await self._client.post("/chat/completions", json=self._request_body(text))
            resp.raise_for_status()
            data = resp.json()
            content = data["choices"][0]["message"]["content"] or "{}"
            payload = json.loads(content)
        except httpx.TimeoutException as exc:
            logger.warning("Sentiment request timed out: %s", exc)
            raise UpstreamClassificationError("Sentiment analysis timed out") from exc
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Sentiment request failed: status=%s body=%s",
                exc.response.status_code,
                exc.response.text[:500],
            )
            raise UpstreamClassificationError(
                f"Sentiment service returned {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Sentiment request error: %s", exc)
            raise UpstreamClassificationError(f"Failed to analyze sentiment: {exc}") from exc
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            logger.warning("Unreadable sentiment response: %s", exc)
            raise UpstreamClassificationError("Sentiment service returned an unreadable response") from exc

        if not isinstance(payload, dict):
            raise UpstreamClassificationError("Sentiment service returned an unreadable response")

        try:
            return parse_sentiment_payload(payload)
        except ValidationError as exc:
            raise UpstreamClassificationError("Sentiment service returned an invalid payload") from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
