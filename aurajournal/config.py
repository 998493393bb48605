import os
from typing import List

from pydantic import BaseModel, Field


# Default to in-memory SQLite, same as the reference app (nothing survives a restart).
# Set DATABASE_URL for a file or Postgres, e.g.
#   export DATABASE_URL=sqlite+aiosqlite:///./aura.db
DEFAULT_DATABASE_URL = "sqlite+aiosqlite://"

DEFAULT_ONBOARDING_INSIGHTS = [
    "Start journaling regularly to unlock personalized insights!",
    "Your emotional journey begins with your first entry.",
    "AI insights will become more accurate as you write more.",
]

DEFAULT_ENCOURAGEMENT_INSIGHTS = [
    "Your mood improves with consistent journaling",
    "Your most positive entries mention personal achievements",
]


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.environ.get(name)
    if not raw:
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


class Settings(BaseModel):
    database_url: str = DEFAULT_DATABASE_URL
    database_echo: bool = False

    openai_api_key: str | None = None
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-5"
    openai_timeout_seconds: float = Field(default=30.0, gt=0)

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    onboarding_insights: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ONBOARDING_INSIGHTS)
    )
    encouragement_insights: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ENCOURAGEMENT_INSIGHTS)
    )

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL),
            database_echo=_env_bool("DATABASE_ECHO"),
            openai_api_key=os.environ.get("OPENAI_API_KEY"),
            openai_base_url=os.environ.get(
                "OPENAI_BASE_URL", "https://api.openai.com/v1"
            ),
            openai_model=os.environ.get("OPENAI_MODEL", "gpt-5"),
            openai_timeout_seconds=float(
                os.environ.get("OPENAI_TIMEOUT_SECONDS", "30")
            ),
            cors_origins=_env_list("CORS_ORIGINS", ["*"]),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )
