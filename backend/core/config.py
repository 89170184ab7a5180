"""
AgriModel Configuration

Settings come from environment variables (case-insensitive) with an
optional `.env` file, looked up in the working directory and then at the
project root. Unsafe combinations are refused when settings are first read.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

LOCAL_ENVIRONMENTS = {"", "local", "dev", "development", "test"}
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _locate_env_file() -> Path:
    for candidate in (Path(".env"), PROJECT_ROOT / ".env"):
        if candidate.exists():
            return candidate
    return Path(".env")


class Settings(BaseSettings):
    """Runtime settings for the data layer."""

    # ── Application ──────────────────────────────────────────────────
    app_name: str = "AgriModel"
    app_version: str = "0.1.0"
    app_env: str = "local"
    debug: bool = False

    # ── Storage ──────────────────────────────────────────────────────
    database_url: str = "sqlite+aiosqlite:///./agrimodel.db"
    database_echo: bool = False

    # ── Identifiers ──────────────────────────────────────────────────
    # How many times the write path regenerates an id that already exists
    id_max_attempts: int = 5

    model_config = {
        "env_file": str(_locate_env_file()),
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @property
    def is_local(self) -> bool:
        return self.app_env.strip().lower() in LOCAL_ENVIRONMENTS


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process; tests reset with cache_clear()."""
    settings = Settings()
    _enforce_runtime_guardrails(settings)
    return settings


def _enforce_runtime_guardrails(settings: Settings) -> None:
    if settings.id_max_attempts < 1:
        raise ValueError(f"id_max_attempts must be at least 1 (got {settings.id_max_attempts})")
    if settings.is_local:
        return

    unsafe = [name for name in ("debug", "database_echo") if getattr(settings, name)]
    if unsafe:
        flags = ", ".join(f"{name}=true" for name in unsafe)
        raise ValueError(f"Refusing to start with {flags} in app_env={settings.app_env!r}")
