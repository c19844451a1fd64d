"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised palette extraction settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    palette_color_count: int = 5
    palette_quality: int = 5

    fetch_timeout: float = 30.0
    fetch_max_bytes: int = 20 * 1024 * 1024
    user_agent: str = "chromacut/0.1"


def _env_number(name: str, default: int | float) -> int | float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return type(default)(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        palette_color_count=int(_env_number("PALETTE_COLOR_COUNT", 5)),
        palette_quality=int(_env_number("PALETTE_QUALITY", 5)),
        fetch_timeout=float(_env_number("FETCH_TIMEOUT", 30.0)),
        fetch_max_bytes=int(_env_number("FETCH_MAX_BYTES", 20 * 1024 * 1024)),
        user_agent=os.getenv("USER_AGENT", "chromacut/0.1"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
