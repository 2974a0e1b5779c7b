"""
Environment-driven configuration.

Every setting is read at call time so tests can monkeypatch `os.environ`.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_list(name: str, default: list[str]) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    return env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)


def pool_min_size() -> int:
    return max(1, env_int("DB_POOL_MIN_SIZE", 1))


def pool_max_size() -> int:
    return max(pool_min_size(), env_int("DB_POOL_MAX_SIZE", 5))


def command_timeout() -> int:
    return env_int("DB_COMMAND_TIMEOUT", 30)


def latest_articles_limit() -> int:
    return max(1, env_int("LATEST_ARTICLES_LIMIT", 10))


def max_page_size() -> int:
    return max(1, env_int("MAX_PAGE_SIZE", 500))
