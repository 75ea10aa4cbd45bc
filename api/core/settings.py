"""
Runtime settings read from the environment.

A `.env` file in the working directory is loaded on import, without
overriding variables that are already set.
"""

from __future__ import annotations

import os
from urllib.parse import quote

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 8080
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_url() -> str:
    # A full DSN wins over the individual parts.
    url = os.environ.get("DATABASE_URL", "").strip()
    if url:
        return url

    host = _env_str("DATABASE_HOST", "localhost")
    port = _env_int("DATABASE_PORT", 5432)
    user = quote(_env_str("DATABASE_USER", "postgres"), safe="")
    password = quote(os.environ.get("DATABASE_PASSWORD", ""), safe="")
    name = _env_str("DATABASE_NAME", "students")

    credentials = f"{user}:{password}" if password else user
    return f"postgresql://{credentials}@{host}:{port}/{name}"


def db_pool_min_size() -> int:
    return max(0, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(1, _env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def cors_allow_origins() -> list[str]:
    raw = _env_str("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO")
