"""
Environment-driven settings.

Values are read lazily from the process environment so tests can override
them with `monkeypatch.setenv`. `load_env()` pulls a local `.env` into the
environment once at startup.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

DEFAULT_HOST_PORT = "127.0.0.1:3000"
DEFAULT_HEALTH_CHECK_RESPONSE = "I'm good, you already asked me"
DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")


def load_env() -> None:
    # Real environment wins over .env values.
    load_dotenv(override=False)


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


def pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 0)


def pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", 5), pool_min_size(), 1)


def command_timeout_s() -> float:
    return _env_float("DB_COMMAND_TIMEOUT_S", 30.0)


def listen_address() -> tuple[str, int]:
    """
    Split HOST_PORT ("host:port") into its parts.
    """
    raw = _env_str("HOST_PORT", DEFAULT_HOST_PORT)
    host, sep, port = raw.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise RuntimeError(f"HOST_PORT must look like host:port, got {raw!r}.")
    return host, int(port)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def health_check_response() -> str:
    return _env_str("HEALTH_CHECK_RESPONSE", DEFAULT_HEALTH_CHECK_RESPONSE)


def cors_allowed_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOWED_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
