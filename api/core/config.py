"""
Environment configuration helpers.

Values are read on each call (not cached) so tests can monkeypatch the
environment. All values are stripped; blank counts as unset.
"""

from __future__ import annotations

import os

_TRUTHY = {"1", "true", "yes", "on"}


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = env_str(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    raw = env_str(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def env_bool(name: str, default: bool = False) -> bool:
    raw = env_str(name)
    if not raw:
        return default
    return raw.lower() in _TRUTHY


def sync_key() -> str:
    # Trimmed: hosting dashboards like to keep trailing whitespace/newlines.
    return env_str("SYNC_KEY")


def listen_host() -> str:
    return env_str("HOST", "0.0.0.0")


def listen_port() -> int:
    return env_int("PORT", 3000)


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = env_str("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def auth_debug_enabled() -> bool:
    return env_bool("ENABLE_AUTH_DEBUG")
