from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _flag(name: str, default: str = "false") -> bool:
    return (_env(name, default) or "").strip().lower() in _TRUTHY


def _optional_float(name: str) -> float | None:
    value = _env(name)
    if not value:
        return None
    return float(value)


def _optional_int(name: str) -> int | None:
    value = _env(name)
    if not value:
        return None
    return int(value)


@dataclass(frozen=True)
class Settings:
    start_server: bool
    host: str
    port: int
    log_level: str
    pendle_timeout_seconds: float | None
    pendle_max_pages: int | None


def get_settings() -> Settings:
    return Settings(
        start_server=_flag("START_SERVER"),
        host=_env("HOST", "0.0.0.0"),
        port=int(_env("PORT", "8000")),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        pendle_timeout_seconds=_optional_float("PENDLE_TIMEOUT_SECONDS"),
        pendle_max_pages=_optional_int("PENDLE_MAX_PAGES"),
    )
