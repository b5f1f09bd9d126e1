from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    log_level: str
    run_env: str

    # Nested resolution results whose URN yields no id are dropped unless set
    keep_unidentified_nested: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise RuntimeError(
            f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}"
        )
    logging.debug(f"Loaded settings for log level {log_level}")
    return Settings(
        log_level=log_level,
        run_env=os.getenv("RUN_ENV", "local"),
        keep_unidentified_nested=_as_bool(os.getenv("KEEP_UNIDENTIFIED_NESTED")),
    )
