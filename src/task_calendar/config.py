# src/task_calendar/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time.
- Every value has a working default, so the app starts with an empty environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKCAL"

DEFAULT_API_URL = "https://todo-backend-5t1x.onrender.com/api/task"
DEFAULT_USER_ID = "2313841"
DEFAULT_SHARED_DEFAULTS_KEY = "shared_default_tasks"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Remote task store ----
    api_url: str
    user_id: str
    shared_defaults_key: str
    http_connect_timeout: float
    http_read_timeout: float

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    session_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env_str(_k("APP_NAME"), "task-calendar")
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        # Trailing slash would produce "//" in GET URLs.
        api_url = _env_str(_k("API_URL"), DEFAULT_API_URL).rstrip("/")
        user_id = _env_str(_k("USER_ID"), DEFAULT_USER_ID)
        shared_defaults_key = _env_str(_k("SHARED_DEFAULTS_KEY"), DEFAULT_SHARED_DEFAULTS_KEY)

        http_connect_timeout = _env_float(_k("HTTP_CONNECT_TIMEOUT_SECONDS"), 5.0)
        http_read_timeout = _env_float(_k("HTTP_READ_TIMEOUT_SECONDS"), 20.0)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task-calendar"))
        session_path = _env_path(_k("SESSION_PATH"), data_dir / "session.json")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            api_url=api_url,
            user_id=user_id,
            shared_defaults_key=shared_defaults_key,
            http_connect_timeout=max(0.1, http_connect_timeout),
            http_read_timeout=max(0.1, http_read_timeout),
            data_dir=data_dir,
            session_path=session_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
