# src/task_calendar/session.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class SessionFlag:
    """
    Local "logged in" flag persisted as a small JSON file.

    There are no credentials: logging in only flips the flag.
    A missing or unreadable file means logged out.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def is_logged_in(self) -> bool:
        if not self._path.exists():
            return False
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Unreadable session file %s; treating as logged out", self._path)
            return False
        return isinstance(data, dict) and data.get("loggedIn") is True

    def log_in(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps({"loggedIn": True}), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)
        logger.info("Logged in (session=%s)", self._path)

    def log_out(self) -> None:
        with contextlib.suppress(FileNotFoundError):
            self._path.unlink()
        logger.info("Logged out")
