"""Append-only debug log shared by the state machine and the terminal host."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

from sandwich_station.config import DEBUG_LOG_ENV, DEBUG_LOG_PATH

_DISABLED_VALUES = {"", "0", "off", "none"}


def resolve_debug_log_path() -> Path | None:
    """
    Resolve the debug log destination.

    SANDWICH_STATION_DEBUG_LOG overrides DEBUG_LOG_PATH when set; an empty
    value or "off" disables logging.
    """
    override = os.environ.get(DEBUG_LOG_ENV)
    if override is None:
        return Path(DEBUG_LOG_PATH)
    if override.strip().lower() in _DISABLED_VALUES:
        return None
    return Path(override.strip())


class DebugLog:
    """One timestamped line per event. A None path disables writing."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path

    @classmethod
    def from_env(cls) -> DebugLog:
        return cls(resolve_debug_log_path())

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def write(self, message: str) -> None:
        if self.path is None:
            return
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with input handling.
            return
