"""Runtime configuration defaults for the sandwich station."""

from __future__ import annotations

SANDWICH_CAPACITY = 10

# Render container names passed to Render.layout_grid / clear_container.
OPTIONS_CONTAINER = "ingredient-options"
SANDWICH_CONTAINER = "sandwich-panel"

DEBUG_LOG_PATH = "/tmp/sandwich-station-debug.log"
DEBUG_LOG_ENV = "SANDWICH_STATION_DEBUG_LOG"
