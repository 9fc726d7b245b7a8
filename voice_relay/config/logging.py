"""Logging configuration."""

from __future__ import annotations

from .env import get_str, get_bool

LOG_LEVEL: str = get_str("LOG_LEVEL", "INFO").upper()
LOG_FORMAT: str = get_str("LOG_FORMAT", "%(asctime)s %(levelname)s %(name)s: %(message)s")

# httpx logs every request at INFO. Keep it quiet unless explicitly enabled.
SHOW_HTTP_LOGS: bool = get_bool("SHOW_HTTP_LOGS", False)

__all__ = ["LOG_FORMAT", "LOG_LEVEL", "SHOW_HTTP_LOGS"]
