"""Conversation history configuration (env-resolved constants only)."""

from __future__ import annotations

from .env import get_int

# Turns kept per connection. The extended deployment runs with 50.
HISTORY_MAX_TURNS: int = max(1, get_int("HISTORY_MAX_TURNS", 10))

# Trailing (user, assistant) pairs sent along with each completion request.
HISTORY_CONTEXT_TURNS: int = max(0, get_int("HISTORY_CONTEXT_TURNS", 5))

__all__ = ["HISTORY_CONTEXT_TURNS", "HISTORY_MAX_TURNS"]
