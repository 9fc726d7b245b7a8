"""Per-session conversation dataclasses and the engine phase."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConversationTurn:
    """One user utterance paired with the assistant's reply."""

    user: str
    assistant: str


class SessionPhase(enum.Enum):
    IDLE = "idle"
    ACCUMULATING_AUDIO = "accumulating_audio"
    AWAITING_COMPLETION = "awaiting_completion"


__all__ = ["ConversationTurn", "SessionPhase"]
