"""Bounded per-connection conversation history.

Turns are kept oldest first in a fixed-capacity deque; appending past the cap
evicts from the front in O(1). Turns are frozen, so nothing already stored is
ever mutated.
"""

from __future__ import annotations

import collections

from voice_relay.state.session import ConversationTurn


class ConversationContext:
    def __init__(self, max_turns: int) -> None:
        if int(max_turns) < 1:
            raise ValueError("max_turns must be >= 1")
        self.max_turns = int(max_turns)
        self._turns: collections.deque[ConversationTurn] = collections.deque(maxlen=self.max_turns)

    def __len__(self) -> int:
        return len(self._turns)

    def append(self, turn: ConversationTurn) -> None:
        self._turns.append(turn)

    def window(self, max_pairs: int) -> list[ConversationTurn]:
        """Return the most recent `max_pairs` turns, oldest first."""
        if max_pairs <= 0:
            return []
        turns = list(self._turns)
        return turns[-max_pairs:]

    def clear(self) -> None:
        self._turns.clear()

    def turns(self) -> list[ConversationTurn]:
        return list(self._turns)


__all__ = ["ConversationContext"]
