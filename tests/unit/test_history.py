from __future__ import annotations

import pytest

from voice_relay.state.session import ConversationTurn
from voice_relay.handlers.session.history import ConversationContext


def _turn(i: int) -> ConversationTurn:
    return ConversationTurn(user=f"u{i}", assistant=f"a{i}")


def test_append_evicts_oldest_past_cap() -> None:
    ctx = ConversationContext(max_turns=3)
    for i in range(5):
        ctx.append(_turn(i))
        assert len(ctx) <= 3
    assert [t.user for t in ctx.turns()] == ["u2", "u3", "u4"]


def test_window_returns_most_recent_oldest_first() -> None:
    ctx = ConversationContext(max_turns=10)
    for i in range(7):
        ctx.append(_turn(i))
    assert [t.user for t in ctx.window(5)] == ["u2", "u3", "u4", "u5", "u6"]


def test_window_with_fewer_turns_returns_all() -> None:
    ctx = ConversationContext(max_turns=10)
    ctx.append(_turn(0))
    ctx.append(_turn(1))
    assert ctx.window(5) == [_turn(0), _turn(1)]
    assert ctx.window(0) == []


def test_clear_empties_history() -> None:
    ctx = ConversationContext(max_turns=50)
    for i in range(20):
        ctx.append(_turn(i))
    ctx.clear()
    assert len(ctx) == 0
    assert ctx.window(5) == []


def test_turns_are_immutable() -> None:
    turn = _turn(0)
    with pytest.raises(AttributeError):
        turn.user = "changed"  # type: ignore[misc]


def test_cap_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ConversationContext(max_turns=0)
