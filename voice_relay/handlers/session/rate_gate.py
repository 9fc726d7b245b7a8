"""Per-session admission: one request in flight, spaced by a cooldown."""

from __future__ import annotations

import math

from voice_relay.state.admission import Busy, Admitted, Cooldown, Admission


class RateGate:
    """Track in-flight state and the last completion time of one session.

    `try_admit` only decides; the caller applies the transition with
    `mark_in_flight` and undoes it with `release` once the request finishes.
    A cooldown <= 0 disables the spacing check but not the busy check.
    """

    def __init__(self, *, cooldown_s: float) -> None:
        self.cooldown_s = max(0.0, float(cooldown_s))
        self._in_flight = False
        self._last_completed: float | None = None

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def last_completed(self) -> float | None:
        return self._last_completed

    def try_admit(self, now: float) -> Admission:
        if self._in_flight:
            return Busy()
        if self.cooldown_s > 0 and self._last_completed is not None:
            remaining = self.cooldown_s - (now - self._last_completed)
            if remaining > 0:
                return Cooldown(remaining_s=int(math.ceil(remaining)))
        return Admitted()

    def mark_in_flight(self) -> None:
        self._in_flight = True

    def release(self, now: float) -> None:
        self._in_flight = False
        self._last_completed = now


__all__ = ["RateGate"]
