"""Rate Gate decisions (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Admitted:
    pass


@dataclass(frozen=True, slots=True)
class Busy:
    pass


@dataclass(frozen=True, slots=True)
class Cooldown:
    remaining_s: int


Admission = Admitted | Busy | Cooldown

__all__ = ["Admission", "Admitted", "Busy", "Cooldown"]
