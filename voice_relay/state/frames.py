"""Inbound WebSocket frames and text commands (dataclasses only).

Each text frame is decided once into one of `Ping`, `ClearContext`,
`DirectText` or `Unrecognized` and then matched by the session engine.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BinaryFrame:
    data: bytes


@dataclass(frozen=True, slots=True)
class TextFrame:
    text: str


@dataclass(frozen=True, slots=True)
class CloseFrame:
    code: int | None = None


@dataclass(frozen=True, slots=True)
class Ping:
    pass


@dataclass(frozen=True, slots=True)
class ClearContext:
    pass


@dataclass(frozen=True, slots=True)
class DirectText:
    text: str


@dataclass(frozen=True, slots=True)
class Unrecognized:
    raw: str


InboundFrame = BinaryFrame | TextFrame | CloseFrame
TextCommand = Ping | ClearContext | DirectText | Unrecognized

__all__ = [
    "BinaryFrame",
    "ClearContext",
    "CloseFrame",
    "DirectText",
    "InboundFrame",
    "Ping",
    "TextCommand",
    "TextFrame",
    "Unrecognized",
]
