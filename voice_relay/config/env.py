"""Helpers for reading typed values from the environment."""

from __future__ import annotations

import os

DISABLED_VALUES = {"0", "none", "null", "disabled", "disable", "off", "false"}


def get_str(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


def get_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return float(default)
    try:
        return float(raw)
    except Exception:
        return float(default)


def get_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except Exception:
        return int(default)


def get_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return bool(default)
    if raw in DISABLED_VALUES:
        return False
    return raw in {"1", "true", "yes", "y", "on"}


__all__ = ["DISABLED_VALUES", "get_bool", "get_float", "get_int", "get_str"]
