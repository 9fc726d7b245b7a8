"""Secrets configuration."""

from __future__ import annotations

import os


def get_groq_api_key() -> str:
    return (os.getenv("GROQ_API_KEY") or "").strip()


__all__ = ["get_groq_api_key"]
