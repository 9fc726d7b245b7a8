"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    import httpx

    from voice_relay.audio.wav import WavFramer
    from voice_relay.clients.groq import GroqClient
    from voice_relay.state.settings import AppSettings
    from voice_relay.handlers.connections import ConnectionManager


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionManager
    assistant: GroqClient
    framer: WavFramer
    settings: AppSettings
    _http_client: httpx.AsyncClient

    async def shutdown(self) -> None:
        try:
            await self._http_client.aclose()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
