"""Runtime dependency construction (remote assistant client + admission control)."""

from __future__ import annotations

import logging

import httpx

from voice_relay.state import RuntimeDeps
from voice_relay.audio.wav import WavFramer
from voice_relay.clients.groq import GroqClient
from voice_relay.state.settings import AppSettings
from voice_relay.handlers.connections import ConnectionManager

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    if not settings.model.api_key:
        logger.warning("GROQ_API_KEY is not set; transcription and completion requests will fail")

    http_client = httpx.AsyncClient(timeout=settings.model.request_timeout_s)
    assistant = GroqClient(
        http_client=http_client,
        api_key=settings.model.api_key,
        base_url=settings.model.api_base_url,
        stt_model=settings.model.stt_model,
        stt_language=settings.model.stt_language,
        chat_model=settings.model.chat_model,
    )
    framer = WavFramer(
        sample_rate_hz=settings.audio.sample_rate_hz,
        channels=settings.audio.channels,
        sample_width_bytes=settings.audio.sample_width_bytes,
    )
    connections = ConnectionManager(max_connections=settings.limits.max_concurrent_connections)

    logger.info(
        "runtime: stt=%s chat=%s cooldown=%ss history=%s window=%s",
        settings.model.stt_model,
        settings.model.chat_model,
        settings.limits.request_cooldown_s,
        settings.history.max_turns,
        settings.history.context_turns,
    )
    return RuntimeDeps(
        connections=connections,
        assistant=assistant,
        framer=framer,
        settings=settings,
        _http_client=http_client,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
