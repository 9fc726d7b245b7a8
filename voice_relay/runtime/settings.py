"""Load runtime settings.

Configuration values are resolved from the environment in `voice_relay/config/*`
and exposed here as structured dataclasses for the rest of the server.
"""

from __future__ import annotations

from voice_relay.config.secrets import get_groq_api_key
from voice_relay.config.history import HISTORY_MAX_TURNS, HISTORY_CONTEXT_TURNS
from voice_relay.config.websocket import MARKER_SPAN_CHUNKS, END_OF_UTTERANCE_MARKER
from voice_relay.config.audio import (
    AUDIO_CHANNELS,
    AUDIO_SAMPLE_RATE_HZ,
    AUDIO_SAMPLE_WIDTH_BYTES,
)
from voice_relay.config.limits import (
    REQUEST_COOLDOWN_S,
    MAX_UTTERANCE_AUDIO_BYTES,
    MAX_CONCURRENT_CONNECTIONS,
)
from voice_relay.config.models import (
    STT_MODEL,
    CHAT_MODEL,
    STT_LANGUAGE,
    SYSTEM_PROMPT,
    GROQ_API_BASE_URL,
    MODEL_REQUEST_TIMEOUT_S,
)
from voice_relay.state.settings import (
    AppSettings,
    AudioSettings,
    ModelSettings,
    LimitsSettings,
    HistorySettings,
    ProtocolSettings,
)


def load_settings() -> AppSettings:
    return AppSettings(
        limits=LimitsSettings(
            max_concurrent_connections=MAX_CONCURRENT_CONNECTIONS,
            request_cooldown_s=REQUEST_COOLDOWN_S,
            max_utterance_audio_bytes=MAX_UTTERANCE_AUDIO_BYTES,
        ),
        history=HistorySettings(
            max_turns=HISTORY_MAX_TURNS,
            context_turns=HISTORY_CONTEXT_TURNS,
        ),
        audio=AudioSettings(
            sample_rate_hz=AUDIO_SAMPLE_RATE_HZ,
            channels=AUDIO_CHANNELS,
            sample_width_bytes=AUDIO_SAMPLE_WIDTH_BYTES,
        ),
        model=ModelSettings(
            api_key=get_groq_api_key(),
            api_base_url=GROQ_API_BASE_URL,
            stt_model=STT_MODEL,
            stt_language=STT_LANGUAGE,
            chat_model=CHAT_MODEL,
            system_prompt=SYSTEM_PROMPT,
            request_timeout_s=MODEL_REQUEST_TIMEOUT_S,
        ),
        protocol=ProtocolSettings(
            end_of_utterance_marker=END_OF_UTTERANCE_MARKER,
            marker_span_chunks=MARKER_SPAN_CHUNKS,
        ),
    )


__all__ = ["load_settings"]
