"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    request_cooldown_s: float
    max_utterance_audio_bytes: int


@dataclass(frozen=True, slots=True)
class HistorySettings:
    max_turns: int
    context_turns: int


@dataclass(frozen=True, slots=True)
class AudioSettings:
    sample_rate_hz: int
    channels: int
    sample_width_bytes: int


@dataclass(frozen=True, slots=True)
class ModelSettings:
    api_key: str
    api_base_url: str
    stt_model: str
    stt_language: str
    chat_model: str
    system_prompt: str
    request_timeout_s: float


@dataclass(frozen=True, slots=True)
class ProtocolSettings:
    end_of_utterance_marker: bytes
    marker_span_chunks: bool


@dataclass(frozen=True, slots=True)
class SessionSettings:
    """Everything one Session Engine needs, passed in at construction."""

    request_cooldown_s: float = 5.0
    history_max_turns: int = 10
    history_context_turns: int = 5
    end_of_utterance_marker: bytes = b"END_STREAM"
    marker_span_chunks: bool = False
    max_utterance_audio_bytes: int = 0
    system_prompt: str = ""


@dataclass(frozen=True, slots=True)
class AppSettings:
    limits: LimitsSettings
    history: HistorySettings
    audio: AudioSettings
    model: ModelSettings
    protocol: ProtocolSettings

    def session(self) -> SessionSettings:
        return SessionSettings(
            request_cooldown_s=self.limits.request_cooldown_s,
            history_max_turns=self.history.max_turns,
            history_context_turns=self.history.context_turns,
            end_of_utterance_marker=self.protocol.end_of_utterance_marker,
            marker_span_chunks=self.protocol.marker_span_chunks,
            max_utterance_audio_bytes=self.limits.max_utterance_audio_bytes,
            system_prompt=self.model.system_prompt,
        )


__all__ = [
    "AppSettings",
    "AudioSettings",
    "HistorySettings",
    "LimitsSettings",
    "ModelSettings",
    "ProtocolSettings",
    "SessionSettings",
]
