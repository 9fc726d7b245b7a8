"""Remote model configuration (env-resolved constants only)."""

from __future__ import annotations

from .env import get_str, get_float

GROQ_API_BASE_URL: str = get_str("GROQ_API_BASE_URL", "https://api.groq.com/openai/v1").rstrip("/")

STT_MODEL: str = get_str("STT_MODEL", "whisper-large-v3")

# Empty means let the transcription model detect the language.
STT_LANGUAGE: str = get_str("STT_LANGUAGE", "")

CHAT_MODEL: str = get_str("CHAT_MODEL", "openai/gpt-oss-120b")

DEFAULT_SYSTEM_PROMPT = (
    "You are a voice assistant. Answer briefly, in no more than 4-5 sentences. "
    "Reply in the language the user speaks. "
    "Remember the context of previous messages in the conversation and take the history into account."
)

SYSTEM_PROMPT: str = get_str("SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT)

MODEL_REQUEST_TIMEOUT_S: float = max(1.0, get_float("MODEL_REQUEST_TIMEOUT_S", 60.0))

__all__ = [
    "CHAT_MODEL",
    "DEFAULT_SYSTEM_PROMPT",
    "GROQ_API_BASE_URL",
    "MODEL_REQUEST_TIMEOUT_S",
    "STT_LANGUAGE",
    "STT_MODEL",
    "SYSTEM_PROMPT",
]
