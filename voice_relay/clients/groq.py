"""OpenAI-compatible speech-to-text and chat-completion client (Groq by default).

Stateless apart from the shared `httpx.AsyncClient`, so one instance serves every
connection. There is no retry: any failure surfaces as a single
`TranscriptionError` or `CompletionError`.
"""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Sequence

import httpx
import orjson

from voice_relay.state.session import ConversationTurn
from voice_relay.errors import CompletionError, TranscriptionError

logger = logging.getLogger(__name__)

_TRANSCRIPTIONS_PATH = "/audio/transcriptions"
_CHAT_COMPLETIONS_PATH = "/chat/completions"
_AUDIO_FILENAME = "audio.wav"
_AUDIO_MIME = "audio/wav"


def build_chat_messages(
    system_prompt: str,
    history_window: Sequence[ConversationTurn],
    current_text: str,
) -> list[dict[str, str]]:
    messages = [{"role": "system", "content": system_prompt}]
    for turn in history_window:
        messages.append({"role": "user", "content": turn.user})
        messages.append({"role": "assistant", "content": turn.assistant})
    messages.append({"role": "user", "content": current_text})
    return messages


def _error_body(response: httpx.Response) -> str:
    text = response.text.strip()
    return text or f"HTTP {response.status_code}"


class GroqClient:
    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        api_key: str,
        base_url: str,
        stt_model: str,
        chat_model: str,
        stt_language: str = "",
    ) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._headers = {"Authorization": f"Bearer {api_key}"}
        self._stt_model = stt_model
        self._stt_language = stt_language
        self._chat_model = chat_model

    async def transcribe(self, audio: bytes) -> str:
        """Transcribe a WAV payload and return the recognized text."""
        data = {"model": self._stt_model}
        if self._stt_language:
            data["language"] = self._stt_language
        files = {"file": (_AUDIO_FILENAME, audio, _AUDIO_MIME)}

        try:
            response = await self._http.post(
                f"{self._base_url}{_TRANSCRIPTIONS_PATH}",
                headers=self._headers,
                data=data,
                files=files,
            )
        except httpx.HTTPError as exc:
            raise TranscriptionError(f"transcription request failed: {exc}") from exc

        if not response.is_success:
            raise TranscriptionError(f"Groq transcription error: {_error_body(response)}")

        body = self._decode(response, TranscriptionError)
        text = body.get("text")
        if not isinstance(text, str):
            raise TranscriptionError("transcription response has no text")
        return text

    async def complete(
        self,
        system_prompt: str,
        history_window: Sequence[ConversationTurn],
        current_text: str,
    ) -> str:
        """Ask the chat model for a reply to `current_text` given prior turns."""
        payload = {
            "model": self._chat_model,
            "messages": build_chat_messages(system_prompt, history_window, current_text),
        }

        try:
            response = await self._http.post(
                f"{self._base_url}{_CHAT_COMPLETIONS_PATH}",
                headers={**self._headers, "Content-Type": "application/json"},
                content=orjson.dumps(payload),
            )
        except httpx.HTTPError as exc:
            raise CompletionError(f"completion request failed: {exc}") from exc

        if not response.is_success:
            raise CompletionError(f"Groq API error: {_error_body(response)}")

        body = self._decode(response, CompletionError)
        choices = body.get("choices")
        if not isinstance(choices, list) or not choices:
            raise CompletionError("No response from Groq")
        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise CompletionError("No response from Groq")
        return content

    @staticmethod
    def _decode(
        response: httpx.Response,
        error_cls: type[TranscriptionError] | type[CompletionError],
    ) -> dict[str, Any]:
        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError as exc:
            raise error_cls(f"invalid JSON from upstream: {exc}") from exc
        if not isinstance(body, dict):
            raise error_cls("upstream response must be a JSON object")
        return body


__all__ = ["GroqClient", "build_chat_messages"]
