from __future__ import annotations

import httpx
import orjson
import pytest

from voice_relay.state.session import ConversationTurn
from voice_relay.errors import CompletionError, TranscriptionError
from voice_relay.clients.groq import GroqClient, build_chat_messages

BASE_URL = "https://api.example.test/openai/v1"


def _client(handler, *, language: str = "") -> GroqClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GroqClient(
        http_client=http,
        api_key="test-key",
        base_url=BASE_URL,
        stt_model="whisper-large-v3",
        stt_language=language,
        chat_model="chat-model",
    )


def test_build_chat_messages_orders_history_oldest_first() -> None:
    window = [ConversationTurn("q1", "a1"), ConversationTurn("q2", "a2")]
    assert build_chat_messages("sys", window, "now") == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "q1"},
        {"role": "assistant", "content": "a1"},
        {"role": "user", "content": "q2"},
        {"role": "assistant", "content": "a2"},
        {"role": "user", "content": "now"},
    ]


@pytest.mark.asyncio
async def test_transcribe_posts_multipart_wav() -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("authorization")
        seen["content_type"] = request.headers.get("content-type", "")
        seen["body"] = request.read()
        return httpx.Response(200, json={"text": "privet"})

    client = _client(handler, language="ru")
    assert await client.transcribe(b"RIFF....WAVE") == "privet"

    assert seen["url"] == f"{BASE_URL}/audio/transcriptions"
    assert seen["auth"] == "Bearer test-key"
    assert str(seen["content_type"]).startswith("multipart/form-data")
    body = seen["body"]
    assert isinstance(body, bytes)
    assert b'name="model"' in body and b"whisper-large-v3" in body
    assert b'name="language"' in body
    assert b'filename="audio.wav"' in body
    assert b"RIFF....WAVE" in body


@pytest.mark.asyncio
async def test_transcribe_omits_language_when_unset() -> None:
    bodies: list[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(request.read())
        return httpx.Response(200, json={"text": ""})

    assert await _client(handler).transcribe(b"wav") == ""
    assert b'name="language"' not in bodies[0]


@pytest.mark.asyncio
async def test_transcribe_wraps_http_status_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text="invalid api key")

    with pytest.raises(TranscriptionError, match="invalid api key"):
        await _client(handler).transcribe(b"wav")


@pytest.mark.asyncio
async def test_transcribe_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(TranscriptionError, match="unreachable"):
        await _client(handler).transcribe(b"wav")


@pytest.mark.asyncio
async def test_complete_sends_system_history_and_current_text() -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["payload"] = orjson.loads(request.read())
        return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": "hi"}}]})

    reply = await _client(handler).complete("sys", [ConversationTurn("q1", "a1")], "hello")

    assert reply == "hi"
    assert seen["url"] == f"{BASE_URL}/chat/completions"
    assert seen["payload"] == {
        "model": "chat-model",
        "messages": [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "q1"},
            {"role": "assistant", "content": "a1"},
            {"role": "user", "content": "hello"},
        ],
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="upstream down"),
        httpx.Response(200, json={"choices": []}),
        httpx.Response(200, content=b"not json"),
        httpx.Response(200, json=["unexpected"]),
    ],
)
async def test_complete_failures_raise_completion_error(response: httpx.Response) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    with pytest.raises(CompletionError):
        await _client(handler).complete("sys", [], "hello")
