"""Per-connection session engine.

One engine drives one WebSocket from a single sequential loop:

    IDLE --binary--> ACCUMULATING_AUDIO --marker--> AWAITING_COMPLETION --> IDLE
    IDLE/ACCUMULATING_AUDIO --"text:..."--> AWAITING_COMPLETION --> previous phase

Control commands ("ping", "clear_context") are answered in any phase without
touching the rate gate. Every reply is sent before the next frame is read and a
failed send ends the session.
"""

from __future__ import annotations

import time
import logging
from typing import Any
from collections.abc import Callable

from voice_relay.errors import UpstreamError
from voice_relay.state.settings import SessionSettings
from voice_relay.state.admission import Busy, Cooldown
from voice_relay.state.session import SessionPhase, ConversationTurn
from voice_relay.state.frames import (
    Ping,
    TextFrame,
    CloseFrame,
    DirectText,
    BinaryFrame,
    TextCommand,
    ClearContext,
    InboundFrame,
)
from voice_relay.config.messages import (
    MSG_BUSY,
    MSG_PONG,
    MSG_NO_AUDIO,
    MSG_CONTEXT_CLEARED,
    MSG_UTTERANCE_TOO_LONG,
    format_error,
    format_cooldown,
)
from voice_relay.handlers.websocket.errors import safe_send_text
from voice_relay.handlers.websocket.parser import classify_message, parse_text_command

from .rate_gate import RateGate
from .framing import UtteranceBuffer
from .history import ConversationContext

logger = logging.getLogger(__name__)

TimeFn = Callable[[], float]


class SessionEngine:
    def __init__(
        self,
        ws: Any,
        *,
        settings: SessionSettings,
        assistant: Any,
        framer: Any,
        session_id: str = "unknown",
        now_fn: TimeFn | None = None,
    ) -> None:
        self._ws = ws
        self._settings = settings
        self._assistant = assistant
        self._framer = framer
        self._now = now_fn or time.monotonic
        self.session_id = session_id

        self.context = ConversationContext(settings.history_max_turns)
        self.rate_gate = RateGate(cooldown_s=settings.request_cooldown_s)
        self.utterance = UtteranceBuffer(
            marker=settings.end_of_utterance_marker,
            span_chunks=settings.marker_span_chunks,
            max_bytes=settings.max_utterance_audio_bytes,
        )
        self.phase = SessionPhase.IDLE
        self._open = True

    @property
    def is_busy(self) -> bool:
        return self.phase is SessionPhase.AWAITING_COMPLETION

    @property
    def is_open(self) -> bool:
        return self._open

    async def run(self) -> None:
        while self._open:
            frame = await self._receive()
            if frame is None:
                continue
            if isinstance(frame, CloseFrame):
                logger.info("session %s: client disconnected", self.session_id)
                break
            if isinstance(frame, BinaryFrame):
                await self._on_audio(frame.data)
            elif isinstance(frame, TextFrame):
                await self._on_command(parse_text_command(frame.text))
        self._open = False

    async def _receive(self) -> InboundFrame | None:
        try:
            message = await self._ws.receive()
        except Exception as exc:
            logger.info("session %s: receive failed: %s", self.session_id, exc)
            return CloseFrame()
        return classify_message(message)

    async def _send(self, text: str) -> bool:
        if await safe_send_text(self._ws, text):
            return True
        logger.info("session %s: send failed; closing session", self.session_id)
        self._open = False
        return False

    async def _on_command(self, command: TextCommand) -> None:
        if isinstance(command, Ping):
            await self._send(MSG_PONG)
        elif isinstance(command, ClearContext):
            self.context.clear()
            logger.info("session %s: conversation context cleared", self.session_id)
            await self._send(MSG_CONTEXT_CLEARED)
        elif isinstance(command, DirectText):
            await self._run_turn(text=command.text)
        else:
            logger.debug("session %s: ignoring text frame %r", self.session_id, command.raw[:64])

    async def _on_audio(self, chunk: bytes) -> None:
        if self.phase is SessionPhase.IDLE:
            self.phase = SessionPhase.ACCUMULATING_AUDIO

        was_overflowed = self.utterance.overflowed
        audio = self.utterance.feed(chunk)
        if self.utterance.overflowed and not was_overflowed:
            logger.warning("session %s: utterance exceeded %s bytes", self.session_id, self.utterance.max_bytes)
            if not await self._send(MSG_UTTERANCE_TOO_LONG):
                return
        if audio is None:
            return

        overflowed = self.utterance.overflowed
        recording = self.utterance.recording
        self.utterance.reset()
        self.phase = SessionPhase.IDLE
        if overflowed:
            return
        if not audio:
            if recording:
                await self._send(MSG_NO_AUDIO)
            return

        logger.info("session %s: received %s bytes of audio", self.session_id, len(audio))
        await self._run_turn(audio=audio)

    async def _run_turn(self, *, audio: bytes | None = None, text: str | None = None) -> None:
        decision = self.rate_gate.try_admit(self._now())
        if isinstance(decision, Busy):
            logger.info("session %s: request rejected, previous one still in flight", self.session_id)
            await self._send(MSG_BUSY)
            return
        if isinstance(decision, Cooldown):
            logger.info("session %s: request deferred, cooldown %ss left", self.session_id, decision.remaining_s)
            await self._send(format_cooldown(decision.remaining_s))
            return

        self.rate_gate.mark_in_flight()
        resume_phase = self.phase
        self.phase = SessionPhase.AWAITING_COMPLETION
        try:
            reply = await self._complete_turn(audio=audio, text=text)
        except UpstreamError as exc:
            logger.warning("session %s: turn failed: %s", self.session_id, exc)
            reply = format_error(str(exc))
        finally:
            self.rate_gate.release(self._now())
            self.phase = resume_phase

        await self._send(reply)

    async def _complete_turn(self, *, audio: bytes | None, text: str | None) -> str:
        if audio is not None:
            wav = self._framer.wrap(audio)
            text = await self._assistant.transcribe(wav)
            logger.info("session %s: transcribed: %s", self.session_id, text)
        user_text = text or ""

        window = self.context.window(self._settings.history_context_turns)
        answer = await self._assistant.complete(self._settings.system_prompt, window, user_text)
        self.context.append(ConversationTurn(user=user_text, assistant=answer))
        logger.info(
            "session %s: reply of %s chars, history at %s turns",
            self.session_id,
            len(answer),
            len(self.context),
        )
        return answer


__all__ = ["SessionEngine"]
