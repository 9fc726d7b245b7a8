"""Wrap raw PCM captured by the client into a WAV container."""

from __future__ import annotations

import io
import wave
from dataclasses import dataclass

from voice_relay.errors import EncodingError


@dataclass(frozen=True, slots=True)
class WavFramer:
    sample_rate_hz: int = 16000
    channels: int = 1
    sample_width_bytes: int = 2

    @property
    def frame_bytes(self) -> int:
        return self.channels * self.sample_width_bytes

    def wrap(self, raw: bytes) -> bytes:
        if not raw:
            raise EncodingError("audio is empty")
        if len(raw) % self.frame_bytes:
            raise EncodingError(
                f"audio length {len(raw)} is not a multiple of the {self.frame_bytes}-byte frame size"
            )

        buf = io.BytesIO()
        try:
            with wave.open(buf, "wb") as wav:
                wav.setnchannels(self.channels)
                wav.setsampwidth(self.sample_width_bytes)
                wav.setframerate(self.sample_rate_hz)
                wav.writeframes(raw)
        except wave.Error as exc:
            raise EncodingError(f"wav encoding failed: {exc}") from exc
        return buf.getvalue()


__all__ = ["WavFramer"]
