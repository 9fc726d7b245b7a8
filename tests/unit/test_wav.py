from __future__ import annotations

import io
import wave

import pytest

from voice_relay.errors import EncodingError
from voice_relay.audio.wav import WavFramer


def test_wrap_writes_header_for_capture_format() -> None:
    raw = b"\x01\x00\x02\x00\x03\x00"
    data = WavFramer(sample_rate_hz=16000, channels=1, sample_width_bytes=2).wrap(raw)

    assert data[:4] == b"RIFF"
    assert data[8:12] == b"WAVE"
    with wave.open(io.BytesIO(data), "rb") as wf:
        assert wf.getnchannels() == 1
        assert wf.getsampwidth() == 2
        assert wf.getframerate() == 16000
        assert wf.getnframes() == 3
        assert wf.readframes(3) == raw


def test_wrap_rejects_empty_audio() -> None:
    with pytest.raises(EncodingError):
        WavFramer().wrap(b"")


def test_wrap_rejects_partial_frames() -> None:
    with pytest.raises(EncodingError, match="frame size"):
        WavFramer().wrap(b"\x01\x02\x03")
