"""Accumulate one turn's binary audio until the end-of-utterance marker."""

from __future__ import annotations


class UtteranceBuffer:
    """Buffer raw audio chunks and detect the inline end marker.

    By default the marker is only looked for inside each chunk, so a marker split
    across two chunks goes unnoticed. With `span_chunks=True` the last
    `len(marker) - 1` bytes of the stream are carried into the next scan.

    Once more than `max_bytes` have been buffered (0 disables the cap) the turn
    is marked overflowed and audio is dropped until the marker arrives.
    """

    def __init__(self, *, marker: bytes, span_chunks: bool = False, max_bytes: int = 0) -> None:
        if not marker:
            raise ValueError("marker must be non-empty")
        self.marker = bytes(marker)
        self.span_chunks = bool(span_chunks)
        self.max_bytes = max(0, int(max_bytes))
        self._buf = bytearray()
        self._tail = b""
        self._recording = False
        self._overflowed = False

    @property
    def recording(self) -> bool:
        return self._recording

    @property
    def overflowed(self) -> bool:
        return self._overflowed

    def __len__(self) -> int:
        return len(self._buf)

    def feed(self, chunk: bytes) -> bytes | None:
        """Add a chunk; return the finished utterance when the marker is seen.

        Bytes after the marker in the same chunk are discarded.
        """
        self._recording = True
        pos = self._find_marker(chunk)
        if pos is None:
            self._append(chunk)
            return None

        if pos < 0:
            # The marker started in the previous chunk, which is already buffered.
            if not self._overflowed:
                del self._buf[len(self._buf) + pos :]
        else:
            self._append(chunk[:pos])
        return bytes(self._buf)

    def reset(self) -> None:
        self._buf.clear()
        self._tail = b""
        self._recording = False
        self._overflowed = False

    def _find_marker(self, chunk: bytes) -> int | None:
        """Return the marker offset relative to `chunk` (negative if it began earlier)."""
        if not self.span_chunks:
            pos = chunk.find(self.marker)
            return pos if pos >= 0 else None

        carried = self._tail
        window = carried + chunk
        keep = len(self.marker) - 1
        self._tail = window[-keep:] if keep else b""
        pos = window.find(self.marker)
        if pos < 0:
            return None
        return pos - len(carried)

    def _append(self, data: bytes) -> None:
        if self._overflowed or not data:
            return
        if self.max_bytes and len(self._buf) + len(data) > self.max_bytes:
            self._overflowed = True
            self._buf.clear()
            return
        self._buf.extend(data)


__all__ = ["UtteranceBuffer"]
