#!/usr/bin/env python3
"""Manual client for a running relay: stream a WAV file or send typed text."""

from __future__ import annotations

import asyncio
import logging
import argparse
import wave

import websockets

from voice_relay.config.websocket import WS_ENDPOINT_PATH, WS_CMD_TEXT_PREFIX, WS_CMD_CLEAR_CONTEXT

logger = logging.getLogger(__name__)

# 100ms of 16kHz mono PCM16 per frame.
_CHUNK_BYTES = 3200


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Voice relay WebSocket client")
    parser.add_argument("--server", default="localhost:3000", help="host:port or ws://host:port")
    parser.add_argument("--marker", default="END_STREAM", help="End-of-utterance marker")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--file", type=str, help="16kHz mono PCM16 WAV file to stream")
    group.add_argument("--text", type=str, help="Send a typed utterance instead of audio")
    group.add_argument("--clear", action="store_true", help="Clear the conversation context")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def ws_url(server: str) -> str:
    server = server.strip().rstrip("/")
    if server.startswith(("ws://", "wss://")):
        return server if server.endswith(WS_ENDPOINT_PATH) else f"{server}{WS_ENDPOINT_PATH}"
    return f"ws://{server}{WS_ENDPOINT_PATH}"


def read_pcm16_mono_16k(path: str) -> bytes:
    with wave.open(path, "rb") as wf:
        if (wf.getnchannels(), wf.getsampwidth(), wf.getframerate()) != (1, 2, 16000):
            raise ValueError(
                f"{path}: expected 16kHz mono PCM16, got {wf.getframerate()}Hz "
                f"{wf.getnchannels()}ch {wf.getsampwidth() * 8}-bit"
            )
        return wf.readframes(wf.getnframes())


async def run(args: argparse.Namespace) -> None:
    url = ws_url(args.server)
    logger.debug("connecting to %s", url)
    async with websockets.connect(url, max_size=None) as ws:
        if args.clear:
            await ws.send(WS_CMD_CLEAR_CONTEXT)
        elif args.text is not None:
            await ws.send(f"{WS_CMD_TEXT_PREFIX}{args.text}")
        else:
            pcm = read_pcm16_mono_16k(args.file)
            for offset in range(0, len(pcm), _CHUNK_BYTES):
                await ws.send(pcm[offset : offset + _CHUNK_BYTES])
            await ws.send(args.marker.encode("ascii"))
            logger.debug("sent %s bytes of audio", len(pcm))
        print(await ws.recv())


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s: %(message)s")
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
