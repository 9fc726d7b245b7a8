"""Main FastAPI server for the voice assistant relay."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware

from voice_relay.config.websocket import WS_ENDPOINT_PATH
from voice_relay.runtime.logging import configure_logging
from voice_relay.runtime.dependencies import build_runtime_deps
from voice_relay.handlers.websocket.manager import handle_websocket_connection
from voice_relay.config.server import SERVER_HOST, SERVER_PORT, STATUS_MESSAGE

logger = logging.getLogger(__name__)

configure_logging()


@asynccontextmanager
async def _lifespan(app: FastAPI):
    runtime_deps = build_runtime_deps()
    app.state.runtime_deps = runtime_deps
    logger.info("runtime: ready")
    try:
        yield
    finally:
        deps = getattr(app.state, "runtime_deps", None)
        if deps is not None:
            await deps.shutdown()


app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/status")
async def api_status() -> dict[str, str]:
    return {"status": "ok", "message": STATUS_MESSAGE}


@app.websocket(WS_ENDPOINT_PATH)
async def websocket_endpoint(websocket: WebSocket) -> None:
    runtime_deps = getattr(app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    await handle_websocket_connection(websocket, runtime_deps)


def run() -> None:
    logger.info("listening on http://%s:%s", SERVER_HOST, SERVER_PORT)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    run()
