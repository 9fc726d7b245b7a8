"""WebSocket transport helpers (parsing, sending, connection orchestration)."""
