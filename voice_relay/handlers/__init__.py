"""WebSocket handlers and per-connection session logic."""
