"""Voice assistant relay: WebSocket audio in, assistant text out."""
