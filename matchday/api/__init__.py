"""REST and WebSocket API."""
