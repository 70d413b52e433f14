"""Infrastructure layer: persistence, crypto adapters and the HTTP API."""
