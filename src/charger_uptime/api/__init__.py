"""HTTP API layer — FastAPI server for uptime calculation."""
