"""HTTP API — FastAPI app, context manifest, and narrative generation."""
