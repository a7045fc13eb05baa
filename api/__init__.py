"""FastAPI service for GLYERAL."""
