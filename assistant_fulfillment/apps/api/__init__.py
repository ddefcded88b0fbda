"""FastAPI webhook application."""
