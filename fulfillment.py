"""Top-level ASGI entrypoint (``uvicorn fulfillment:app``)."""

from assistant_fulfillment.api_factory import create_app

app = create_app()

__all__ = ["app", "create_app"]
