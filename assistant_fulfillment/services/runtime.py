"""Process-wide registry for the active service container.

The FastAPI app registers its container at creation time so dependencies that
run outside a request (startup hooks, the ``/intents`` listing) resolve the
same router and profile verifier the webhook uses. Tests swap in their own
container through :func:`set_services`.
"""

from __future__ import annotations

from typing import Optional

from . import ServiceContainer

_active: dict[str, Optional[ServiceContainer]] = {"services": None}


def set_services(container: ServiceContainer) -> None:
    """Register ``container`` as the active service container."""
    _active["services"] = container


def get_services() -> ServiceContainer:
    """Return the active container, raising when none is registered."""
    container = _active["services"]
    if container is None:
        raise RuntimeError("Service container has not been configured.")
    return container


def clear_services() -> None:
    """Forget the active container."""
    _active["services"] = None


__all__ = ["set_services", "get_services", "clear_services"]
