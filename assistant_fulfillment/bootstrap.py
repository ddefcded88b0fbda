"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from assistant_fulfillment.adapters.google_auth import GoogleIdTokenVerifier
from assistant_fulfillment.core.config import config
from assistant_fulfillment.services import ServiceContainer, build_default_services


def build_default_service_container() -> ServiceContainer:
    """Return the default container; token verification needs ``ACTIONS_CLIENT_ID``."""

    verifier = None
    if config.ACTIONS_CLIENT_ID:
        verifier = GoogleIdTokenVerifier(config.ACTIONS_CLIENT_ID)
    return build_default_services(profile_verifier=verifier)


__all__ = ["build_default_service_container"]
