"""Application service layer: intent dispatch and fulfillment rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from assistant_fulfillment.core.ports import ProfileVerifierPort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .intent_router import IntentRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to the API layer."""

    intent_router: Optional["IntentRouter"] = None
    profile_verifier: Optional[ProfileVerifierPort] = None


def build_default_services(
    *,
    profile_verifier: Optional[ProfileVerifierPort] = None,
) -> ServiceContainer:
    """Return a service container with every intent handler registered."""

    from .intent_router import build_default_router  # pylint: disable=import-outside-toplevel

    return ServiceContainer(
        intent_router=build_default_router(),
        profile_verifier=profile_verifier,
    )


__all__ = ["ServiceContainer", "build_default_services"]
