"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Any, Mapping, Protocol


class ProfileVerifierPort(Protocol):
    """Port verifying the sign-in ID token sent with the conversation."""

    def verify(self, id_token: str) -> Mapping[str, Any]:
        """Return the token claims or raise ``ProfileVerificationError``."""
        ...


__all__ = ["ProfileVerifierPort"]
