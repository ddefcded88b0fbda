"""google-auth backed verification of Actions on Google sign-in tokens."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import id_token as google_id_token

from assistant_fulfillment.core.exceptions import ProfileVerificationError
from assistant_fulfillment.core.logging import get_logger

logger = get_logger(__name__)

TokenVerifier = Callable[..., Mapping[str, Any]]


class GoogleIdTokenVerifier:
    """Verify ID tokens against Google's certificates for one client id.

    The transport request object is created once and reused so certificate
    fetches share a session across requests.
    """

    def __init__(
        self,
        client_id: str,
        *,
        transport: Optional[GoogleAuthRequest] = None,
        verifier: TokenVerifier = google_id_token.verify_oauth2_token,
    ) -> None:
        if not client_id:
            raise ValueError("client_id is required to verify sign-in tokens")
        self._client_id = client_id
        self._transport = transport or GoogleAuthRequest()
        self._verifier = verifier

    @property
    def client_id(self) -> str:
        return self._client_id

    def verify(self, id_token: str) -> Mapping[str, Any]:
        try:
            claims = self._verifier(id_token, self._transport, audience=self._client_id)
        except (ValueError, GoogleAuthError) as exc:
            logger.warning("sign-in token verification failed: %s", exc)
            raise ProfileVerificationError(str(exc)) from exc
        logger.debug("verified sign-in token for audience %s", claims.get("aud"))
        return dict(claims)


__all__ = ["GoogleIdTokenVerifier"]
