"""Core exception types shared across layers."""


class ResponseCompositionError(ValueError):
    """Raised when a handler returns a fragment sequence the surface cannot render."""


class ProfileVerificationError(Exception):
    """Raised when a sign-in ID token cannot be verified."""


__all__ = [
    "ProfileVerificationError",
    "ResponseCompositionError",
]
