"""Error taxonomy for token supply."""

from __future__ import annotations


class PushTokenError(Exception):
    """Base class for all pushtoken errors."""


class ConfigurationError(PushTokenError, ValueError):
    """Raised when required supplier inputs are missing or invalid."""


class UnsupportedAlgorithmError(PushTokenError):
    """Raised when ES256 signing is unavailable in the runtime."""


class InvalidKeyError(PushTokenError, ValueError):
    """Raised when a private key cannot be used for ES256 signing."""


class SigningError(PushTokenError, RuntimeError):
    """Raised when a token signature cannot be produced."""
