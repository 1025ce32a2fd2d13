"""Cached ES256 provider authentication token supplier."""

from __future__ import annotations

import logging
import threading

from cryptography.hazmat.primitives.asymmetric import ec

from pushtoken.core.signing import TokenSigner
from pushtoken.errors import ConfigurationError, SigningError
from pushtoken.models.config import SupplierConfig
from pushtoken.models.token import SignatureFormat, TokenClaims, TokenHeader
from pushtoken.utils.base64url import b64url_encode
from pushtoken.utils.canonical import canonical_claims_json, canonical_header_json
from pushtoken.utils.clock import Clock, IssuedAt, epoch_seconds, system_clock

logger = logging.getLogger(__name__)


def _require_identifier(name: str, value: object) -> str:
    if value is None:
        raise ConfigurationError(f"{name} is required")
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(f"{name} must be a non-blank string")
    return value


class TokenSupplier:
    """Generate, cache, and invalidate a signed provider authentication token.

    The token is created lazily on the first ``get_token`` call and returned
    unchanged until a caller hands it back to ``invalidate_token`` (typically
    after the remote service rejects it as expired). The next ``get_token``
    then signs a fresh token stamped with the time of that call.
    """

    def __init__(
        self,
        issuer: str,
        key_id: str,
        private_key: ec.EllipticCurvePrivateKey,
        *,
        clock: Clock | None = None,
        signature_format: SignatureFormat | str = SignatureFormat.DER,
        deterministic: bool = False,
    ) -> None:
        self._issuer = _require_identifier("issuer", issuer)
        self._key_id = _require_identifier("key_id", key_id)
        if private_key is None:
            raise ConfigurationError("private_key is required")

        self._signer = TokenSigner(
            private_key,
            signature_format=signature_format,
            deterministic=deterministic,
        )
        self._header = TokenHeader(kid=self._key_id)
        self._clock = clock or system_clock
        self._token: str | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(
        cls,
        config: SupplierConfig,
        private_key: ec.EllipticCurvePrivateKey,
        *,
        clock: Clock | None = None,
    ) -> TokenSupplier:
        """Build a supplier from a validated ``SupplierConfig``."""
        return cls(
            config.issuer,
            config.key_id,
            private_key,
            clock=clock,
            signature_format=config.signature_format,
            deterministic=config.deterministic,
        )

    @property
    def issuer(self) -> str:
        return self._issuer

    @property
    def key_id(self) -> str:
        return self._key_id

    @property
    def signature_format(self) -> SignatureFormat:
        return self._signer.signature_format

    def get_token(self, issued_at: IssuedAt | None = None) -> str:
        """Return the cached token, generating one if none is cached.

        ``issued_at`` only stamps a newly generated token; it is ignored
        whenever a token is already cached.
        """
        token = self._token
        if token is not None:
            return token

        with self._lock:
            if self._token is None:
                self._token = self._generate(issued_at)
            return self._token

    def invalidate_token(self, candidate: str | None) -> None:
        """Discard the cached token if ``candidate`` is exactly that token."""
        if not isinstance(candidate, str):
            return
        with self._lock:
            if self._token is not None and candidate == self._token:
                self._token = None
                logger.debug("Invalidated token for key %s", self._key_id)
            else:
                logger.debug("Ignored invalidation of a token that is not cached")

    def _resolve_issued_at(self, issued_at: IssuedAt | None) -> int:
        value = self._clock() if issued_at is None else issued_at
        try:
            return epoch_seconds(value)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ConfigurationError(str(exc)) from exc

    def _generate(self, issued_at: IssuedAt | None) -> str:
        claims = TokenClaims(iss=self._issuer, iat=self._resolve_issued_at(issued_at))

        signing_input = (
            b64url_encode(canonical_header_json(self._header).encode("ascii"))
            + "."
            + b64url_encode(canonical_claims_json(claims).encode("ascii"))
        )
        try:
            signature = self._signer.sign(signing_input.encode("ascii"))
        except SigningError:
            logger.warning("Signing failed for key %s; no token cached", self._key_id)
            raise

        logger.debug(
            "Generated token for issuer %s key %s (iat=%d)",
            self._issuer,
            self._key_id,
            claims.iat,
        )
        return f"{signing_input}.{b64url_encode(signature)}"
