"""ES256 signing adapter over ``cryptography``."""

from __future__ import annotations

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from pushtoken.errors import (
    ConfigurationError,
    InvalidKeyError,
    SigningError,
    UnsupportedAlgorithmError,
)
from pushtoken.models.token import SignatureFormat

P256_COORDINATE_BYTES = 32


def _es256_supported(algorithm: ec.ECDSA) -> bool:
    return default_backend().elliptic_curve_signature_algorithm_supported(
        algorithm, ec.SECP256R1()
    )


def der_to_jose(signature: bytes) -> bytes:
    """Convert a DER ECDSA signature to the fixed-width ``r || s`` form."""
    r, s = decode_dss_signature(signature)
    return r.to_bytes(P256_COORDINATE_BYTES, "big") + s.to_bytes(P256_COORDINATE_BYTES, "big")


class TokenSigner:
    """ECDSA P-256 / SHA-256 signer bound to a single private key."""

    def __init__(
        self,
        private_key: ec.EllipticCurvePrivateKey,
        *,
        signature_format: SignatureFormat | str = SignatureFormat.DER,
        deterministic: bool = False,
    ) -> None:
        if not isinstance(private_key, ec.EllipticCurvePrivateKey):
            raise InvalidKeyError(
                f"ES256 requires an elliptic-curve private key, got {type(private_key).__name__}"
            )
        if not isinstance(private_key.curve, ec.SECP256R1):
            raise InvalidKeyError(
                f"ES256 requires a P-256 (secp256r1) key, got curve {private_key.curve.name}"
            )
        try:
            self.signature_format = SignatureFormat(signature_format)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown signature format: {signature_format!r}") from exc

        try:
            if deterministic:
                algorithm = ec.ECDSA(hashes.SHA256(), deterministic_signing=True)
            else:
                algorithm = ec.ECDSA(hashes.SHA256())
            supported = _es256_supported(algorithm)
        except UnsupportedAlgorithm as exc:
            raise UnsupportedAlgorithmError(f"ES256 signing is unavailable: {exc}") from exc
        if not supported:
            raise UnsupportedAlgorithmError("ES256 signing is unavailable in this runtime")

        self._private_key = private_key
        self._algorithm = algorithm
        self.deterministic = deterministic

    def sign(self, data: bytes) -> bytes:
        """Sign ``data`` and return the signature in the configured format."""
        try:
            signature = self._private_key.sign(data, self._algorithm)
        except (ValueError, UnsupportedAlgorithm, InternalError) as exc:
            raise SigningError(f"Failed to sign token: {exc}") from exc
        if self.signature_format is SignatureFormat.DER:
            return signature
        return der_to_jose(signature)
