"""Token signing and supply."""

from pushtoken.core.signing import TokenSigner
from pushtoken.core.supplier import TokenSupplier

__all__ = ["TokenSigner", "TokenSupplier"]
