"""pushtoken: cached ES256 provider authentication tokens."""

from pushtoken.core.signing import TokenSigner
from pushtoken.core.supplier import TokenSupplier
from pushtoken.errors import (
    ConfigurationError,
    InvalidKeyError,
    PushTokenError,
    SigningError,
    UnsupportedAlgorithmError,
)
from pushtoken.models import SignatureFormat, SupplierConfig, TokenClaims, TokenHeader
from pushtoken.utils.config import load_supplier_config, supplier_config_from_env

__version__ = "0.9.0"

__all__ = [
    "ConfigurationError",
    "InvalidKeyError",
    "PushTokenError",
    "SignatureFormat",
    "SigningError",
    "SupplierConfig",
    "TokenClaims",
    "TokenHeader",
    "TokenSigner",
    "TokenSupplier",
    "UnsupportedAlgorithmError",
    "__version__",
    "load_supplier_config",
    "supplier_config_from_env",
]
