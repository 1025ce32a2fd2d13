"""Pydantic data models for pushtoken."""

from pushtoken.models.config import SupplierConfig
from pushtoken.models.token import ES256, SignatureFormat, TokenClaims, TokenHeader

__all__ = [
    "ES256",
    "SignatureFormat",
    "SupplierConfig",
    "TokenClaims",
    "TokenHeader",
]
