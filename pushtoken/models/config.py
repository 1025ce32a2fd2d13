"""Supplier configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pushtoken.models.token import SignatureFormat


class SupplierConfig(BaseModel):
    """Static identity and signing options for a token supplier.

    The private key is never part of the configuration; callers load it
    themselves and hand it to ``TokenSupplier.from_config``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    issuer: str = Field(min_length=1, description="Team identifier that owns the signing key")
    key_id: str = Field(min_length=1, description="Identifier of the signing key")
    signature_format: SignatureFormat = SignatureFormat.DER
    deterministic: bool = False

    @field_validator("issuer", "key_id")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value
