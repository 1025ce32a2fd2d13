"""Token header and claims models."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ES256 = "ES256"


class SignatureFormat(StrEnum):
    """Byte encoding of the ECDSA signature segment."""

    DER = "der"  # ASN.1 ECDSA-Sig-Value, as emitted by SHA256withECDSA signers
    JOSE = "jose"  # raw r || s, 64 bytes for P-256


class TokenHeader(BaseModel):
    """JOSE header naming the signing algorithm and key."""

    model_config = ConfigDict(frozen=True)

    alg: Literal["ES256"] = ES256
    kid: str = Field(min_length=1)


class TokenClaims(BaseModel):
    """Claims asserting issuer identity and issuance time."""

    model_config = ConfigDict(frozen=True)

    iss: str = Field(min_length=1)
    iat: int  # whole seconds since the epoch
