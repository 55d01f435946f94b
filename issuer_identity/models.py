# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Verification fragment and issuer identifier models."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from issuer_identity.exceptions import MalformedInputError


# =============================================================================
# Fragment Tags
# =============================================================================

class FragmentCategory(str, Enum):
    DOCUMENT_INTEGRITY = "DOCUMENT_INTEGRITY"
    DOCUMENT_STATUS = "DOCUMENT_STATUS"
    ISSUER_IDENTITY = "ISSUER_IDENTITY"


class FragmentStatus(str, Enum):
    VALID = "VALID"
    INVALID = "INVALID"
    ERROR = "ERROR"
    SKIPPED = "SKIPPED"


class ProofKind(str, Enum):
    """Identity proof methods that populate an ISSUER_IDENTITY fragment."""

    DNS_TXT = "OpenAttestationDnsTxtIdentityProof"
    DNS_DID = "OpenAttestationDnsDidIdentityProof"
    DID = "OpenAttestationDidIdentityProof"


# =============================================================================
# Verification Fragment
# =============================================================================

class FragmentReason(BaseModel):
    """Explanation attached by upstream verifiers to non-valid fragments."""

    model_config = ConfigDict(frozen=True)

    code: int
    codeString: str
    message: str


class VerificationFragment(BaseModel):
    """One result from the upstream verification pipeline.

    Fields accept either their attribute names or the wire names used by
    the verifiers (``type``, ``name``, ``data``). Tags are kept as plain
    strings so fragments from verifiers this package does not know about
    still load.

    Attributes:
        category: Check family, e.g. ``ISSUER_IDENTITY``.
        status: Outcome, e.g. ``VALID``.
        proof_kind: Name of the verifier that produced the fragment.
        payload: Verifier-specific data; a record, a list of records or None.
        reason: Optional explanation for non-valid outcomes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category: str = Field(alias="type")
    status: str
    proof_kind: str = Field(alias="name")
    payload: Any = Field(default=None, alias="data")
    reason: Optional[FragmentReason] = None

    def to_wire(self) -> dict[str, Any]:
        """Serialize using the upstream field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


_FRAGMENT_LIST = TypeAdapter(List[VerificationFragment])


def parse_fragments(data: Any) -> List[VerificationFragment]:
    """Validate decoded JSON into a list of fragments.

    Raises:
        MalformedInputError: If *data* is not a list or any entry fails
            validation.
    """
    if not isinstance(data, list):
        raise MalformedInputError.invalid_fragments(
            f"expected a JSON array, got {type(data).__name__}"
        )
    try:
        return _FRAGMENT_LIST.validate_python(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first["loc"])
        raise MalformedInputError.invalid_fragments(
            f"{loc}: {first['msg']}"
        ) from exc


# =============================================================================
# Normalized Identifier
# =============================================================================

class IdentifierType(str, Enum):
    DNS = "DNS"
    DNS_DID = "DNS-DID"
    DID = "DID"
    UNKNOWN = "Unknown"


class NormalizedIdentifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    type: IdentifierType
