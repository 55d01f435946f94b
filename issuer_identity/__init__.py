# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Issuer identifier extraction from document verification fragments."""

from issuer_identity.exceptions import (
    IdentityExtractionError,
    InvalidArgumentError,
    MalformedInputError,
    NotFoundError,
)
from issuer_identity.extract import (
    get_identifier,
    get_identity_proof_fragment,
    get_issuer_identifier,
    to_plain,
)
from issuer_identity.models import (
    FragmentCategory,
    FragmentStatus,
    IdentifierType,
    NormalizedIdentifier,
    ProofKind,
    VerificationFragment,
    parse_fragments,
)

__version__ = "0.1.0"

__all__ = [
    "FragmentCategory",
    "FragmentStatus",
    "IdentifierType",
    "IdentityExtractionError",
    "InvalidArgumentError",
    "MalformedInputError",
    "NormalizedIdentifier",
    "NotFoundError",
    "ProofKind",
    "VerificationFragment",
    "get_identifier",
    "get_identity_proof_fragment",
    "get_issuer_identifier",
    "parse_fragments",
    "to_plain",
]
