# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.

"""Issuer identifier extraction.

Picks the valid ISSUER_IDENTITY fragment out of a verification run and
turns its proof-specific data into normalized ``{identifier, type}``
records. A fragment whose data is a list (one entry per issuer) yields a
list of records in the same order; a single record yields a single
identifier.

Each recognized proof kind reads one field from list entries and one from
a single record:

==========  ==============  ================  ===========
proof kind  list entry      single record     type
==========  ==============  ================  ===========
DNS-TXT     ``location``    ``identifier``    ``DNS``
DNS-DID     ``location``    ``location``      ``DNS-DID``
DID         ``did``         ``did``           ``DID``
==========  ==============  ================  ===========

The DNS-TXT single-record field differs from its list entries; this
mirrors the shape the DNS-TXT verifier emits.

Unrecognized proof kinds are not errors: they map to the ``Unknown``
sentinel whatever their data looks like.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from issuer_identity.config import (
    ISSUER_IDENTITY_CATEGORY,
    UNKNOWN_IDENTIFIER,
    VALID_STATUS,
)
from issuer_identity.exceptions import (
    InvalidArgumentError,
    MalformedInputError,
    NotFoundError,
)
from issuer_identity.models import (
    IdentifierType,
    NormalizedIdentifier,
    ProofKind,
    VerificationFragment,
)

log = logging.getLogger(__name__)

IdentifierResult = Union[NormalizedIdentifier, List[NormalizedIdentifier]]


@dataclass(frozen=True)
class _ProofMapping:
    type: IdentifierType
    list_field: str
    single_field: str


_PROOF_MAPPINGS: Dict[str, _ProofMapping] = {
    ProofKind.DNS_TXT.value: _ProofMapping(IdentifierType.DNS, "location", "identifier"),
    ProofKind.DNS_DID.value: _ProofMapping(IdentifierType.DNS_DID, "location", "location"),
    ProofKind.DID.value: _ProofMapping(IdentifierType.DID, "did", "did"),
}

_NON_RECORDS = (str, bytes, int, float, list, tuple)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _read_field(
    entry: Any,
    field: str,
    proof_kind: str,
    index: Optional[int] = None,
) -> str:
    """Return *field* from a mapping or attribute-bearing record."""
    if entry is None or isinstance(entry, _NON_RECORDS):
        raise MalformedInputError.invalid_entry(proof_kind, entry, index)

    if isinstance(entry, Mapping):
        value = entry.get(field)
    else:
        value = getattr(entry, field, None)

    if not isinstance(value, str):
        raise MalformedInputError.missing_field(proof_kind, field)
    return value


def _map_payload(payload: Any, proof_kind: str, mapping: _ProofMapping) -> IdentifierResult:
    if isinstance(payload, (list, tuple)):
        return [
            NormalizedIdentifier(
                identifier=_read_field(entry, mapping.list_field, proof_kind, index),
                type=mapping.type,
            )
            for index, entry in enumerate(payload)
        ]
    return NormalizedIdentifier(
        identifier=_read_field(payload, mapping.single_field, proof_kind),
        type=mapping.type,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_identity_proof_fragment(
    fragments: Sequence[VerificationFragment],
) -> Optional[VerificationFragment]:
    """Return the first valid ISSUER_IDENTITY fragment, or ``None``.

    Raises:
        InvalidArgumentError: If *fragments* is empty.
    """
    if len(fragments) < 1:
        raise InvalidArgumentError.empty_fragments()

    for fragment in fragments:
        if fragment.category == ISSUER_IDENTITY_CATEGORY and fragment.status == VALID_STATUS:
            log.debug(f"Selected issuer identity fragment {fragment.proof_kind}")
            return fragment

    log.debug(f"No valid issuer identity fragment among {len(fragments)} fragments")
    return None


def get_identifier(fragment: Optional[VerificationFragment]) -> IdentifierResult:
    """Map an issuer identity fragment to normalized identifier(s).

    Parameters:
        fragment: Typically the result of :func:`get_identity_proof_fragment`.

    Returns:
        A :class:`NormalizedIdentifier`, or a list of them when the
        fragment data lists several issuers.

    Raises:
        NotFoundError: If *fragment* is ``None``.
        MalformedInputError: If the fragment has no data, or a recognized
            proof kind's data lacks the field it needs.
    """
    if fragment is None:
        raise NotFoundError.no_valid_identity()
    if fragment.payload is None:
        raise MalformedInputError.missing_data()

    mapping = _PROOF_MAPPINGS.get(fragment.proof_kind)
    if mapping is None:
        log.debug(f"Unrecognized identity proof kind {fragment.proof_kind!r}")
        return NormalizedIdentifier(
            identifier=UNKNOWN_IDENTIFIER,
            type=IdentifierType.UNKNOWN,
        )

    return _map_payload(fragment.payload, fragment.proof_kind, mapping)


def get_issuer_identifier(fragments: Sequence[VerificationFragment]) -> IdentifierResult:
    """Select the issuer identity fragment and extract its identifier(s)."""
    return get_identifier(get_identity_proof_fragment(fragments))


def to_plain(result: IdentifierResult) -> Union[Dict[str, str], List[Dict[str, str]]]:
    """Convert an extraction result to JSON-ready dicts."""
    if isinstance(result, list):
        return [item.model_dump(mode="json") for item in result]
    return result.model_dump(mode="json")
