# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Shared test fixtures for the issuer identity test suite.

Provides factory fixtures for verification fragments in both model and
wire (JSON) form, mirroring what the upstream document verifiers emit.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

import pytest

from issuer_identity.models import ProofKind, VerificationFragment


# =========================================================================
# Wire-form fragments
# =========================================================================

@pytest.fixture
def make_wire_fragment() -> Callable[..., Dict[str, Any]]:
    """Factory fixture: build a fragment dict using upstream field names.

    Defaults describe a VALID DNS-TXT issuer identity fragment.
    """

    def _make(
        type: str = "ISSUER_IDENTITY",
        status: str = "VALID",
        name: str = ProofKind.DNS_TXT.value,
        data: Any = None,
        no_data: bool = False,
        **extra: Any,
    ) -> Dict[str, Any]:
        if data is None and not no_data:
            data = {"identifier": "example.com"}
        fragment: Dict[str, Any] = {"type": type, "status": status, "name": name, "data": data}
        fragment.update(extra)
        return fragment

    return _make


# =========================================================================
# Model fragments
# =========================================================================

@pytest.fixture
def make_fragment() -> Callable[..., VerificationFragment]:
    """Factory fixture: build a VerificationFragment.

    ``payload`` defaults to a DNS-TXT single record; use
    ``no_payload=True`` for a fragment without data.
    """

    def _make(
        category: str = "ISSUER_IDENTITY",
        status: str = "VALID",
        proof_kind: str = ProofKind.DNS_TXT.value,
        payload: Any = None,
        no_payload: bool = False,
    ) -> VerificationFragment:
        if payload is None and not no_payload:
            payload = {"identifier": "example.com"}
        return VerificationFragment(
            category=category,
            status=status,
            proof_kind=proof_kind,
            payload=payload,
        )

    return _make


@pytest.fixture
def document_fragments(make_fragment) -> List[VerificationFragment]:
    """A typical verification run: integrity, status and identity checks."""
    return [
        make_fragment(
            category="DOCUMENT_INTEGRITY",
            proof_kind="OpenAttestationHash",
            payload=True,
        ),
        make_fragment(
            category="DOCUMENT_STATUS",
            status="SKIPPED",
            proof_kind="OpenAttestationEthereumTokenRegistryStatus",
            no_payload=True,
        ),
        make_fragment(
            category="DOCUMENT_STATUS",
            proof_kind="OpenAttestationEthereumDocumentStoreStatus",
            payload={"issuedOnAll": True},
        ),
        make_fragment(
            proof_kind=ProofKind.DNS_TXT.value,
            payload=[{"location": "example.com", "status": "VALID", "value": "0xabc"}],
        ),
    ]
