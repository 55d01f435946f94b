# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Issuer identity extraction exceptions mapped to error codes."""

from typing import Optional


class IdentityExtractionError(Exception):
    """Base exception for issuer identifier extraction errors."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class InvalidArgumentError(IdentityExtractionError):
    """The caller passed an argument that can never satisfy the request."""

    @classmethod
    def empty_fragments(cls) -> "InvalidArgumentError":
        return cls(
            code="INVALID_ARGUMENT",
            message="Please provide at least one verification fragment",
        )


class NotFoundError(IdentityExtractionError):
    """No valid issuer identity fragment is available."""

    @classmethod
    def no_valid_identity(cls) -> "NotFoundError":
        return cls(
            code="NOT_FOUND",
            message="Did not find any Issuer Identity fragment that is valid",
        )


class MalformedInputError(IdentityExtractionError):
    """A fragment or fragment list does not have the expected shape."""

    @classmethod
    def missing_data(cls) -> "MalformedInputError":
        return cls(
            code="MALFORMED_INPUT",
            message="No data property found in fragment, malformed fragment",
        )

    @classmethod
    def missing_field(cls, proof_kind: str, field: str) -> "MalformedInputError":
        return cls(
            code="MALFORMED_INPUT",
            message=f"{proof_kind} data is missing string field '{field}'",
        )

    @classmethod
    def invalid_entry(
        cls, proof_kind: str, entry: object, index: Optional[int] = None
    ) -> "MalformedInputError":
        where = "data" if index is None else f"data entry {index}"
        return cls(
            code="MALFORMED_INPUT",
            message=f"{proof_kind} {where} is not a record: {type(entry).__name__}",
        )

    @classmethod
    def invalid_fragments(cls, reason: str) -> "MalformedInputError":
        return cls(
            code="MALFORMED_INPUT",
            message=f"Verification fragments are invalid: {reason}",
        )
