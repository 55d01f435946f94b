# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""Issuer identity extraction configuration.

Normative constants are fixed by the upstream fragment schema. Configurable
defaults may be overridden via environment variables.
"""

import os

# =============================================================================
# NORMATIVE CONSTANTS (fixed by the fragment schema)
# =============================================================================

ISSUER_IDENTITY_CATEGORY: str = "ISSUER_IDENTITY"
VALID_STATUS: str = "VALID"
UNKNOWN_IDENTIFIER: str = "Unknown"

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL: str = os.getenv("IDENTITY_LOG_LEVEL", "WARNING")
LOG_FORMAT: str = os.getenv("IDENTITY_LOG_FORMAT", "json")

# =============================================================================
# CLI
# =============================================================================

OUTPUT_FORMATS: frozenset[str] = frozenset({"json", "pretty", "table"})


def _parse_output_format() -> str:
    value = os.getenv("IDENTITY_OUTPUT_FORMAT", "json").strip().lower()
    if value in OUTPUT_FORMATS:
        return value
    return "json"


DEFAULT_OUTPUT_FORMAT: str = _parse_output_format()
