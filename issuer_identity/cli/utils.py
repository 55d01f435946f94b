"""Shared utilities for the issuer identity CLI.

This module provides common functionality for:
- Reading input from stdin, files, or arguments
- Loading verification fragments from JSON input
- Exit codes
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, List

from issuer_identity.cli.output import output_error
from issuer_identity.exceptions import MalformedInputError
from issuer_identity.models import VerificationFragment, parse_fragments

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXTRACTION_FAILURE = 1
EXIT_PARSE_ERROR = 2
EXIT_IO_ERROR = 3


def read_input(source: str, encoding: str = "utf-8") -> str:
    """Read input from stdin, file, or argument.

    Args:
        source: Input source - "-" for stdin, file path, or literal value
        encoding: Text encoding for files

    Returns:
        Content as string

    Raises:
        typer.Exit: On I/O errors with appropriate exit code
    """
    try:
        if source == "-":
            return sys.stdin.read()

        if os.path.isfile(source):
            return Path(source).read_text(encoding=encoding)

        # Treat as literal value (inline JSON)
        return source

    except (OSError, UnicodeDecodeError) as e:
        output_error(code="IO_ERROR", message=f"Error reading input: {e}", exit_code=EXIT_IO_ERROR)


def read_json_input(source: str) -> Any:
    """Read JSON input from stdin, file, or argument.

    Raises:
        typer.Exit: On I/O or parse errors
    """
    content = read_input(source)

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        output_error(code="PARSE_ERROR", message=f"Invalid JSON: {e}", exit_code=EXIT_PARSE_ERROR)


def read_fragments(source: str) -> List[VerificationFragment]:
    """Read and validate a JSON array of verification fragments.

    Raises:
        typer.Exit: On I/O, JSON or fragment validation errors
    """
    data = read_json_input(source)

    try:
        return parse_fragments(data)
    except MalformedInputError as e:
        output_error(code=e.code, message=e.message, exit_code=EXIT_PARSE_ERROR)
