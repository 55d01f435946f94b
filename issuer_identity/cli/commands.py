"""Issuer identity commands.

Commands:
    issuer-identity extract <source>  Extract the issuer identifier(s)
    issuer-identity select <source>   Show the valid issuer identity fragment
"""

import logging

import typer

from issuer_identity.cli.output import (
    OutputFormat,
    output_error,
    output_fragment,
    output_identifiers,
)
from issuer_identity.cli.utils import (
    EXIT_EXTRACTION_FAILURE,
    EXIT_PARSE_ERROR,
    read_fragments,
)
from issuer_identity.config import DEFAULT_OUTPUT_FORMAT
from issuer_identity.exceptions import IdentityExtractionError, InvalidArgumentError
from issuer_identity.extract import get_identifier, get_identity_proof_fragment

log = logging.getLogger(__name__)

SOURCE_HELP = "JSON array of verification fragments, file path, or '-' for stdin"


def extract_cmd(
    source: str = typer.Argument(..., help=SOURCE_HELP),
    format: OutputFormat = typer.Option(
        OutputFormat(DEFAULT_OUTPUT_FORMAT),
        "--format",
        "-f",
        help="Output format",
    ),
) -> None:
    """Extract the issuer identifier(s) from verification fragments.

    Finds the VALID ISSUER_IDENTITY fragment and prints its identifier as
    {"identifier": ..., "type": ...}, or a list of them when the document
    has several issuers.

    Examples:
        issuer-identity extract fragments.json
        cat fragments.json | issuer-identity extract - -f table
    """
    fragments = read_fragments(source)

    try:
        result = get_identifier(get_identity_proof_fragment(fragments))
    except InvalidArgumentError as e:
        output_error(code=e.code, message=e.message, exit_code=EXIT_PARSE_ERROR)
    except IdentityExtractionError as e:
        log.info(f"Identifier extraction failed: {e.code}")
        output_error(code=e.code, message=e.message, exit_code=EXIT_EXTRACTION_FAILURE)

    output_identifiers(result, format)


def select_cmd(
    source: str = typer.Argument(..., help=SOURCE_HELP),
    format: OutputFormat = typer.Option(
        OutputFormat(DEFAULT_OUTPUT_FORMAT),
        "--format",
        "-f",
        help="Output format",
    ),
) -> None:
    """Print the first VALID ISSUER_IDENTITY fragment, or null if none.

    Examples:
        issuer-identity select fragments.json -f pretty
    """
    fragments = read_fragments(source)

    try:
        fragment = get_identity_proof_fragment(fragments)
    except InvalidArgumentError as e:
        output_error(code=e.code, message=e.message, exit_code=EXIT_PARSE_ERROR)

    output_fragment(fragment, format)
