"""Rendering of extraction results for the issuer identity CLI.

Identifiers and fragments print as compact JSON (default, for piping),
indented JSON, or a rich table. Errors always go to stderr as a JSON
object so that stdout only ever carries results.
"""

import json
from enum import Enum
from typing import Any, NoReturn, Optional, Sequence

import typer
from rich.console import Console
from rich.table import Table

from issuer_identity.extract import IdentifierResult, to_plain
from issuer_identity.models import VerificationFragment

IDENTIFIER_COLUMNS = ("identifier", "type")
FRAGMENT_COLUMNS = ("field", "value")

# Exit status when a result cannot be rendered
EXIT_RENDER_ERROR = 2


class OutputFormat(str, Enum):
    """Output format options."""

    json = "json"
    pretty = "pretty"
    table = "table"


def output_error(code: str, message: str, exit_code: int = 1) -> NoReturn:
    """Write ``{"error": true, "code", "message"}`` to stderr and exit."""
    typer.echo(json.dumps({"error": True, "code": code, "message": message}), err=True)
    raise typer.Exit(exit_code)


def _echo_json(data: Any, format: OutputFormat) -> None:
    indent = 2 if format == OutputFormat.pretty else None
    try:
        text = json.dumps(data, indent=indent)
    except (TypeError, ValueError) as e:
        output_error(
            code="OUTPUT_FAILED",
            message=f"Result is not JSON-serializable: {e}",
            exit_code=EXIT_RENDER_ERROR,
        )
    typer.echo(text)


def _print_table(title: str, columns: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    table = Table(title=title, show_header=True, header_style="bold")
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)
    Console().print(table)


def output_identifiers(result: IdentifierResult, format: OutputFormat) -> None:
    """Render one identifier or a list of them."""
    if format != OutputFormat.table:
        _echo_json(to_plain(result), format)
        return

    items = result if isinstance(result, list) else [result]
    if not items:
        typer.echo("No issuer identifiers.", err=True)
        return
    _print_table(
        "Issuer identifiers",
        IDENTIFIER_COLUMNS,
        [(item.identifier, item.type.value) for item in items],
    )


def output_fragment(fragment: Optional[VerificationFragment], format: OutputFormat) -> None:
    """Render a fragment in wire form; ``null`` when nothing was selected."""
    if fragment is None or format != OutputFormat.table:
        _echo_json(fragment.to_wire() if fragment is not None else None, format)
        return

    rows = [
        (field, value if isinstance(value, str) else json.dumps(value))
        for field, value in fragment.to_wire().items()
    ]
    _print_table("Issuer identity fragment", FRAGMENT_COLUMNS, rows)
