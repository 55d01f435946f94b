"""Issuer identity CLI - Main entry point with command registration."""

import typer

from issuer_identity import __version__
from issuer_identity.cli import commands
from issuer_identity.logging_config import configure_logging

app = typer.Typer(
    name="issuer-identity",
    help="Extract issuer identifiers from document verification fragments.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"issuer-identity version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Log level (defaults to IDENTITY_LOG_LEVEL).",
    ),
) -> None:
    """Extract issuer identifiers from document verification fragments.

    All commands read a JSON array of fragments from a file, an inline JSON
    string, or stdin ('-'). Output is JSON by default for easy piping.

    Examples:
        issuer-identity extract fragments.json
        verify-document doc.json | issuer-identity extract -
    """
    configure_logging(level=log_level)


app.command("extract")(commands.extract_cmd)
app.command("select")(commands.select_cmd)


if __name__ == "__main__":
    app()
