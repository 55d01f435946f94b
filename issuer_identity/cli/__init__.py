"""Issuer identity CLI - command-line access to identifier extraction.

Usage:
    issuer-identity --help                 # Show all available commands
    issuer-identity extract fragments.json # Extract issuer identifier(s)
    issuer-identity select -               # Show the issuer identity fragment

Installation:
    pip install -e .
"""

from issuer_identity.cli.main import app

__all__ = ["app"]
