"""
Command-line interface for the seal selector.
"""

from sealsel.cli.main import cli, main

__all__ = ["cli", "main"]
