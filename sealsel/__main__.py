"""
Entry point for running sealsel as a module.

Usage:
    python -m sealsel recommend --input request.json
    python -m sealsel make-example
"""

import sys

from sealsel.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
