"""
Quick formatter for a saved recommendation JSON file.

Usage:
    python pretty_example_output.py
    python pretty_example_output.py --input path/to/result.json
"""

from __future__ import annotations

import argparse
from pathlib import Path

from sealsel.cli.readable_output import print_readable_output


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print a readable summary of example_output.json"
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=Path("example_output.json"),
        help="Path to a recommendation JSON file (default: example_output.json)",
    )
    args = parser.parse_args()

    print_readable_output(json_path=args.input)


if __name__ == "__main__":
    main()
