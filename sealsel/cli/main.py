"""
Command-line interface for the seal selector.

Usage:
    python -m sealsel make-example [--output example_request.json]
    python -m sealsel recommend --input request.json [--output result.json] [--weights w.json] [--readable]
    python -m sealsel catalog
    python -m sealsel groove --bore 100 --seal-type "Internal Seal"
    python -m sealsel squeeze --part SS-6210-40V --groove-cs 3.2
    python -m sealsel derate --temp 120 [--part SS-6210-40V]
    python -m sealsel chemical --medium "Hydraulic Oil" --material FKM
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from sealsel import __version__
from sealsel.cli.readable_output import render_recommendation
from sealsel.errors import SealSelectorError
from sealsel.models.inputs import MotionType, ScoringWeights, SealRequest
from sealsel.physics import (
    calculate_groove_diameter,
    chemical_compatibility_rating,
    derate_pressure,
    squeeze_percent,
    temperature_derate_factor,
)
from sealsel.selector import SealSelector


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sealsel",
        description="Seal Selector - recommends catalog seals for an operating envelope. "
                    "WARNING: Preliminary selection only, confirm with manufacturer data.",
    )
    parser.add_argument("--version", action="version", version=f"sealsel {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example request JSON file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_request.json"),
        help="Output path for example file (default: example_request.json)",
    )
    
    # recommend command
    recommend_parser = subparsers.add_parser(
        "recommend",
        help="Recommend a seal for a request",
    )
    recommend_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON request file",
    )
    recommend_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )
    recommend_parser.add_argument(
        "--weights", "-w",
        type=Path,
        default=None,
        help="Path to JSON file overriding scoring weights",
    )
    recommend_parser.add_argument(
        "--readable",
        action="store_true",
        help="Print a human-readable summary instead of JSON",
    )
    
    # catalog command
    subparsers.add_parser(
        "catalog",
        help="Print the seed catalog as JSON",
    )
    
    # groove command
    groove_parser = subparsers.add_parser(
        "groove",
        help="Estimate groove diameter from bore",
    )
    groove_parser.add_argument("--bore", type=float, required=True, help="Bore diameter (mm)")
    groove_parser.add_argument(
        "--seal-type",
        default="",
        help="Seal type text, e.g. 'Internal Seal' or 'External Seal'",
    )
    
    # squeeze command
    squeeze_parser = subparsers.add_parser(
        "squeeze",
        help="Squeeze percentage of a catalog seal in a groove",
    )
    squeeze_parser.add_argument("--part", required=True, help="Catalog part number")
    squeeze_parser.add_argument("--groove-cs", type=float, required=True, help="Groove cross-section (mm)")
    
    # derate command
    derate_parser = subparsers.add_parser(
        "derate",
        help="Temperature derating factor, or derated pressure of a part",
    )
    derate_parser.add_argument("--temp", type=float, required=True, help="Operating temperature (C)")
    derate_parser.add_argument("--part", default=None, help="Catalog part number")
    
    # chemical command
    chem_parser = subparsers.add_parser(
        "chemical",
        help="Quick chemical compatibility rating",
    )
    chem_parser.add_argument("--medium", required=True, help="Process fluid, e.g. 'Hydraulic Oil'")
    chem_parser.add_argument("--material", required=True, help="Material code, e.g. FKM")
    
    return parser


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example request JSON file."""
    example = SealRequest(
        bore_mm=95.2,
        groove_cs_mm=4.0,
        temp_c=120,
        medium="Mineral Oil",
        system_pressure_bar=150.0,
        motion=MotionType.BOTH,
        speed_m_per_s=0.0,
        preferred_materials=["FKM", "NBR"],
    )
    
    with open(args.output, "w") as f:
        f.write(example.model_dump_json(indent=2))
    
    print(f"Created example request file: {args.output}")
    print("\nRun recommendation with:")
    print(f"  python -m sealsel recommend --input {args.output}")
    
    return 0


def cmd_recommend(args: argparse.Namespace) -> int:
    """Recommend a seal for a request file."""
    try:
        with open(args.input) as f:
            request = SealRequest(**json.load(f))
        
        weights = None
        if args.weights:
            weights = ScoringWeights.model_validate_json(Path(args.weights).read_text())
        
        selector = SealSelector(weights=weights)
        print(f"\nSeal Selector", file=sys.stderr)
        print(f"Catalog: {len(selector)} seals", file=sys.stderr)
        
        result = selector.recommend(request)
        output_json = result.model_dump_json(indent=2)
        
        if args.output:
            with open(args.output, "w") as f:
                f.write(output_json)
            print(f"\nResults saved to {args.output}", file=sys.stderr)
        
        if args.readable:
            for line in render_recommendation(result.model_dump(mode="json")):
                print(line)
        elif not args.output:
            print(output_json)
        
        if result.found:
            print(f"\nSelected: {result.best.part_number} (score {result.score:.2f})", file=sys.stderr)
        else:
            print("\nNo match: every catalog seal was excluded", file=sys.stderr)
        
        return 0
        
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except (ValidationError, ValueError) as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_catalog(args: argparse.Namespace) -> int:
    """Print the seed catalog."""
    selector = SealSelector()
    records = [seal.model_dump(mode="json") for seal in selector.catalog]
    print(json.dumps(records, indent=2))
    return 0


def cmd_groove(args: argparse.Namespace) -> int:
    """Print the estimated groove diameter."""
    diameter = calculate_groove_diameter(args.bore, args.seal_type)
    print(f"{diameter:.3f}")
    return 0


def cmd_squeeze(args: argparse.Namespace) -> int:
    """Print squeeze percentage for a catalog part."""
    seal = SealSelector().find_seal(args.part)
    if seal is None:
        print(f"Error: Unknown part number: {args.part}", file=sys.stderr)
        return 1
    try:
        squeeze = squeeze_percent(seal, args.groove_cs)
    except SealSelectorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"{squeeze:.2f}")
    return 0


def cmd_derate(args: argparse.Namespace) -> int:
    """Print the derating factor, or a part's derated pressure."""
    if args.part is None:
        print(f"{temperature_derate_factor(args.temp):.2f}")
        return 0
    
    seal = SealSelector().find_seal(args.part)
    if seal is None:
        print(f"Error: Unknown part number: {args.part}", file=sys.stderr)
        return 1
    print(f"{derate_pressure(seal, args.temp):.1f}")
    return 0


def cmd_chemical(args: argparse.Namespace) -> int:
    """Print the chemical compatibility rating."""
    print(chemical_compatibility_rating(args.medium, args.material).value)
    return 0


def configure_logging(verbose: bool) -> None:
    """Route library log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def cli(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if args.command is None:
        parser.print_help()
        return 0
    
    configure_logging(args.verbose)
    
    commands = {
        "make-example": cmd_make_example,
        "recommend": cmd_recommend,
        "catalog": cmd_catalog,
        "groove": cmd_groove,
        "squeeze": cmd_squeeze,
        "derate": cmd_derate,
        "chemical": cmd_chemical,
    }
    
    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
