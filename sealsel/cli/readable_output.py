"""
Helpers to turn JSON recommendation outputs into a compact, human-readable
console summary. Metric values are shown with their imperial equivalents.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from sealsel.physics.units import bar_to_psi, mm_to_in


def _fmt_float(value: Any) -> str:
    """Safely format a float."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return "n/a"
    if abs(fval) >= 1000:
        return f"{fval:,.0f}"
    return f"{fval:.2f}"


def _fmt_length(value_mm: Any) -> str:
    """Format a length as 'mm (in)'."""
    try:
        mm = float(value_mm)
    except (TypeError, ValueError):
        return "n/a"
    return f"{mm:.2f} mm ({mm_to_in(mm):.3f} in)"


def _fmt_pressure(value_bar: Any) -> str:
    """Format a pressure as 'bar (psi)'."""
    try:
        bar = float(value_bar)
    except (TypeError, ValueError):
        return "n/a"
    return f"{bar:.1f} bar ({bar_to_psi(bar):,.0f} psi)"


def render_recommendation(data: dict[str, Any]) -> list[str]:
    """
    Render a recommendation (as dumped by SealRecommendation) to lines.

    Args:
        data: Dict from SealRecommendation.model_dump(mode="json")

    Returns:
        Lines of text, without trailing newlines
    """
    request = data.get("request", {})
    lines = [
        f"Request: bore {_fmt_length(request.get('bore_mm'))}, "
        f"cs {_fmt_length(request.get('groove_cs_mm'))}, "
        f"{request.get('temp_c', '?')} C, medium {request.get('medium', '?')!r}",
        f"         pressure {_fmt_pressure(request.get('system_pressure_bar'))}, "
        f"motion {request.get('motion', '?')}",
        f"Candidates considered: {data.get('candidates_considered', 0)} | "
        f"excluded: {len(data.get('excluded') or [])}",
    ]

    match = data.get("match")
    if not match:
        lines.append("No match: every catalog seal was excluded")
    else:
        seal = match.get("seal", {})
        materials = ", ".join(sorted(seal.get("compatible_materials") or [])) or "none"
        lines.extend([
            f"Best: {seal.get('part_number', '?')} | score {_fmt_float(match.get('score'))}",
            f"  ID {_fmt_length(seal.get('inner_diameter_mm'))}, "
            f"CS {_fmt_length(seal.get('cross_section_mm'))}, "
            f"OD {_fmt_length(seal.get('outer_diameter_mm'))}",
            f"  Rated {_fmt_pressure(seal.get('max_pressure_bar'))}, "
            f"derated {_fmt_pressure(match.get('derated_pressure_bar'))}",
            f"  Materials: {materials} | motion {seal.get('motion_compatibility', '?')}",
            f"  {match.get('rationale', '')}",
        ])

    excluded = data.get("excluded") or []
    if excluded:
        lines.append("Excluded:")
        lines.extend(f"  - {e}" for e in excluded)

    warnings = data.get("warnings") or []
    if warnings:
        lines.append("Warnings:")
        lines.extend(f"  ! {w}" for w in warnings)

    return lines


def print_readable_output(json_path: Path) -> None:
    """
    Print a human-friendly summary of a recommendation JSON file.

    Args:
        json_path: Path to the JSON output file.
    """
    data = json.loads(Path(json_path).read_text())
    for line in render_recommendation(data):
        print(line)
