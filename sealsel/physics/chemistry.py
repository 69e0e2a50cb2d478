"""
Material and medium compatibility rules.

These are lookup rules, not a chemical compatibility model. Always
confirm elastomer selection against the manufacturer's resistance charts.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sealsel.models.seal import SealRecord


class ChemicalRating(str, Enum):
    """Outcome of the quick medium/material compatibility rule."""
    EXCELLENT = "excellent"
    TEST_RECOMMENDED = "test_recommended"


def material_compatible(seal: SealRecord, material: str) -> bool:
    """Whether the seal lists the material code (case-insensitive exact match)."""
    wanted = material.casefold()
    return any(m.casefold() == wanted for m in seal.compatible_materials)


def medium_matches_material(seal: SealRecord, medium: str) -> bool:
    """
    Whether any compatible material code appears inside the medium text.
    
    Case-insensitive substring test, e.g. medium "FKM-rated oil" matches a
    seal listing "fkm".
    """
    medium_folded = medium.casefold()
    return any(m.casefold() in medium_folded for m in seal.compatible_materials)


def chemical_compatibility_rating(medium: str, material: str) -> ChemicalRating:
    """
    Quick compatibility rating for a medium/material pair.
    
    Rules (case-sensitive):
    - "Oil" in medium and material is not "EPDM": excellent
    - "Water" in medium and material is "EPDM": excellent
    - anything else: testing recommended
    """
    if "Oil" in medium and material != "EPDM":
        return ChemicalRating.EXCELLENT
    if "Water" in medium and material == "EPDM":
        return ChemicalRating.EXCELLENT
    return ChemicalRating.TEST_RECOMMENDED
