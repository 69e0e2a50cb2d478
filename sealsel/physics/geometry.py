"""
Groove and squeeze calculations.

Simplified rules of thumb for initial housing layout. NOT a substitute
for the seal manufacturer's installation data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sealsel.errors import InvalidInputError

if TYPE_CHECKING:
    from sealsel.models.seal import SealRecord


# Groove diameter as a fraction of bore
INTERNAL_GROOVE_RATIO = 0.952
EXTERNAL_GROOVE_RATIO = 1.048
DEFAULT_GROOVE_RATIO = 0.975


def calculate_groove_diameter(bore: float, seal_type: str) -> float:
    """
    Estimate groove diameter from the bore diameter.
    
    The seal type is matched by case-sensitive substring: anything
    containing "Internal" gets an internal groove, "External" an external
    one, everything else the default ratio.
    
    Args:
        bore: Bore diameter (mm)
        seal_type: Free-text seal type, e.g. "Internal Seal"
        
    Returns:
        Groove diameter in the same unit as bore
    """
    if "Internal" in seal_type:
        return bore * INTERNAL_GROOVE_RATIO
    if "External" in seal_type:
        return bore * EXTERNAL_GROOVE_RATIO
    return bore * DEFAULT_GROOVE_RATIO


def squeeze_percent(seal: SealRecord, groove_cs: float) -> float:
    """
    Installed squeeze as a percentage of nominal cross-section.
    
    Args:
        seal: Catalog seal
        groove_cs: Groove depth available for the cross-section (mm)
        
    Returns:
        (CS - groove) / CS * 100. Negative when the groove is deeper
        than the seal section (no squeeze).
        
    Raises:
        InvalidInputError: If the seal cross-section is not positive or
            the groove dimension is negative
    """
    if seal.cross_section_mm <= 0:
        raise InvalidInputError(
            f"Cross-section must be positive for {seal.part_number!r} "
            f"(got {seal.cross_section_mm} mm)"
        )
    if groove_cs < 0:
        raise InvalidInputError(f"Groove cross-section must be >= 0 (got {groove_cs} mm)")
    
    return (seal.cross_section_mm - groove_cs) / seal.cross_section_mm * 100
