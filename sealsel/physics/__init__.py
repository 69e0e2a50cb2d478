"""
Derived engineering quantities for seal selection.

This module provides standalone calculations that do not need the catalog:
- Temperature derating of pressure ratings
- Groove diameter and squeeze estimates
- Material / medium compatibility rules
- Unit conversions (pint)

All rules are simplified for preliminary selection only.
"""

from sealsel.physics.units import ureg, Q_, bar_to_psi, psi_to_bar, mm_to_in, c_to_f
from sealsel.physics.derating import (
    temperature_derate_factor,
    derate_pressure,
    DERATING_BANDS,
    HIGH_TEMP_FACTOR,
)
from sealsel.physics.geometry import calculate_groove_diameter, squeeze_percent
from sealsel.physics.chemistry import (
    material_compatible,
    medium_matches_material,
    chemical_compatibility_rating,
    ChemicalRating,
)

__all__ = [
    # Units
    "ureg",
    "Q_",
    "bar_to_psi",
    "psi_to_bar",
    "mm_to_in",
    "c_to_f",
    # Derating
    "temperature_derate_factor",
    "derate_pressure",
    "DERATING_BANDS",
    "HIGH_TEMP_FACTOR",
    # Geometry
    "calculate_groove_diameter",
    "squeeze_percent",
    # Chemistry
    "material_compatible",
    "medium_matches_material",
    "chemical_compatibility_rating",
    "ChemicalRating",
]
