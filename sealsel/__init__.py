"""
Seal Selector (sealsel)

Recommends a seal part from a small catalog for a given bore, groove,
temperature, medium, pressure and motion, and computes derived quantities
(groove diameter, squeeze, derated pressure, chemical compatibility).

WARNING: This tool provides preliminary selection only. Confirm every
choice against the seal manufacturer's data.

Usage:
    python -m sealsel make-example
    python -m sealsel recommend --input example_request.json
    python -m sealsel groove --bore 100 --seal-type "Internal Seal"
"""

__version__ = "0.1.0"
__author__ = "Seal Selector Project"

from sealsel.errors import (
    SealSelectorError,
    InvalidInputError,
    DuplicatePartNumberError,
    UnsupportedOperationError,
)
from sealsel.models.inputs import MotionType, SealRequest, ScoringWeights
from sealsel.models.seal import SealRecord
from sealsel.models.outputs import PenaltyBreakdown, SealMatch, SealRecommendation
from sealsel.physics import (
    ChemicalRating,
    temperature_derate_factor,
    derate_pressure,
    calculate_groove_diameter,
    squeeze_percent,
    material_compatible,
    chemical_compatibility_rating,
)
from sealsel.catalog import SEED_CATALOG, CatalogImporter
from sealsel.selector import SealSelector

__all__ = [
    "SealSelectorError",
    "InvalidInputError",
    "DuplicatePartNumberError",
    "UnsupportedOperationError",
    "MotionType",
    "SealRequest",
    "ScoringWeights",
    "SealRecord",
    "PenaltyBreakdown",
    "SealMatch",
    "SealRecommendation",
    "ChemicalRating",
    "temperature_derate_factor",
    "derate_pressure",
    "calculate_groove_diameter",
    "squeeze_percent",
    "material_compatible",
    "chemical_compatibility_rating",
    "SEED_CATALOG",
    "CatalogImporter",
    "SealSelector",
]
