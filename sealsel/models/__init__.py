"""
Pydantic models for seal selector inputs, catalog records and outputs.
"""

from sealsel.models.inputs import MotionType, SealRequest, ScoringWeights
from sealsel.models.seal import SealRecord
from sealsel.models.outputs import PenaltyBreakdown, SealMatch, SealRecommendation

__all__ = [
    "MotionType",
    "SealRequest",
    "ScoringWeights",
    "SealRecord",
    "PenaltyBreakdown",
    "SealMatch",
    "SealRecommendation",
]
