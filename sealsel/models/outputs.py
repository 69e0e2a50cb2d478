"""
Output models for seal recommendations.

These models define the structure of the match, its penalty breakdown and
the overall recommendation returned by the selector.
"""

from typing import Optional

from pydantic import BaseModel, Field

from sealsel.models.inputs import SealRequest
from sealsel.models.seal import SealRecord


class PenaltyBreakdown(BaseModel):
    """
    Contribution of each penalty component to a candidate's score.
    
    All penalties are non-negative; lower is better.
    """
    id_delta_mm: float = Field(..., ge=0, description="Absolute inner diameter mismatch (mm)")
    cs_delta_mm: float = Field(..., ge=0, description="Absolute cross-section mismatch (mm)")
    id_penalty: float = Field(..., ge=0, description="Weighted inner diameter mismatch")
    cs_penalty: float = Field(..., ge=0, description="Weighted cross-section mismatch")
    temperature_penalty: float = Field(default=0.0, ge=0, description="Over-temperature penalty")
    material_penalty: float = Field(default=0.0, ge=0, description="Preferred material penalty")
    medium_penalty: float = Field(default=0.0, ge=0, description="Medium compatibility penalty")
    pressure_penalty: float = Field(default=0.0, ge=0, description="Derated pressure violation penalty")
    pressure_violated: bool = Field(
        default=False,
        description="Whether system pressure exceeds the derated allowance",
    )

    @property
    def total(self) -> float:
        """Sum of all weighted penalties."""
        return (
            self.id_penalty
            + self.cs_penalty
            + self.temperature_penalty
            + self.material_penalty
            + self.medium_penalty
            + self.pressure_penalty
        )


class SealMatch(BaseModel):
    """A scored catalog seal."""
    seal: SealRecord = Field(..., description="The matched catalog record")
    score: float = Field(..., ge=0, description="Total penalty score (lower is better)")
    derated_pressure_bar: float = Field(
        ...,
        ge=0,
        description="Allowable pressure at the requested temperature (bar)",
    )
    breakdown: PenaltyBreakdown = Field(..., description="Per-component penalties")
    rationale: str = Field(..., description="Human-readable itemisation of the score")


class SealRecommendation(BaseModel):
    """
    Complete output of a seal recommendation.
    
    ``match`` is None when every catalog entry was excluded by the hard
    filters (material preference, motion or speed).
    """
    request: SealRequest = Field(..., description="The request that was evaluated")
    match: Optional[SealMatch] = Field(default=None, description="Best match, or None if nothing qualified")
    candidates_considered: int = Field(..., ge=0, description="Entries that passed the hard filters")
    excluded: list[str] = Field(
        default_factory=list,
        description="Hard-excluded part numbers with the reason",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Warnings about the selected seal",
    )

    @property
    def found(self) -> bool:
        """Whether any seal qualified."""
        return self.match is not None

    @property
    def best(self) -> Optional[SealRecord]:
        """The recommended seal, if any."""
        return self.match.seal if self.match is not None else None

    @property
    def score(self) -> Optional[float]:
        """Score of the recommended seal, if any."""
        return self.match.score if self.match is not None else None

    @property
    def rationale(self) -> Optional[str]:
        """Rationale of the recommended seal, if any."""
        return self.match.rationale if self.match is not None else None
