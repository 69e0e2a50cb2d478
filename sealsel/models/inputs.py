"""
Input models for seal selection.

These models define the operating envelope a seal must satisfy and the
tunable weights of the selection score.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class MotionType(str, Enum):
    """Contact condition a seal is rated for."""
    STATIC = "static"
    DYNAMIC = "dynamic"
    BOTH = "both"


class ScoringWeights(BaseModel):
    """
    Weights and constants of the seal penalty score.
    
    Defaults reproduce the reference ranking. Geometric weights are per mm
    of mismatch, the over-temperature weight is per degree C above the
    seal's rated maximum.
    """
    id_weight: float = Field(default=10.0, ge=0.0, description="Penalty per mm of inner diameter mismatch")
    cs_weight: float = Field(default=5.0, ge=0.0, description="Penalty per mm of cross-section mismatch")
    over_temp_weight: float = Field(default=50.0, ge=0.0, description="Penalty per degC above rated max temperature")
    material_penalty: float = Field(default=50.0, ge=0.0, description="Penalty when the first preferred material is not listed")
    medium_penalty: float = Field(default=10.0, ge=0.0, description="Penalty when no listed material appears in the medium text")
    pressure_violation_base: float = Field(
        default=1_000_000.0,
        ge=0.0,
        description="Flat penalty when system pressure exceeds the derated allowance",
    )
    pressure_violation_weight: float = Field(
        default=1000.0,
        ge=0.0,
        description="Additional penalty per bar of pressure excess",
    )
    tie_tolerance: float = Field(default=1e-6, gt=0.0, description="Scores closer than this are treated as tied")


class SealRequest(BaseModel):
    """
    Operating envelope for a seal recommendation.
    
    Geometry is in mm, pressure in bar, speed in m/s.
    """
    bore_mm: float = Field(..., gt=0, description="Target inner diameter the seal must fit (mm)")
    groove_cs_mm: float = Field(..., gt=0, description="Target cross-section the groove accepts (mm)")
    temp_c: int = Field(..., description="Operating temperature in Celsius")
    medium: str = Field(..., description="Process fluid, e.g. 'Mineral Oil' or 'Water Glycol'")
    system_pressure_bar: float = Field(
        default=0.0,
        ge=0,
        description="System operating pressure (bar). 0 means no pressure constraint",
    )
    motion: MotionType = Field(default=MotionType.BOTH, description="Required motion category")
    speed_m_per_s: float = Field(
        default=0.0,
        ge=0,
        description="Sliding speed in m/s, only checked for dynamic motion",
    )
    preferred_materials: list[str] = Field(
        default_factory=list,
        description="Preferred material codes in order. Non-empty acts as a hard filter",
    )

    @field_validator("preferred_materials")
    @classmethod
    def strip_material_padding(cls, v: list[str]) -> list[str]:
        """Strip surrounding whitespace. Blank codes stay and match no seal."""
        return [m.strip() for m in v]

    model_config = {
        "json_schema_extra": {
            "example": {
                "bore_mm": 95.2,
                "groove_cs_mm": 4.0,
                "temp_c": 120,
                "medium": "Mineral Oil",
                "system_pressure_bar": 150,
                "motion": "both",
                "speed_m_per_s": 0,
                "preferred_materials": [],
            }
        }
    }
