"""
Catalog record model for a single seal part.
"""

import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from sealsel.models.inputs import MotionType
from sealsel.physics.units import bar_to_psi, mm_to_in


class SealRecord(BaseModel):
    """
    One seal part in the catalog.
    
    Records are frozen: the selector hands them out directly and callers
    cannot alter catalog contents through them.
    """
    part_number: str = Field(..., min_length=1, description="Unique part identifier, e.g. 'SS-6210-40V'")
    inner_diameter_mm: float = Field(..., gt=0, description="Inner diameter (mm)")
    cross_section_mm: float = Field(..., gt=0, description="Cross-section (mm)")
    outer_diameter_mm: float = Field(..., gt=0, description="Outer diameter (mm)")
    max_pressure_bar: float = Field(..., gt=0, description="Rated pressure at reference temperature (bar)")
    max_temp_c: float = Field(default=150.0, description="Recommended maximum operating temperature (degC)")
    compatible_materials: frozenset[str] = Field(
        default_factory=frozenset,
        description="Material codes the part is offered in, e.g. NBR, FKM, FFKM",
    )
    motion_compatibility: MotionType = Field(default=MotionType.BOTH, description="Rated motion category")
    max_speed_m_per_s: Optional[float] = Field(
        default=None,
        gt=0,
        description="Dynamic speed limit in m/s. None means no limit",
    )
    notes: str = Field(default="", description="Free-text annotation, not used in scoring")

    model_config = {"frozen": True}

    @field_validator("compatible_materials", mode="before")
    @classmethod
    def clean_materials(cls, v):
        """Strip whitespace and drop blank material codes."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        return frozenset(m.strip() for m in v if m and m.strip())

    @model_validator(mode="after")
    def check_diameters(self) -> "SealRecord":
        """Ensure the inner diameter is smaller than the outer diameter."""
        if self.inner_diameter_mm >= self.outer_diameter_mm:
            raise ValueError(
                f"inner_diameter_mm ({self.inner_diameter_mm}) must be < "
                f"outer_diameter_mm ({self.outer_diameter_mm})"
            )
        return self

    @property
    def has_speed_limit(self) -> bool:
        """Whether a finite dynamic speed limit is declared."""
        return self.max_speed_m_per_s is not None and math.isfinite(self.max_speed_m_per_s)

    @property
    def max_pressure_psi(self) -> float:
        """Rated pressure converted to psi."""
        return bar_to_psi(self.max_pressure_bar)

    @property
    def inner_diameter_in(self) -> float:
        """Inner diameter converted to inches."""
        return mm_to_in(self.inner_diameter_mm)

    @property
    def cross_section_in(self) -> float:
        """Cross-section converted to inches."""
        return mm_to_in(self.cross_section_mm)
