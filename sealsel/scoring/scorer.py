"""
Scoring system for catalog seals.

Evaluates each seal against a request:
- Hard filters (preferred materials, motion, dynamic speed)
- Weighted penalties for geometry, temperature, material, medium
- Near-disqualifying penalty for derated pressure violation
"""

from typing import Optional

from sealsel.models.inputs import MotionType, ScoringWeights, SealRequest
from sealsel.models.outputs import PenaltyBreakdown, SealMatch
from sealsel.models.seal import SealRecord
from sealsel.physics.chemistry import material_compatible, medium_matches_material
from sealsel.physics.derating import derate_pressure


def motion_compatible(seal: SealRecord, motion: MotionType, speed_m_per_s: float = 0.0) -> bool:
    """
    Check whether a seal is rated for the requested motion and speed.
    
    Seals rated for both motions always pass. Otherwise the category must
    match, and for dynamic duty a positive speed must not exceed the seal's
    finite speed limit.
    """
    if seal.motion_compatibility == MotionType.BOTH:
        return True
    if seal.motion_compatibility != motion:
        return False
    if motion == MotionType.DYNAMIC and speed_m_per_s > 0 and seal.has_speed_limit:
        return speed_m_per_s <= seal.max_speed_m_per_s
    return True


class SealScorer:
    """
    Scores catalog seals against a request.
    
    Scoring Philosophy:
    - Score is a sum of non-negative penalties, lower is better
    - Inner diameter mismatch weighs heaviest among the soft criteria
    - Exceeding the derated pressure adds a penalty large enough to lose
      to any compliant seal, but the seal stays eligible
    """
    
    def __init__(self, weights: Optional[ScoringWeights] = None):
        """
        Initialize scorer with penalty weights.
        
        Args:
            weights: Scoring constants (defaults if None)
        """
        self.weights = weights or ScoringWeights()
    
    def exclusion_reason(self, seal: SealRecord, request: SealRequest) -> Optional[str]:
        """
        Apply the hard filters.
        
        Returns:
            Why the seal is excluded, or None if it is eligible
        """
        preferred = request.preferred_materials
        if preferred and not any(material_compatible(seal, m) for m in preferred):
            return f"none of preferred materials {', '.join(preferred)} offered"
        
        if not motion_compatible(seal, request.motion, request.speed_m_per_s):
            if seal.motion_compatibility != request.motion:
                return (
                    f"rated for {seal.motion_compatibility.value} motion, "
                    f"{request.motion.value} required"
                )
            return (
                f"speed {request.speed_m_per_s} m/s exceeds limit "
                f"{seal.max_speed_m_per_s} m/s"
            )
        
        return None
    
    def score_seal(self, seal: SealRecord, request: SealRequest) -> SealMatch:
        """
        Score an eligible seal.
        
        Args:
            seal: Catalog seal that passed the hard filters
            request: Operating envelope
            
        Returns:
            SealMatch with total score, breakdown and rationale
        """
        w = self.weights
        derated = derate_pressure(seal, request.temp_c)
        
        id_delta = abs(seal.inner_diameter_mm - request.bore_mm)
        cs_delta = abs(seal.cross_section_mm - request.groove_cs_mm)
        
        breakdown = PenaltyBreakdown(
            id_delta_mm=id_delta,
            cs_delta_mm=cs_delta,
            id_penalty=id_delta * w.id_weight,
            cs_penalty=cs_delta * w.cs_weight,
            temperature_penalty=self._temperature_penalty(seal, request.temp_c),
            material_penalty=self._material_penalty(seal, request.preferred_materials),
            medium_penalty=self._medium_penalty(seal, request.medium),
            pressure_penalty=self._pressure_penalty(request.system_pressure_bar, derated),
            pressure_violated=request.system_pressure_bar > derated,
        )
        score = breakdown.total
        
        return SealMatch(
            seal=seal,
            score=score,
            derated_pressure_bar=derated,
            breakdown=breakdown,
            rationale=format_rationale(score, breakdown),
        )
    
    def beats(self, candidate: SealMatch, incumbent: Optional[SealMatch]) -> bool:
        """
        Whether a candidate displaces the current best.
        
        A lower score wins. A score within the tie tolerance wins only with
        a strictly larger derated allowance, so the earlier catalog entry
        is kept on a full tie.
        """
        if incumbent is None:
            return True
        if candidate.score < incumbent.score:
            return True
        tied = abs(candidate.score - incumbent.score) < self.weights.tie_tolerance
        return tied and candidate.derated_pressure_bar > incumbent.derated_pressure_bar
    
    def _temperature_penalty(self, seal: SealRecord, temp_c: float) -> float:
        """Penalty for operating above the seal's rated temperature."""
        if temp_c > seal.max_temp_c:
            return (temp_c - seal.max_temp_c) * self.weights.over_temp_weight
        return 0.0
    
    def _material_penalty(self, seal: SealRecord, preferred: list[str]) -> float:
        """
        Penalty when the top preferred material is not offered.
        
        Only the first preference is scored; the rest only matter to the
        hard filter.
        """
        if not preferred:
            return 0.0
        return 0.0 if material_compatible(seal, preferred[0]) else self.weights.material_penalty
    
    def _medium_penalty(self, seal: SealRecord, medium: str) -> float:
        """Penalty when no offered material is named in the medium text."""
        return 0.0 if medium_matches_material(seal, medium) else self.weights.medium_penalty
    
    def _pressure_penalty(self, system_pressure_bar: float, derated_bar: float) -> float:
        """Penalty for system pressure above the derated allowance."""
        if system_pressure_bar > derated_bar:
            excess = system_pressure_bar - derated_bar
            return self.weights.pressure_violation_base + excess * self.weights.pressure_violation_weight
        return 0.0


def format_rationale(score: float, breakdown: PenaltyBreakdown) -> str:
    """Itemise a score, e.g. 'score 10.00: id 0.00 (0.000 mm off), ...'."""
    return (
        f"score {score:.2f}: "
        f"id {breakdown.id_penalty:.2f} ({breakdown.id_delta_mm:.3f} mm off), "
        f"cs {breakdown.cs_penalty:.2f} ({breakdown.cs_delta_mm:.3f} mm off), "
        f"temp {breakdown.temperature_penalty:.2f}, "
        f"material {breakdown.material_penalty:.2f}, "
        f"medium {breakdown.medium_penalty:.2f}, "
        f"pressure {breakdown.pressure_penalty:.2f}"
    )
