"""
Tests for the seal scorer.

Tests hard filters, each penalty component, and the tie-break rule.
"""

import pytest

from sealsel.catalog import SEED_CATALOG
from sealsel.models.inputs import MotionType, ScoringWeights, SealRequest
from sealsel.scoring.scorer import SealScorer, motion_compatible


SS_6210, SS_6212, SS_6225, SS_6230 = SEED_CATALOG


def _request(**overrides) -> SealRequest:
    fields = {
        "bore_mm": 95.2,
        "groove_cs_mm": 4.0,
        "temp_c": 20,
        "medium": "Mineral Oil",
    }
    fields.update(overrides)
    return SealRequest(**fields)


@pytest.fixture
def scorer() -> SealScorer:
    return SealScorer()


# =============================================================================
# Test: Motion compatibility
# =============================================================================

class TestMotionCompatible:
    """Tests for motion_compatible."""
    
    def test_both_always_passes(self):
        """Test that seals rated for both motions accept any request."""
        for motion in MotionType:
            assert motion_compatible(SS_6210, motion, speed_m_per_s=100.0)
    
    def test_category_must_match(self):
        """Test static/dynamic mismatch, including a 'both' request."""
        assert motion_compatible(SS_6225, MotionType.STATIC)
        assert not motion_compatible(SS_6225, MotionType.DYNAMIC)
        assert not motion_compatible(SS_6225, MotionType.BOTH)
        assert not motion_compatible(SS_6212, MotionType.BOTH)
    
    def test_dynamic_speed_limit(self):
        """Test the 5 m/s limit of SS-6212-50V."""
        assert motion_compatible(SS_6212, MotionType.DYNAMIC, 5.0)
        assert not motion_compatible(SS_6212, MotionType.DYNAMIC, 5.1)
    
    def test_zero_speed_skips_limit(self):
        """Test that speed 0 means no speed requirement."""
        assert motion_compatible(SS_6212, MotionType.DYNAMIC, 0.0)
    
    def test_no_limit_declared(self, make_seal):
        """Test a dynamic seal without a speed limit."""
        seal = make_seal(motion_compatibility=MotionType.DYNAMIC)
        assert motion_compatible(seal, MotionType.DYNAMIC, 50.0)


# =============================================================================
# Test: Hard filters
# =============================================================================

class TestExclusion:
    """Tests for SealScorer.exclusion_reason."""
    
    def test_eligible_returns_none(self, scorer):
        assert scorer.exclusion_reason(SS_6210, _request()) is None
    
    def test_preferred_material_filter_checks_whole_list(self, scorer):
        """Test that any listed preferred material keeps the seal."""
        assert scorer.exclusion_reason(SS_6210, _request(preferred_materials=["EPDM", "NBR"])) is None
        reason = scorer.exclusion_reason(SS_6210, _request(preferred_materials=["EPDM", "FFKM"]))
        assert "preferred materials" in reason
    
    def test_motion_reason(self, scorer):
        reason = scorer.exclusion_reason(SS_6225, _request(motion=MotionType.DYNAMIC))
        assert "static" in reason
    
    def test_speed_reason(self, scorer):
        reason = scorer.exclusion_reason(
            SS_6212, _request(motion=MotionType.DYNAMIC, speed_m_per_s=8.0)
        )
        assert "exceeds limit" in reason


# =============================================================================
# Test: Penalties
# =============================================================================

class TestPenalties:
    """Tests for individual penalty components."""
    
    def test_exact_fit_only_medium_penalty(self, scorer):
        """Test exact geometry, no pressure violation: only residual penalties."""
        match = scorer.score_seal(SS_6210, _request(temp_c=120, system_pressure_bar=150.0))
        
        assert match.breakdown.id_penalty == 0.0
        assert match.breakdown.cs_penalty == 0.0
        assert match.breakdown.pressure_penalty == 0.0
        assert match.breakdown.medium_penalty == 10.0
        assert match.score == pytest.approx(10.0)
        assert match.derated_pressure_bar == pytest.approx(180.0)
    
    def test_geometry_weights(self, scorer):
        """Test ID weighs 10 per mm and CS 5 per mm."""
        match = scorer.score_seal(SS_6210, _request(bore_mm=97.2, groove_cs_mm=3.0))
        
        assert match.breakdown.id_delta_mm == pytest.approx(2.0)
        assert match.breakdown.id_penalty == pytest.approx(20.0)
        assert match.breakdown.cs_penalty == pytest.approx(5.0)
    
    def test_over_temperature(self, scorer):
        """Test 50 per degree above the rated maximum."""
        match = scorer.score_seal(SS_6210, _request(temp_c=160))
        assert match.breakdown.temperature_penalty == pytest.approx(500.0)
    
    def test_at_rated_temperature_no_penalty(self, scorer):
        match = scorer.score_seal(SS_6210, _request(temp_c=150))
        assert match.breakdown.temperature_penalty == 0.0
    
    def test_only_first_preferred_material_scored(self, scorer):
        """Test the material penalty looks at the first preference only."""
        first_missing = scorer.score_seal(SS_6210, _request(preferred_materials=["EPDM", "NBR"]))
        first_present = scorer.score_seal(SS_6210, _request(preferred_materials=["NBR", "EPDM"]))
        
        assert first_missing.breakdown.material_penalty == 50.0
        assert first_present.breakdown.material_penalty == 0.0
    
    def test_no_preference_no_material_penalty(self, scorer):
        match = scorer.score_seal(SS_6210, _request())
        assert match.breakdown.material_penalty == 0.0
    
    def test_medium_matching_material_no_penalty(self, scorer):
        match = scorer.score_seal(SS_6210, _request(medium="FKM grade hydraulic oil"))
        assert match.breakdown.medium_penalty == 0.0
    
    def test_pressure_violation(self, scorer):
        """Test 1e6 + 1000 per bar above derated allowance."""
        # derated at 20 C is 200 bar, 10 bar over
        match = scorer.score_seal(SS_6210, _request(system_pressure_bar=210.0))
        
        assert match.breakdown.pressure_penalty == pytest.approx(1_000_000 + 10 * 1000)
        assert match.breakdown.pressure_violated is True
    
    def test_pressure_at_allowance_not_violated(self, scorer):
        match = scorer.score_seal(SS_6210, _request(system_pressure_bar=200.0))
        assert match.breakdown.pressure_penalty == 0.0
        assert match.breakdown.pressure_violated is False
    
    def test_violation_flagged_with_zero_pressure_weights(self):
        """Test that the violation flag does not depend on the pressure weights."""
        scorer = SealScorer(ScoringWeights(pressure_violation_base=0, pressure_violation_weight=0))
        match = scorer.score_seal(SS_6210, _request(system_pressure_bar=210.0))
        
        assert match.breakdown.pressure_penalty == 0.0
        assert match.breakdown.pressure_violated is True
    
    def test_score_never_negative(self, scorer):
        """Test score stays non-negative over a grid of requests."""
        for seal in SEED_CATALOG:
            for bore in (10.0, 95.2, 300.0):
                for temp_c in (-20, 150, 260):
                    for pressure in (0.0, 500.0):
                        match = scorer.score_seal(
                            seal,
                            _request(bore_mm=bore, temp_c=temp_c, system_pressure_bar=pressure),
                        )
                        assert match.score >= 0
                        assert match.score == pytest.approx(match.breakdown.total)
    
    def test_rationale_lists_every_component(self, scorer):
        match = scorer.score_seal(SS_6210, _request())
        
        for label in ("id ", "cs ", "temp ", "material ", "medium ", "pressure "):
            assert label in match.rationale
        assert match.rationale.startswith("score 10.00")
    
    def test_custom_weights(self):
        """Test that weights are configurable."""
        scorer = SealScorer(ScoringWeights(medium_penalty=0.0, id_weight=1.0))
        match = scorer.score_seal(SS_6210, _request(bore_mm=96.2))
        
        assert match.breakdown.medium_penalty == 0.0
        assert match.score == pytest.approx(1.0)


# =============================================================================
# Test: Tie-break
# =============================================================================

class TestBeats:
    """Tests for SealScorer.beats."""
    
    def test_first_candidate_always_wins(self, scorer):
        match = scorer.score_seal(SS_6210, _request())
        assert scorer.beats(match, None)
    
    def test_lower_score_wins(self, scorer):
        good = scorer.score_seal(SS_6210, _request())
        bad = scorer.score_seal(SS_6230, _request())
        
        assert scorer.beats(good, bad)
        assert not scorer.beats(bad, good)
    
    def test_tie_prefers_larger_derated_pressure(self, scorer, make_seal):
        weak = scorer.score_seal(make_seal("W", max_pressure_bar=100.0), _request(bore_mm=100.0, groove_cs_mm=5.0))
        strong = scorer.score_seal(make_seal("S", max_pressure_bar=300.0), _request(bore_mm=100.0, groove_cs_mm=5.0))
        
        assert weak.score == strong.score
        assert scorer.beats(strong, weak)
        assert not scorer.beats(weak, strong)
    
    def test_full_tie_keeps_incumbent(self, scorer, make_seal):
        a = scorer.score_seal(make_seal("A"), _request(bore_mm=100.0, groove_cs_mm=5.0))
        b = scorer.score_seal(make_seal("B"), _request(bore_mm=100.0, groove_cs_mm=5.0))
        
        assert not scorer.beats(b, a)
