"""
Pytest configuration and shared fixtures.
"""

import pytest

from sealsel.models.inputs import MotionType, SealRequest
from sealsel.models.seal import SealRecord
from sealsel.selector import SealSelector


@pytest.fixture
def selector() -> SealSelector:
    """Provide a selector with the seed catalog."""
    return SealSelector()


@pytest.fixture
def empty_selector() -> SealSelector:
    """Provide a selector with no catalog entries."""
    return SealSelector(seed=False)


@pytest.fixture
def oil_request() -> SealRequest:
    """Provide the reference mineral-oil request matching SS-6210-40V."""
    return SealRequest(
        bore_mm=95.2,
        groove_cs_mm=4.0,
        temp_c=120,
        medium="Mineral Oil",
        system_pressure_bar=150.0,
        motion=MotionType.BOTH,
    )


@pytest.fixture
def make_seal():
    """Factory for seal records with sensible defaults."""
    def _make(part_number: str = "T-100-50", **overrides) -> SealRecord:
        fields = {
            "part_number": part_number,
            "inner_diameter_mm": 100.0,
            "cross_section_mm": 5.0,
            "outer_diameter_mm": 110.0,
            "max_pressure_bar": 200.0,
            "max_temp_c": 150.0,
            "compatible_materials": {"NBR"},
            "motion_compatibility": MotionType.BOTH,
        }
        fields.update(overrides)
        return SealRecord(**fields)
    return _make
