"""
Temperature derating of seal pressure ratings.

Catalog pressure ratings are given at a reference temperature. Above that
the allowable pressure is reduced by a step factor:

    t <= 100 C         1.00
    100 < t <= 150 C   0.90
    150 < t <= 200 C   0.75
    t > 200 C          0.50

Each band includes its upper bound. The table is not interpolated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sealsel.models.seal import SealRecord


# (upper bound in degC, factor), checked in order
DERATING_BANDS: list[tuple[float, float]] = [
    (100.0, 1.00),
    (150.0, 0.90),
    (200.0, 0.75),
]

# Factor applied above the last band
HIGH_TEMP_FACTOR = 0.50


def temperature_derate_factor(temp_c: float) -> float:
    """
    Pressure derating factor for an operating temperature.
    
    Args:
        temp_c: Operating temperature in Celsius
        
    Returns:
        Factor in (0, 1], non-increasing with temperature
    """
    for upper_c, factor in DERATING_BANDS:
        if temp_c <= upper_c:
            return factor
    return HIGH_TEMP_FACTOR


def derate_pressure(seal: SealRecord, temp_c: float) -> float:
    """Derated allowable pressure (bar) of a seal at the given temperature."""
    return seal.max_pressure_bar * temperature_derate_factor(temp_c)
