"""
Unit registry and helpers for seal dimension and rating conversions.

Catalog data is stored in metric units (mm, bar, degC); pint provides the
imperial equivalents shown alongside them.
"""

import pint

# Shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

millimeter = ureg.millimeter
inch = ureg.inch
bar = ureg.bar
psi = ureg.psi


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude


def bar_to_psi(pressure_bar: float) -> float:
    """Convert a pressure in bar to psi."""
    return magnitude_in(Q_(pressure_bar, "bar"), "psi")


def psi_to_bar(pressure_psi: float) -> float:
    """Convert a pressure in psi to bar."""
    return magnitude_in(Q_(pressure_psi, "psi"), "bar")


def mm_to_in(length_mm: float) -> float:
    """Convert millimeters to inches."""
    return magnitude_in(Q_(length_mm, "mm"), "inch")


def c_to_f(temp_c: float) -> float:
    """Convert a temperature in Celsius to Fahrenheit."""
    return magnitude_in(Q_(temp_c, ureg.degC), "degF")
