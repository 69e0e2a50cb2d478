"""
Exceptions raised by the seal selector.

A recommendation that finds no eligible seal is NOT an error: it is
reported as a SealRecommendation whose ``match`` is None.
"""


class SealSelectorError(Exception):
    """Base class for all seal selector errors."""


class InvalidInputError(SealSelectorError, ValueError):
    """Degenerate or out-of-range input (e.g. non-positive cross-section)."""


class DuplicatePartNumberError(InvalidInputError):
    """A seal with the same part number is already in the catalog."""

    def __init__(self, part_number: str):
        super().__init__(f"Part number already in catalog: {part_number}")
        self.part_number = part_number


class UnsupportedOperationError(SealSelectorError, NotImplementedError):
    """Requested capability has no backing implementation."""
