"""
Scoring system for catalog seals.

Applies hard filters and ranks eligible seals by weighted penalties.
"""

from sealsel.scoring.scorer import SealScorer, motion_compatible, format_rationale

__all__ = ["SealScorer", "motion_compatible", "format_rationale"]
