"""
Seal selector: catalog ownership and recommendation.
"""

from sealsel.selector.engine import SealSelector

__all__ = ["SealSelector"]
