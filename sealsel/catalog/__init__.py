"""
Seal catalog data: the seed catalog and the external import interface.
"""

from sealsel.catalog.seed import SEED_CATALOG
from sealsel.catalog.importer import CatalogImporter, RecordLike

__all__ = [
    "SEED_CATALOG",
    "CatalogImporter",
    "RecordLike",
]
