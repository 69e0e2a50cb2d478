"""
Extension point for loading catalog data from external sources.

No importer ships with the package. Anything that can produce seal
records (a spreadsheet reader, a vendor feed, a database query) can be
plugged into SealSelector.load_catalog by implementing CatalogImporter.
"""

from typing import Any, Iterable, Mapping, Protocol, Union, runtime_checkable

from sealsel.models.seal import SealRecord


RecordLike = Union[SealRecord, Mapping[str, Any]]


@runtime_checkable
class CatalogImporter(Protocol):
    """Produces seal records from an external source."""

    def load(self, source: Any) -> Iterable[RecordLike]:
        """
        Read records from ``source``.
        
        Args:
            source: Importer-specific location or handle (path, URL, ...)
            
        Returns:
            SealRecord objects or mappings accepted by SealRecord
        """
        ...
