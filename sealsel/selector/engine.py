"""
Seal selector.

Owns the in-memory seal catalog and ranks it against operating envelopes.
"""

import logging
import threading
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from sealsel.catalog.importer import CatalogImporter, RecordLike
from sealsel.catalog.seed import SEED_CATALOG
from sealsel.errors import DuplicatePartNumberError, InvalidInputError, UnsupportedOperationError
from sealsel.models.inputs import MotionType, ScoringWeights, SealRequest
from sealsel.models.outputs import SealMatch, SealRecommendation
from sealsel.models.seal import SealRecord
from sealsel.scoring.scorer import SealScorer

logger = logging.getLogger(__name__)


class SealSelector:
    """
    Recommends seals from an append-only catalog.
    
    The selector is the only owner of the catalog. Appends are serialised
    by a lock; recommendations scan an immutable snapshot taken at the
    start of the call and need no lock while scoring.
    """
    
    def __init__(
        self,
        seed: bool = True,
        weights: Optional[ScoringWeights] = None,
        importer: Optional[CatalogImporter] = None,
        allow_duplicates: bool = False,
    ):
        """
        Initialize the selector.
        
        Args:
            seed: Pre-populate with the example seed catalog
            weights: Scoring constants (defaults if None)
            importer: Default importer used by load_catalog
            allow_duplicates: Accept records whose part number already exists
        """
        self.scorer = SealScorer(weights)
        self.importer = importer
        self.allow_duplicates = allow_duplicates
        self._lock = threading.Lock()
        self._catalog: list[SealRecord] = list(SEED_CATALOG) if seed else []
    
    @property
    def weights(self) -> ScoringWeights:
        """Scoring constants in use."""
        return self.scorer.weights
    
    @property
    def catalog(self) -> tuple[SealRecord, ...]:
        """Snapshot of the catalog in insertion order."""
        with self._lock:
            return tuple(self._catalog)
    
    def __len__(self) -> int:
        return len(self._catalog)
    
    def add_seal(self, record: RecordLike) -> SealRecord:
        """
        Append a seal to the catalog.
        
        Args:
            record: SealRecord, or a mapping of SealRecord fields
            
        Returns:
            The stored record
            
        Raises:
            InvalidInputError: If the record fails validation
            DuplicatePartNumberError: If the part number exists and
                duplicates are not allowed
        """
        seal = _coerce_record(record)
        with self._lock:
            self._check_duplicates([seal])
            self._catalog.append(seal)
        logger.debug("Added seal %s (catalog size %d)", seal.part_number, len(self._catalog))
        return seal
    
    def find_seal(self, part_number: str) -> Optional[SealRecord]:
        """Look up a seal by part number (case-insensitive). First match wins."""
        wanted = part_number.casefold()
        for seal in self.catalog:
            if seal.part_number.casefold() == wanted:
                return seal
        return None
    
    def load_catalog(self, source: Any, importer: Optional[CatalogImporter] = None) -> int:
        """
        Import seals from an external source through a CatalogImporter.
        
        The batch is validated completely before anything is appended, so
        a bad record leaves the catalog unchanged.
        
        Args:
            source: Passed through to the importer
            importer: Importer to use instead of the selector's default
            
        Returns:
            Number of seals added
            
        Raises:
            UnsupportedOperationError: If no importer is available
        """
        importer = importer or self.importer
        if importer is None:
            raise UnsupportedOperationError(
                "No catalog importer configured. Pass a CatalogImporter to "
                "SealSelector(importer=...) or load_catalog(importer=...)."
            )
        
        seals = [_coerce_record(r) for r in importer.load(source)]
        with self._lock:
            self._check_duplicates(seals)
            self._catalog.extend(seals)
        logger.info("Imported %d seals from %r", len(seals), source)
        return len(seals)
    
    def recommend_seal(
        self,
        bore_mm: float,
        groove_cs_mm: float,
        temp_c: int,
        medium: str,
        system_pressure_bar: float = 0.0,
        motion: MotionType = MotionType.BOTH,
        speed_m_per_s: float = 0.0,
        preferred_materials: Optional[Sequence[str]] = None,
    ) -> SealRecommendation:
        """
        Recommend the best catalog seal for an operating envelope.
        
        Args:
            bore_mm: Target inner diameter (mm)
            groove_cs_mm: Target cross-section (mm)
            temp_c: Operating temperature (degC)
            medium: Process fluid description
            system_pressure_bar: Operating pressure (bar), 0 for none
            motion: Required motion category
            speed_m_per_s: Sliding speed, only checked for dynamic motion
            preferred_materials: Preferred material codes, in order
            
        Returns:
            SealRecommendation; its match is None if nothing qualified
            
        Raises:
            InvalidInputError: If the inputs fail validation
        """
        try:
            request = SealRequest(
                bore_mm=bore_mm,
                groove_cs_mm=groove_cs_mm,
                temp_c=temp_c,
                medium=medium,
                system_pressure_bar=system_pressure_bar,
                motion=motion,
                speed_m_per_s=speed_m_per_s,
                preferred_materials=list(preferred_materials or []),
            )
        except ValidationError as e:
            raise InvalidInputError(str(e)) from e
        return self.recommend(request)
    
    def recommend(self, request: SealRequest) -> SealRecommendation:
        """
        Recommend the best catalog seal for a validated request.
        
        Single pass over the catalog in insertion order, keeping the
        lowest score. See SealScorer.beats for the tie-break.
        """
        logger.info(
            "Recommending seal: bore %.3f mm, cs %.3f mm, %d C, medium %r, %.1f bar, %s",
            request.bore_mm,
            request.groove_cs_mm,
            request.temp_c,
            request.medium,
            request.system_pressure_bar,
            request.motion.value,
        )
        
        best: Optional[SealMatch] = None
        considered = 0
        excluded = []
        
        for seal in self.catalog:
            reason = self.scorer.exclusion_reason(seal, request)
            if reason is not None:
                logger.debug("Excluded %s: %s", seal.part_number, reason)
                excluded.append(f"{seal.part_number}: {reason}")
                continue
            
            considered += 1
            candidate = self.scorer.score_seal(seal, request)
            logger.debug("Scored %s: %s", seal.part_number, candidate.rationale)
            
            if self.scorer.beats(candidate, best):
                best = candidate
        
        if best is None:
            logger.info("No seal matched: all %d entries excluded", len(excluded))
        else:
            logger.info("Selected %s (%s)", best.seal.part_number, best.rationale)
        
        return SealRecommendation(
            request=request,
            match=best,
            candidates_considered=considered,
            excluded=excluded,
            warnings=_warnings_for(best, request),
        )
    
    def rank_seals(self, request: SealRequest, max_results: int = 5) -> list[SealMatch]:
        """
        Score every eligible seal and return the best few.
        
        Args:
            request: Operating envelope
            max_results: Maximum number of matches to return
            
        Returns:
            Matches sorted by score, then larger derated allowance, then
            catalog order

        Raises:
            InvalidInputError: If max_results is less than 1
        """
        if max_results < 1:
            raise InvalidInputError(f"max_results must be at least 1, got {max_results}")
        matches = [
            self.scorer.score_seal(seal, request)
            for seal in self.catalog
            if self.scorer.exclusion_reason(seal, request) is None
        ]
        # sort is stable, so catalog order breaks remaining ties
        matches.sort(key=lambda m: (m.score, -m.derated_pressure_bar))
        return matches[:max_results]
    
    def _check_duplicates(self, seals: Iterable[SealRecord]) -> None:
        """Raise if any part number is already taken. Caller holds the lock."""
        if self.allow_duplicates:
            return
        taken = {s.part_number.casefold() for s in self._catalog}
        for seal in seals:
            key = seal.part_number.casefold()
            if key in taken:
                raise DuplicatePartNumberError(seal.part_number)
            taken.add(key)


def _coerce_record(record: Union[SealRecord, Mapping[str, Any]]) -> SealRecord:
    """Validate a mapping into a SealRecord; records pass through."""
    if isinstance(record, SealRecord):
        return record
    try:
        return SealRecord.model_validate(record)
    except ValidationError as e:
        raise InvalidInputError(str(e)) from e


def _warnings_for(match: Optional[SealMatch], request: SealRequest) -> list[str]:
    """Warnings about the selected seal."""
    if match is None:
        return []
    
    warnings = []
    seal = match.seal
    if match.breakdown.pressure_violated:
        warnings.append(
            f"{seal.part_number} is rated {match.derated_pressure_bar:.1f} bar at "
            f"{request.temp_c} C, below system pressure {request.system_pressure_bar:.1f} bar; "
            f"no compliant seal in catalog"
        )
    if request.temp_c > seal.max_temp_c:
        warnings.append(
            f"Operating temperature {request.temp_c} C exceeds {seal.part_number} "
            f"maximum of {seal.max_temp_c:.0f} C"
        )
    return warnings
