from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Set
import logging

from .kind import FeatureKind
from .feature_collection import FeatureCollection
from .complete_threshold import CompleteThreshold

logger = logging.getLogger(__name__)


@dataclass
class PmaModel:
    """
    All feature collections gathered for one run.

    Sources add one collection per fetched kind; the complete thresholds are
    derived on demand from the threshold, runway and airport collections.
    """

    _collections: Dict[FeatureKind, FeatureCollection] = field(default_factory=dict)

    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    sources_used: Set[str] = field(default_factory=set)

    def add_collection(self, collection: FeatureCollection, source_name: str) -> None:
        """
        Add or replace the collection for its kind.

        Args:
            collection: Decoded collection
            source_name: Name of the source that produced it
        """
        if collection.kind.is_derived:
            raise ValueError(f"{collection.kind.name} is derived and cannot be added to the model")
        if collection.kind in self._collections:
            logger.warning(f"Replacing {collection.kind.token} collection with data from {source_name}")
        self._collections[collection.kind] = collection
        self.sources_used.add(source_name)
        self.updated_at = datetime.now()
        logger.info(f"Added {len(collection)} {collection.kind.token} features from {source_name}")

    def has_collection(self, kind: FeatureKind) -> bool:
        return kind in self._collections

    def get_collection(self, kind: FeatureKind) -> FeatureCollection:
        """
        Get the collection for a kind, empty if nothing was loaded for it.
        """
        if kind is FeatureKind.COMPLETE_THRESHOLD:
            return FeatureCollection(kind, self.complete_thresholds())
        return self._collections.get(kind, FeatureCollection(kind))

    @property
    def airports(self) -> FeatureCollection:
        return self.get_collection(FeatureKind.AIRPORT)

    @property
    def runways(self) -> FeatureCollection:
        return self.get_collection(FeatureKind.RUNWAY)

    @property
    def thresholds(self) -> FeatureCollection:
        return self.get_collection(FeatureKind.THRESHOLD)

    def complete_thresholds(self) -> List[CompleteThreshold]:
        """
        Join thresholds with their runway and airport.

        Returns:
            CompleteThreshold records in threshold, airport, runway order

        Raises:
            PreconditionError: If a matched airport has a locality code too short to use
        """
        from ..core.join import join_thresholds

        return join_thresholds(self.thresholds, self.runways, self.airports)

    def get_statistics(self) -> Dict[str, int]:
        """Number of records per loaded kind, keyed by token."""
        return {kind.token: len(collection) for kind, collection in self._collections.items()}
