from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..models.kind import FeatureKind
from ..models.pma_model import PmaModel


class SourceInterface(ABC):
    """
    Base interface for all feature sources.

    This interface defines the contract that all sources must implement
    to be compatible with the PmaModel architecture.
    """

    @abstractmethod
    def update_model(self, model: PmaModel, kinds: Optional[Iterable[FeatureKind]] = None) -> None:
        """
        Update the PmaModel with data from this source.

        Each requested kind is fetched and decoded completely before it is
        added to the model, so a failure never leaves a partial collection.

        Args:
            model: The PmaModel to update
            kinds: Kinds to load. If None, all kinds the source can provide.

        Raises:
            ModelValidationError: If a fetched document cannot be decoded
        """
        pass

    def available_kinds(self) -> Iterable[FeatureKind]:
        """Kinds this source can provide (derived kinds are never fetched)."""
        return [kind for kind in FeatureKind if not kind.is_derived]

    def get_source_name(self) -> str:
        """
        Get the name of this source.

        Returns:
            String identifier for this source
        """
        return self.__class__.__name__.lower()
