import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from .base import SourceInterface
from ..models.kind import FeatureKind
from ..models.pma_model import PmaModel
from ..models.feature_collection import FeatureCollection

logger = logging.getLogger(__name__)


class LocalFileSource(SourceInterface):
    """
    Source reading previously downloaded GeoJSON layers from a directory.

    A layer is read from ``<token>.json``, or ``aisweb_<token>.json`` when
    the former does not exist.
    """

    def __init__(self, input_dir: Union[str, Path]):
        self.input_dir = Path(input_dir)

    def _candidates(self, kind: FeatureKind) -> List[Path]:
        return [
            self.input_dir / f"{kind.token}.json",
            self.input_dir / f"aisweb_{kind.token}.json",
        ]

    def find_file(self, kind: FeatureKind) -> Path:
        """
        Locate the file for a layer.

        Raises:
            FileNotFoundError: If none of the candidate files exists
        """
        for candidate in self._candidates(kind):
            if candidate.is_file():
                return candidate
        names = ', '.join(c.name for c in self._candidates(kind))
        raise FileNotFoundError(f"No file for {kind.token} in {self.input_dir} (looked for {names})")

    def available_kinds(self) -> Iterable[FeatureKind]:
        return [
            kind for kind in super().available_kinds()
            if any(c.is_file() for c in self._candidates(kind))
        ]

    def load_document(self, kind: FeatureKind) -> Any:
        path = self.find_file(kind)
        logger.info(f"Reading {kind.token} features from {path}")
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def update_model(self, model: PmaModel, kinds: Optional[Iterable[FeatureKind]] = None) -> None:
        for kind in (kinds if kinds is not None else self.available_kinds()):
            collection = FeatureCollection.from_geojson(kind, self.load_document(kind))
            model.add_collection(collection, self.get_source_name())
