import logging
from typing import Any, Dict, Iterable, Optional, Tuple

import requests

from .base import SourceInterface
from .cached import CachedSource
from ..models.kind import FeatureKind
from ..models.pma_model import PmaModel
from ..models.feature_collection import FeatureCollection
from ..models.validation import ModelValidationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://geoaisweb.decea.mil.br/geoserver/ICA/ows"


class AiswebSource(CachedSource, SourceInterface):
    """Source implementation for the AISWEB GeoServer WFS layers."""

    def __init__(self, cache_dir: Optional[str] = None,
                 username: Optional[str] = None, password: Optional[str] = None,
                 base_url: str = DEFAULT_BASE_URL, timeout: float = 60,
                 max_age_days: int = 0):
        """
        Initialize the AISWEB source.

        Args:
            cache_dir: Optional directory for caching fetched documents
            username: Optional username for HTTP basic authentication
            password: Optional password for HTTP basic authentication
            base_url: WFS endpoint
            timeout: Request timeout in seconds
            max_age_days: Maximum age of cached documents in days
        """
        super().__init__(cache_dir)
        self.base_url = base_url
        self.timeout = timeout
        self.max_age_days = max_age_days
        self._auth: Optional[Tuple[str, str]] = None
        if username is not None:
            self._auth = (username, password or '')

    def _get_params(self, kind: FeatureKind) -> Dict[str, str]:
        return {
            'service': 'WFS',
            'version': '1.0.0',
            'request': 'GetFeature',
            'typeName': kind.typename,
            'outputFormat': 'application/json',
        }

    def fetch_features(self, token: str) -> Dict[str, Any]:
        """
        Fetch one layer as a GeoJSON FeatureCollection.

        Args:
            token: Layer token, e.g. 'airport'

        Returns:
            Parsed JSON document

        Raises:
            requests.RequestException: On network or HTTP errors
            ValueError: If the body is not valid JSON
        """
        kind = FeatureKind.from_token(token)
        try:
            response = requests.get(
                self.base_url,
                params=self._get_params(kind),
                auth=self._auth,
                headers={'Accept': 'application/json'},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"Error fetching {kind.typename}: {e}")
            raise

    def get_features(self, kind: FeatureKind) -> Dict[str, Any]:
        """
        Get a layer document from cache or fetch it if not available.
        """
        return self.get_data('features', kind.token, max_age_days=self.max_age_days)

    def get_collection(self, kind: FeatureKind) -> FeatureCollection:
        """
        Fetch and decode one layer.

        A document that fails to decode is dropped from the cache.

        Raises:
            ModelValidationError: If the document cannot be decoded
        """
        document = self.get_features(kind)
        try:
            return FeatureCollection.from_geojson(kind, document)
        except ModelValidationError:
            self.invalidate('features', kind.token)
            raise

    def update_model(self, model: PmaModel, kinds: Optional[Iterable[FeatureKind]] = None) -> None:
        for kind in (kinds if kinds is not None else self.available_kinds()):
            model.add_collection(self.get_collection(kind), self.get_source_name())
