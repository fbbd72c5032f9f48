"""
Data sources for the geo_pma library.

This package contains the source classes used to fetch the AISWEB feature
layers, either from the GeoServer endpoint or from local files.
"""

from .base import SourceInterface
from .cached import CachedSource
from .aisweb import AiswebSource, DEFAULT_BASE_URL
from .local import LocalFileSource

__all__ = [
    'SourceInterface',
    'CachedSource',
    'AiswebSource',
    'DEFAULT_BASE_URL',
    'LocalFileSource',
]
