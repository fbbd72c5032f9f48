"""
Data models for the geo_pma library.

This package contains the typed records decoded from the AISWEB GeoServer
layers, the derived CompleteThreshold composite, the queryable feature
collections and the PmaModel holding everything fetched for one run.
"""

from .kind import FeatureKind
from .airport import Airport
from .navaid import Vor, VorType, Ndb
from .waypoint import Waypoint
from .runway import Runway, Threshold
from .complete_threshold import CompleteThreshold
from .feature import Record, FEATURE_TYPES, decode_feature
from .feature_collection import QueryableCollection, FeatureCollection
from .pma_model import PmaModel
from .validation import (
    ValidationResult, ValidationError, ModelValidationError,
    FeatureDecodeError, PreconditionError, UnsupportedKindError,
)

__all__ = [
    # Records
    'FeatureKind',
    'Airport',
    'Vor',
    'VorType',
    'Ndb',
    'Waypoint',
    'Runway',
    'Threshold',
    'CompleteThreshold',
    'Record',
    # Decoding
    'FEATURE_TYPES',
    'decode_feature',
    'QueryableCollection',
    'FeatureCollection',
    'PmaModel',
    # Errors
    'ValidationResult',
    'ValidationError',
    'ModelValidationError',
    'FeatureDecodeError',
    'PreconditionError',
    'UnsupportedKindError',
]
