"""
Tagged decoding of GeoServer features.

Every fetched layer maps to exactly one record class. Decoding dispatches on
the FeatureKind so that a properties object is only ever accepted as the
shape its layer promises.
"""

from typing import Any, Dict, Type, Union

from .kind import FeatureKind
from .airport import Airport
from .navaid import Vor, Ndb
from .waypoint import Waypoint
from .runway import Runway, Threshold
from .complete_threshold import CompleteThreshold
from .validation import FeatureDecodeError

Record = Union[Airport, Vor, Ndb, Waypoint, Threshold, Runway, CompleteThreshold]

FEATURE_TYPES: Dict[FeatureKind, Type] = {
    FeatureKind.AIRPORT: Airport,
    FeatureKind.VOR: Vor,
    FeatureKind.NDB: Ndb,
    FeatureKind.WAYPOINT: Waypoint,
    FeatureKind.THRESHOLD: Threshold,
    FeatureKind.RUNWAY: Runway,
}


def decode_feature(kind: FeatureKind, properties: Any) -> Record:
    """
    Decode one ``properties`` object as a record of the given kind.

    Args:
        kind: Layer the feature was fetched from
        properties: The feature's ``properties`` member

    Returns:
        The decoded record

    Raises:
        FeatureDecodeError: If the properties do not match the kind
        ValueError: If the kind is derived and cannot be decoded
    """
    if kind.is_derived:
        raise ValueError(f"{kind.name} records are built by the join and cannot be decoded")
    record_class = FEATURE_TYPES[kind]
    if not isinstance(properties, dict):
        raise FeatureDecodeError(record_class.__name__, 'properties', "expected an object", properties)
    return record_class.from_properties(properties)
