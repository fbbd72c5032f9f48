from dataclasses import dataclass
from typing import Dict, Any

from .kind import FeatureKind
from .properties import get_str, get_float


@dataclass(frozen=True)
class Waypoint:
    """Named fix from the ``waypoint`` layer."""

    ident: str
    latitude: float
    longitude: float
    code_type: str  # free text, e.g. RNAV_GPS

    KIND = FeatureKind.WAYPOINT

    @classmethod
    def from_properties(cls, properties: Dict[str, Any]) -> 'Waypoint':
        """Create instance from a GeoJSON properties object."""
        kind = cls.__name__
        return cls(
            ident=get_str(properties, 'ident', kind),
            latitude=get_float(properties, 'latitude', kind),
            longitude=get_float(properties, 'longitude', kind),
            code_type=get_str(properties, 'codetype', kind),
        )
