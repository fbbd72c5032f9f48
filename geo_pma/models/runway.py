from dataclasses import dataclass
from typing import Optional, Dict, Any

from .kind import FeatureKind
from .properties import get_str, get_float, get_key, get_optional_float, get_informational_int


@dataclass(frozen=True)
class Runway:
    """
    Runway from the ``runway_v2`` layer.

    Only carries the keys and physical attributes needed to complete
    thresholds; runways are never written on their own.
    """

    runway_key: int
    airport_key: int
    surface: str
    length: float
    width: float

    KIND = FeatureKind.RUNWAY

    @classmethod
    def from_properties(cls, properties: Dict[str, Any]) -> 'Runway':
        """Create instance from a GeoJSON properties object."""
        kind = cls.__name__
        return cls(
            runway_key=get_key(properties, 'runway_pk', kind),
            airport_key=get_key(properties, 'airport_pk', kind),
            surface=get_str(properties, 'surface', kind),
            length=get_float(properties, 'runwayleng', kind),
            width=get_float(properties, 'width', kind),
        )

    def __str__(self):
        return f"Runway {self.runway_key} ({self.surface} {self.length}x{self.width})"


@dataclass(frozen=True)
class Threshold:
    """Runway end from the ``rwydirection`` layer."""

    runway_end_id: str  # e.g. 09L
    latitude: float
    longitude: float
    runway_key: int
    elevation_m: Optional[float] = None
    group_id: Optional[int] = None  # only present in later feeds

    KIND = FeatureKind.THRESHOLD

    @property
    def has_position(self) -> bool:
        """False when both coordinates are exactly zero, i.e. the position is unset."""
        return not (self.latitude == 0.0 and self.longitude == 0.0)

    @classmethod
    def from_properties(cls, properties: Dict[str, Any]) -> 'Threshold':
        """Create instance from a GeoJSON properties object."""
        kind = cls.__name__
        return cls(
            runway_end_id=get_str(properties, 'rwyendid', kind),
            latitude=get_float(properties, 'threshlat', kind),
            longitude=get_float(properties, 'threshlon', kind),
            runway_key=get_key(properties, 'runway_pk', kind),
            elevation_m=get_optional_float(properties, 'threshelev', kind),
            group_id=get_informational_int(properties, 'group_id', kind),
        )
