from dataclasses import dataclass
from typing import Optional, Dict, Any

from .kind import FeatureKind
from .properties import get_str, get_float, get_optional_key


@dataclass(frozen=True)
class Airport:
    """Data class for storing aerodrome information from the ``airport`` layer."""

    locality: str  # ICAO-like locality code, e.g. SBGR
    name: str
    operator: str
    latitude: float
    longitude: float
    elevation_m: float
    airport_key: Optional[int] = None  # absent in older feeds

    KIND = FeatureKind.AIRPORT

    @property
    def effective_airport_key(self) -> int:
        """Airport key used in joins, 0 when the feed does not carry one."""
        return self.airport_key if self.airport_key is not None else 0

    @classmethod
    def from_properties(cls, properties: Dict[str, Any]) -> 'Airport':
        """
        Create instance from a GeoJSON properties object.

        Args:
            properties: The ``properties`` member of one feature

        Returns:
            Decoded Airport

        Raises:
            FeatureDecodeError: If a required property is missing or mistyped
        """
        kind = cls.__name__
        return cls(
            locality=get_str(properties, 'localidade_id', kind),
            name=get_str(properties, 'nome', kind),
            operator=get_str(properties, 'opr', kind),
            latitude=get_float(properties, 'latitude_dec', kind),
            longitude=get_float(properties, 'longitude_dec', kind),
            elevation_m=get_float(properties, 'elevacao', kind),
            airport_key=get_optional_key(properties, 'airport_pk', kind),
        )

    def __str__(self):
        return f"Airport {self.locality} ({self.name.strip()})"
