from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any

from .kind import FeatureKind
from .properties import get_str, get_float
from .validation import FeatureDecodeError


class VorType(Enum):
    """VOR station variants published in the ``vor`` layer."""

    DVOR = 'DVOR'
    VOR = 'VOR'


@dataclass(frozen=True)
class Vor:
    """VHF omnidirectional range station."""

    ident: str
    name: str
    latitude: float
    longitude: float
    frequency: float  # MHz
    vor_type: VorType

    KIND = FeatureKind.VOR

    @classmethod
    def from_properties(cls, properties: Dict[str, Any]) -> 'Vor':
        """Create instance from a GeoJSON properties object."""
        kind = cls.__name__
        raw_type = get_str(properties, 'vortype', kind)
        try:
            vor_type = VorType(raw_type)
        except ValueError:
            allowed = ', '.join(t.value for t in VorType)
            raise FeatureDecodeError(kind, 'vortype', f"expected one of {allowed}", raw_type) from None
        return cls(
            ident=get_str(properties, 'ident', kind),
            name=get_str(properties, 'txtname', kind),
            latitude=get_float(properties, 'latitude', kind),
            longitude=get_float(properties, 'longitude', kind),
            frequency=get_float(properties, 'frequency', kind),
            vor_type=vor_type,
        )


@dataclass(frozen=True)
class Ndb:
    """Non-directional beacon. The subtype is a free-form label from the feed."""

    code_id: str
    latitude: float
    longitude: float
    name: str
    frequency: float  # kHz
    subtype: str

    KIND = FeatureKind.NDB

    @classmethod
    def from_properties(cls, properties: Dict[str, Any]) -> 'Ndb':
        """Create instance from a GeoJSON properties object."""
        kind = cls.__name__
        return cls(
            code_id=get_str(properties, 'codeid', kind),
            latitude=get_float(properties, 'geolat', kind),
            longitude=get_float(properties, 'geolong', kind),
            name=get_str(properties, 'txtname', kind),
            frequency=get_float(properties, 'valfreq', kind),
            subtype=get_str(properties, 'tipo', kind),
        )
