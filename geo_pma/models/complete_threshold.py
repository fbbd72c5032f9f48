from dataclasses import dataclass
from typing import Optional

from .kind import FeatureKind
from .airport import Airport
from .runway import Runway, Threshold
from .validation import PreconditionError


@dataclass(frozen=True)
class CompleteThreshold:
    """
    Threshold completed with the attributes of its runway and airport.

    The runway end id is prefixed with the last two characters of the
    airport locality code, so runway end ``09`` at ``SBGR`` becomes ``GR09``.
    """

    locality: str
    runway_end_id: str
    latitude: float
    longitude: float
    elevation_m: Optional[float]
    surface: str
    length: float
    width: float

    KIND = FeatureKind.COMPLETE_THRESHOLD

    @property
    def has_position(self) -> bool:
        """False when both coordinates are exactly zero, i.e. the position is unset."""
        return not (self.latitude == 0.0 and self.longitude == 0.0)

    @classmethod
    def from_parts(cls, airport: Airport, runway: Runway, threshold: Threshold) -> 'CompleteThreshold':
        """
        Build the composite record for one matching (airport, runway, threshold).

        Args:
            airport: Airport owning the runway
            runway: Runway the threshold belongs to
            threshold: Threshold being completed

        Returns:
            New CompleteThreshold

        Raises:
            PreconditionError: If the airport locality code is shorter than two characters
        """
        if len(airport.locality) < 2:
            raise PreconditionError(
                f"Locality code {airport.locality!r} is too short to derive the runway end id "
                f"for threshold {threshold.runway_end_id!r}"
            )
        return cls(
            locality=airport.locality,
            runway_end_id=f"{airport.locality[-2:]}{threshold.runway_end_id}",
            latitude=threshold.latitude,
            longitude=threshold.longitude,
            elevation_m=threshold.elevation_m,
            surface=runway.surface,
            length=runway.length,
            width=runway.width,
        )
