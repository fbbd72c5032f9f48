from enum import Enum


class FeatureKind(Enum):
    """
    Closed set of feature categories handled in one run.

    Each kind carries the token used both as the GeoServer layer name
    (``ICA:<token>``) and in the output file name (``aisweb_<token>.txt``),
    plus the label used in the confirmation message.
    """

    AIRPORT = ('airport', 'Airport')
    VOR = ('vor', 'VOR')
    NDB = ('ndb', 'NDB')
    WAYPOINT = ('waypoint', 'waypoints')
    THRESHOLD = ('rwydirection', 'runway directions')
    RUNWAY = ('runway_v2', 'runways')
    COMPLETE_THRESHOLD = ('cabeceiras', 'Thresholds')

    def __init__(self, token: str, label: str):
        self.token = token
        self.label = label

    @property
    def typename(self) -> str:
        """GeoServer feature type name."""
        return f"ICA:{self.token}"

    @property
    def filename(self) -> str:
        """Output text file name."""
        return f"aisweb_{self.token}.txt"

    @property
    def is_derived(self) -> bool:
        """True for kinds built by the join rather than fetched."""
        return self is FeatureKind.COMPLETE_THRESHOLD

    @classmethod
    def from_token(cls, token: str) -> 'FeatureKind':
        """
        Look up a kind by its token.

        Raises:
            ValueError: If no kind uses this token
        """
        for kind in cls:
            if kind.token == token:
                return kind
        allowed = ', '.join(kind.token for kind in cls)
        raise ValueError(f"Unknown feature kind '{token}'. Allowed: {allowed}")

    def __str__(self) -> str:
        return self.token
