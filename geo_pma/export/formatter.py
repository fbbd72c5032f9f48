"""
Line templates for the PMA text database.

Each record kind renders to exactly one underscore-delimited line, or to
no line at all for thresholds whose position is unset. Lines end with a
newline and are still unicode here; encoding happens in the writer.
"""

import logging
import math
from decimal import Decimal
from typing import Callable, Dict, Iterable, Iterator, Optional

from ..models.kind import FeatureKind
from ..models.airport import Airport
from ..models.navaid import Vor, Ndb
from ..models.waypoint import Waypoint
from ..models.runway import Threshold
from ..models.complete_threshold import CompleteThreshold
from ..models.validation import UnsupportedKindError

logger = logging.getLogger(__name__)

METERS_TO_FEET = 3.28084
DELIMITER = '_'
PLACEHOLDER = ' '
INT32_MAX = 2 ** 31 - 1
INT32_MIN = -2 ** 31


def format_decimal(value: float) -> str:
    """
    Render a float with its shortest round-trip digits, without exponent.

    Integral values lose their fractional part: 803.0 -> '803',
    -23.627 -> '-23.627', 1e-07 -> '0.0000001'.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    text = format(Decimal(repr(value)), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def elevation_feet(elevation_m: Optional[float]) -> int:
    """Meters to feet, truncated toward zero. Absent elevation is 0."""
    if elevation_m is None:
        return 0
    feet = elevation_m * METERS_TO_FEET
    if math.isnan(feet):
        return 0
    # saturate like a 32-bit integer cast
    return int(max(min(feet, INT32_MAX), INT32_MIN))


def _line(*fields) -> str:
    return DELIMITER.join(str(f) for f in fields) + '\n'


def format_airport(airport: Airport) -> str:
    return _line(
        'Aeródromos',
        airport.operator,
        airport.name.strip(),
        airport.locality,
        'Aeródromo',
        format_decimal(airport.latitude),
        format_decimal(airport.longitude),
        elevation_feet(airport.elevation_m),
    )


def format_vor(vor: Vor) -> str:
    return _line(
        vor.vor_type.value,
        f"{vor.frequency:.2f}",
        vor.name,
        vor.ident,
        'Padrão',
        format_decimal(vor.latitude),
        format_decimal(vor.longitude),
        0,
    )


def format_ndb(ndb: Ndb) -> str:
    return _line(
        ndb.subtype,
        ndb.name,
        format_decimal(ndb.frequency),
        ndb.code_id,
        'Padrão',
        format_decimal(ndb.latitude),
        format_decimal(ndb.longitude),
        0,
    )


def format_waypoint(waypoint: Waypoint) -> str:
    # The fix has no name: the name column gets the placeholder.
    return _line(
        'Fixos',
        waypoint.code_type.replace('_', '-'),
        PLACEHOLDER,
        waypoint.ident,
        'Padrão',
        format_decimal(waypoint.latitude),
        format_decimal(waypoint.longitude),
        0,
    )


def format_complete_threshold(threshold: CompleteThreshold) -> str:
    return _line(
        threshold.locality,
        threshold.surface,
        f"{format_decimal(threshold.length)}x{format_decimal(threshold.width)}",
        threshold.runway_end_id,
        'Padrão',
        format_decimal(threshold.latitude),
        format_decimal(threshold.longitude),
        elevation_feet(threshold.elevation_m),
    )


LINE_FORMATTERS: Dict[FeatureKind, Callable[..., str]] = {
    FeatureKind.AIRPORT: format_airport,
    FeatureKind.VOR: format_vor,
    FeatureKind.NDB: format_ndb,
    FeatureKind.WAYPOINT: format_waypoint,
    FeatureKind.COMPLETE_THRESHOLD: format_complete_threshold,
}

EMITTABLE_KINDS = tuple(LINE_FORMATTERS)


def format_line(record) -> Optional[str]:
    """
    Render one record as its PMA line.

    Args:
        record: Any record with a KIND attribute

    Returns:
        The line including its trailing newline, or None when the record is
        a threshold whose latitude and longitude are both exactly zero

    Raises:
        UnsupportedKindError: If the record kind has no line template
    """
    kind = getattr(record, 'KIND', None)
    if isinstance(record, (Threshold, CompleteThreshold)) and not record.has_position:
        return None
    formatter = LINE_FORMATTERS.get(kind)
    if formatter is None:
        raise UnsupportedKindError(f"No line template for {type(record).__name__} records")
    return formatter(record)


def format_lines(records: Iterable) -> Iterator[str]:
    """Yield the lines of all records that produce one, in input order."""
    for record in records:
        line = format_line(record)
        if line is None:
            logger.debug(f"Skipping {record} without position")
            continue
        yield line
