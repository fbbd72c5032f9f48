"""
Threshold completion.

A threshold is completed by every (airport, runway) pair where the runway
carries the threshold's runway key and the airport carries the runway's
airport key. Keys are not assumed unique upstream, so one threshold may be
completed several times; every match is kept.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from ..models.airport import Airport
from ..models.runway import Runway, Threshold
from ..models.complete_threshold import CompleteThreshold

logger = logging.getLogger(__name__)


def _index_by(records: Iterable, key_func) -> Dict[int, List[Tuple[int, object]]]:
    """Map key -> [(position, record), ...] keeping feed order."""
    index: Dict[int, List[Tuple[int, object]]] = {}
    for position, record in enumerate(records):
        index.setdefault(key_func(record), []).append((position, record))
    return index


def join_thresholds(thresholds: Iterable[Threshold],
                    runways: Iterable[Runway],
                    airports: Iterable[Airport]) -> List[CompleteThreshold]:
    """
    Build the CompleteThreshold records for all thresholds.

    Output order is the order of the nested iteration threshold, then
    airport, then runway: for each threshold its matches are ordered by the
    airport's position in the feed, then by the runway's position.

    Args:
        thresholds: Thresholds in feed order
        runways: Runways in feed order
        airports: Airports in feed order; a missing airport key counts as 0

    Returns:
        One CompleteThreshold per matching (threshold, airport, runway) triple

    Raises:
        PreconditionError: If a matched airport has a locality code shorter than two characters
    """
    runways_by_key = _index_by(runways, lambda r: r.runway_key)
    airports_by_key = _index_by(airports, lambda a: a.effective_airport_key)

    completed: List[CompleteThreshold] = []
    unmatched = 0
    for threshold in thresholds:
        matches = []
        for runway_pos, runway in runways_by_key.get(threshold.runway_key, ()):
            for airport_pos, airport in airports_by_key.get(runway.airport_key, ()):
                matches.append((airport_pos, runway_pos, airport, runway))
        if not matches:
            unmatched += 1
            continue
        matches.sort(key=lambda m: (m[0], m[1]))
        for _, _, airport, runway in matches:
            completed.append(CompleteThreshold.from_parts(airport, runway, threshold))

    logger.info(f"Completed {len(completed)} thresholds ({unmatched} thresholds without runway or airport)")
    return completed
