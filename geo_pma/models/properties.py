"""
Typed accessors for GeoJSON ``properties`` objects.

Each accessor raises FeatureDecodeError when a property is missing or has
the wrong JSON type, so a feature either decodes completely or not at all.
Unknown extra properties are ignored.
"""

import logging
import math
from typing import Any, Dict, Optional

from .validation import FeatureDecodeError

logger = logging.getLogger(__name__)

MAX_KEY = 65535

_MISSING = object()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_key(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_KEY


def _lookup(properties: Dict[str, Any], name: str, kind: str) -> Any:
    value = properties.get(name, _MISSING)
    if value is _MISSING or value is None:
        raise FeatureDecodeError(kind, name, "missing required property")
    return value


def _finite(value: Any, name: str, kind: str) -> float:
    # json accepts NaN and Infinity literals, which are not valid JSON numbers
    try:
        result = float(value)
    except OverflowError:
        raise FeatureDecodeError(kind, name, "expected a finite number", value) from None
    if not math.isfinite(result):
        raise FeatureDecodeError(kind, name, "expected a finite number", value)
    return result


def get_str(properties: Dict[str, Any], name: str, kind: str) -> str:
    value = _lookup(properties, name, kind)
    if not isinstance(value, str):
        raise FeatureDecodeError(kind, name, "expected a string", value)
    return value


def get_float(properties: Dict[str, Any], name: str, kind: str) -> float:
    value = _lookup(properties, name, kind)
    if not _is_number(value):
        raise FeatureDecodeError(kind, name, "expected a number", value)
    return _finite(value, name, kind)


def get_key(properties: Dict[str, Any], name: str, kind: str) -> int:
    value = _lookup(properties, name, kind)
    if not _is_key(value):
        raise FeatureDecodeError(kind, name, f"expected an integer key between 0 and {MAX_KEY}", value)
    return value


def get_optional_float(properties: Dict[str, Any], name: str, kind: str) -> Optional[float]:
    value = properties.get(name)
    if value is None:
        return None
    if not _is_number(value):
        raise FeatureDecodeError(kind, name, "expected a number or null", value)
    return _finite(value, name, kind)


def get_optional_key(properties: Dict[str, Any], name: str, kind: str) -> Optional[int]:
    value = properties.get(name)
    if value is None:
        return None
    if not _is_key(value):
        raise FeatureDecodeError(kind, name, f"expected an integer key between 0 and {MAX_KEY} or null", value)
    return value


def get_informational_int(properties: Dict[str, Any], name: str, kind: str) -> Optional[int]:
    """
    Decode a property that is kept for reference only and never written.

    Any non-negative integer is accepted; a value of another type is
    dropped instead of failing the feature.
    """
    value = properties.get(name)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    logger.debug(f"{kind}.{name}: ignoring unexpected value {value!r}")
    return None
