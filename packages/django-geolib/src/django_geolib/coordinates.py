"""Coordinate normalization and range validation."""
from decimal import Decimal
import math
import re
from typing import TYPE_CHECKING, Optional

from django_geolib.conf import validate_ranges
from django_geolib.exceptions import CoordinateOutOfRange, UnrecognizedCoordinateFormat
from django_geolib.sexagesimal import is_sexagesimal, sexagesimal_to_decimal

if TYPE_CHECKING:
    from django_geolib.context import GeoContext


DECIMAL_PATTERN = re.compile(r"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
WHITESPACE_PATTERN = re.compile(r"\s+")

LATITUDE_LIMIT = 90
LONGITUDE_LIMIT = 180


def use_decimal(raw, context: Optional['GeoContext'] = None) -> float:
    """Return a coordinate in decimal degrees, converting it if necessary.

    Numbers are returned as floats. Text has its whitespace removed and is
    then read either as a plain decimal (``51.503293``) or as sexagesimal
    notation (``51° 30' 11.86" N``).

    Args:
        raw: Coordinate as number, decimal text or sexagesimal text.
        context: Optional GeoContext used to memoize sexagesimal conversions.

    Returns:
        Signed decimal degrees.

    Raises:
        UnrecognizedCoordinateFormat: If the value is in neither format.
    """
    if isinstance(raw, bool):
        raise UnrecognizedCoordinateFormat(raw)

    if isinstance(raw, (int, float, Decimal)):
        value = float(raw)
        if not math.isfinite(value):
            raise UnrecognizedCoordinateFormat(raw)
        return value

    if not isinstance(raw, str):
        raise UnrecognizedCoordinateFormat(raw)

    text = WHITESPACE_PATTERN.sub('', raw)
    if DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    if is_sexagesimal(text):
        return sexagesimal_to_decimal(text, context=context)

    raise UnrecognizedCoordinateFormat(raw)


def _check_range(value, axis: str, limit: int, enforce: Optional[bool]) -> float:
    value = float(value)
    if enforce is None:
        enforce = validate_ranges()
    if enforce and not -limit <= value <= limit:
        raise CoordinateOutOfRange(value, axis, limit)
    return value


def validate_latitude(value, enforce: Optional[bool] = None) -> float:
    """Check that a decimal latitude lies within [-90, 90].

    Args:
        value: Latitude in decimal degrees.
        enforce: Force the check on or off. None follows
            GEOLIB_VALIDATE_RANGES.

    Raises:
        CoordinateOutOfRange: If the latitude is out of range.
    """
    return _check_range(value, 'latitude', LATITUDE_LIMIT, enforce)


def validate_longitude(value, enforce: Optional[bool] = None) -> float:
    """Check that a decimal longitude lies within [-180, 180]."""
    return _check_range(value, 'longitude', LONGITUDE_LIMIT, enforce)


def split_point(text: str) -> tuple[str, str]:
    """Split a ``"lat,lng"`` string into its two coordinate strings.

    Raises:
        UnrecognizedCoordinateFormat: If the text is not exactly two
            comma-separated values.
    """
    if not isinstance(text, str):
        raise UnrecognizedCoordinateFormat(text)
    parts = text.split(',')
    if len(parts) != 2:
        raise UnrecognizedCoordinateFormat(text)
    return parts[0], parts[1]
