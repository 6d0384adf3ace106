"""Conversion between decimal degrees and sexagesimal notation.

Sexagesimal coordinates look like ``51° 30' 11.86" N``: degrees and
minutes are required, seconds (with up to two decimals) and the hemisphere
letter are optional. ``O`` (Ost) is accepted as a synonym for East.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re
from typing import TYPE_CHECKING, Optional

from django_geolib.exceptions import InvalidSexagesimalFormat, UnrecognizedCoordinateFormat
from django_geolib.rounding import round_to

if TYPE_CHECKING:
    from django_geolib.context import GeoContext


SEXAGESIMAL_PATTERN = re.compile(
    r"""
    (?P<degrees>[0-9]{1,3})°\s*
    (?P<minutes>[0-9]{1,3})'\s*
    (?:(?P<seconds>[0-9]{1,3}(?:\.[0-9]{1,2})?)"\s*)?
    (?P<hemisphere>[NEOSW]?)
    """,
    re.VERBOSE,
)

NEGATIVE_HEMISPHERES = ('S', 'W')

DECIMAL_PLACES = 8


def is_sexagesimal(value) -> bool:
    """Check whether a value is a sexagesimal coordinate string."""
    if not isinstance(value, str):
        return False
    return SEXAGESIMAL_PATTERN.fullmatch(value) is not None


def sexagesimal_to_decimal(text: str, context: Optional['GeoContext'] = None) -> float:
    """Convert a sexagesimal coordinate to decimal degrees.

    The result is rounded to 8 decimal places. South and West are negative.

    Args:
        text: Coordinate such as ``51° 30' 11.86" N``.
        context: Optional GeoContext used to memoize the conversion.

    Returns:
        The coordinate in signed decimal degrees.

    Raises:
        InvalidSexagesimalFormat: If the text does not match the notation,
            or minutes/seconds are 60 or more.
    """
    if not isinstance(text, str):
        raise InvalidSexagesimalFormat(text)
    if context is not None:
        cached = context.cached_decimal(text)
        if cached is not None:
            return cached

    match = SEXAGESIMAL_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidSexagesimalFormat(text)

    degrees = Decimal(match.group('degrees'))
    minutes = Decimal(match.group('minutes'))
    seconds = Decimal(match.group('seconds') or '0')
    if minutes >= 60:
        raise InvalidSexagesimalFormat(text, "minutes must be below 60")
    if seconds >= 60:
        raise InvalidSexagesimalFormat(text, "seconds must be below 60")

    value = round_to(degrees + minutes / 60 + seconds / 3600, DECIMAL_PLACES)
    if match.group('hemisphere') in NEGATIVE_HEMISPHERES:
        value = -value

    if context is not None:
        context.store_decimal(text, value)
    return value


def decimal_to_sexagesimal(value, context: Optional['GeoContext'] = None) -> str:
    """Convert decimal degrees to sexagesimal text.

    The sign stays on the degree field and no hemisphere letter is added,
    so ``-0.5`` becomes ``-0° 30' 0.00"``. Seconds are rounded to two
    decimals; a rounded value of 60 carries into the minutes.

    Raises:
        UnrecognizedCoordinateFormat: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise UnrecognizedCoordinateFormat(value)
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise UnrecognizedCoordinateFormat(value) from exc
    if not number.is_finite():
        raise UnrecognizedCoordinateFormat(value)

    if context is not None:
        cached = context.cached_sexagesimal(value)
        if cached is not None:
            return cached

    sign = '-' if number < 0 else ''
    number = abs(number)

    degrees = int(number)
    total_minutes = (number - degrees) * 60
    minutes = int(total_minutes)
    seconds = ((total_minutes - minutes) * 60).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)

    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1

    text = f"{sign}{degrees}° {minutes}' {seconds}\""

    if context is not None:
        context.store_sexagesimal(value, text)
    return text
