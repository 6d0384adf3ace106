"""Rounding helpers shared by distance and unit conversion."""
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

from django_geolib.exceptions import InvalidAccuracy


Number = Union[int, float, Decimal]


def _as_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # Go through str so 0.1 stays 0.1 instead of its binary expansion
    return Decimal(str(value))


def _quantize(number: Decimal, exponent: Decimal) -> Decimal:
    """Quantize with enough precision for every digit the result keeps."""
    with localcontext() as ctx:
        needed = number.adjusted() - exponent.adjusted() + 2
        ctx.prec = max(ctx.prec, needed)
        return number.quantize(exponent, rounding=ROUND_HALF_UP)


def round_to(value: Number, places: int) -> float:
    """Round a value to a number of decimal places.

    Halves are rounded away from zero (2.5 -> 3, -2.5 -> -3), unlike the
    builtin round() which rounds them to even. A negative number of places
    rounds to tens, hundreds and so on. Infinities and NaN are returned
    unchanged.

    Args:
        value: The number to round.
        places: Decimal places to keep.

    Returns:
        The rounded value as a float.
    """
    number = _as_decimal(value)
    if not number.is_finite():
        return float(number)
    return float(_quantize(number, Decimal(1).scaleb(-places)))


def quantize_distance(distance: Number, accuracy: Number = 1) -> int:
    """Round a distance to the nearest multiple of ``accuracy``.

    Raises:
        InvalidAccuracy: If accuracy is not a positive, finite number
    """
    if isinstance(accuracy, bool) or not isinstance(accuracy, (int, float, Decimal)):
        raise InvalidAccuracy(accuracy)

    step = _as_decimal(accuracy)
    if not step.is_finite() or step <= 0:
        raise InvalidAccuracy(accuracy)

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _as_decimal(distance).adjusted() - step.adjusted() + 2)
        steps = _quantize(_as_decimal(distance) / step, Decimal(1))
        return int(steps * step)
