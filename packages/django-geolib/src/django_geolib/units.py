"""Distance unit conversion."""
import logging
from typing import TYPE_CHECKING, Optional

from django_geolib.conf import get_unit_precision, strict_units
from django_geolib.exceptions import NoDistanceAvailable, UnknownUnit
from django_geolib.rounding import round_to

if TYPE_CHECKING:
    from django_geolib.context import GeoContext


logger = logging.getLogger(__name__)


# Multiply a distance in meters by the factor to get the unit
UNIT_FACTORS = {
    'm': 1,
    'km': 1 / 1000,
    'cm': 100,
    'mm': 1000,
    'mi': 1 / 1609.344,  # statute mile
    'sm': 1 / 1852.216,  # nautical mile
    'ft': 100 / 30.48,
    'in': 100 / 2.54,
    'yd': 1 / 0.9144,
}


def convert_unit(
    unit: str = 'm',
    distance=None,
    precision: Optional[int] = None,
    context: Optional['GeoContext'] = None,
):
    """
    Convert a distance in meters to another unit.

    Args:
        unit: Target unit, one of UNIT_FACTORS (defaults to meters)
        distance: Distance in meters. When missing or zero, the last distance
            computed through ``context`` is used.
        precision: Decimal places to round to (GEOLIB_UNIT_PRECISION if None)
        context: GeoContext holding the last computed distance

    Returns:
        The converted distance. For an unknown unit the meter value is
        returned unconverted, unless GEOLIB_STRICT_UNITS is enabled.

    Raises:
        NoDistanceAvailable: If no distance was given and none was computed
        UnknownUnit: If the unit is unknown and GEOLIB_STRICT_UNITS is True

    Usage:
        convert_unit('km', 1000)        # 1.0
        convert_unit('mi', 1609.344)    # 1.0
        convert_unit('ft', 10, 2)       # 32.81
    """
    if not distance:
        if context is None:
            raise NoDistanceAvailable()
        distance = context.resolve_distance()

    unit = unit or 'm'
    if precision is None:
        precision = get_unit_precision()

    factor = UNIT_FACTORS.get(unit)
    if factor is None:
        if strict_units():
            raise UnknownUnit(unit)
        logger.warning(f"Unknown distance unit '{unit}', returning meters unconverted")
        return distance

    return round_to(float(distance) * factor, precision)
