"""Great-circle distance between two coordinates."""
import logging
import math
from typing import TYPE_CHECKING, Optional

from django_geolib.conf import get_default_accuracy
from django_geolib.coordinates import (
    split_point,
    use_decimal,
    validate_latitude,
    validate_longitude,
)
from django_geolib.exceptions import UnrecognizedCoordinateFormat
from django_geolib.rounding import quantize_distance, round_to

if TYPE_CHECKING:
    from django_geolib.context import GeoContext


logger = logging.getLogger(__name__)


# WGS-84 equatorial radius in meters
EARTH_RADIUS_METERS = 6378137


def _central_angle(start_lat: float, start_lng: float, end_lat: float, end_lng: float) -> float:
    """Central angle in radians, by the spherical law of cosines."""
    start_lat = math.radians(start_lat)
    start_lng = math.radians(start_lng)
    end_lat = math.radians(end_lat)
    end_lng = math.radians(end_lng)

    cosine = (
        math.sin(end_lat) * math.sin(start_lat)
        + math.cos(end_lat) * math.cos(start_lat) * math.cos(start_lng - end_lng)
    )
    # Identical points can drift just past 1.0
    cosine = max(-1.0, min(1.0, cosine))
    return math.acos(cosine)


def distance_between(
    start_lat,
    start_lng,
    end_lat,
    end_lng,
    accuracy=None,
    context: Optional['GeoContext'] = None,
) -> int:
    """
    Calculate the distance between two points given as separate coordinates.

    Each coordinate may be a number, decimal text or sexagesimal text, so
    formats can be mixed freely.

    Args:
        start_lat: Latitude of the start point
        start_lng: Longitude of the start point
        end_lat: Latitude of the end point
        end_lng: Longitude of the end point
        accuracy: Round the result to a multiple of this many meters
            (GEOLIB_DEFAULT_ACCURACY if None)
        context: GeoContext that records the result as its last distance

    Returns:
        Distance in whole meters

    Raises:
        UnrecognizedCoordinateFormat: If a coordinate cannot be read
        CoordinateOutOfRange: If a coordinate is outside its valid range
        InvalidAccuracy: If accuracy is not positive

    Usage:
        distance_between(51.5, 7.4, "51° 28' 24\\" N", "7.5")
        distance_between(51.5, 7.4, 51.4, 7.5, accuracy=100)
    """
    start_lat = validate_latitude(use_decimal(start_lat, context=context))
    start_lng = validate_longitude(use_decimal(start_lng, context=context))
    end_lat = validate_latitude(use_decimal(end_lat, context=context))
    end_lng = validate_longitude(use_decimal(end_lng, context=context))

    if accuracy is None:
        accuracy = get_default_accuracy()

    angle = _central_angle(start_lat, start_lng, end_lat, end_lng)
    meters = round_to(angle * EARTH_RADIUS_METERS, 0)
    distance = quantize_distance(meters, accuracy)

    logger.debug(
        f"Distance ({start_lat}, {start_lng}) -> ({end_lat}, {end_lng}): "
        f"{distance} m (accuracy {accuracy} m)"
    )

    if context is not None:
        context.remember_distance(distance)
    return distance


def distance_between_strings(
    start: str,
    end: str,
    accuracy=None,
    context: Optional['GeoContext'] = None,
) -> int:
    """Calculate the distance between two ``"lat,lng"`` strings.

    Usage:
        distance_between_strings("51.503293,7.482374", "51.473453,7.50324")
    """
    start_lat, start_lng = split_point(start)
    end_lat, end_lng = split_point(end)
    return distance_between(
        start_lat, start_lng, end_lat, end_lng, accuracy=accuracy, context=context
    )


def _point_components(point):
    if isinstance(point, str):
        return split_point(point)
    if hasattr(point, 'latitude') and hasattr(point, 'longitude'):
        return point.latitude, point.longitude
    if isinstance(point, (tuple, list)) and len(point) == 2:
        return point[0], point[1]
    raise UnrecognizedCoordinateFormat(point)


def get_distance(
    start,
    end,
    accuracy=None,
    context: Optional['GeoContext'] = None,
) -> int:
    """Calculate the distance between two points in any supported form.

    A point may be a ``"lat,lng"`` string, a ``(lat, lng)`` pair or a
    GeoPoint.
    """
    start_lat, start_lng = _point_components(start)
    end_lat, end_lng = _point_components(end)
    return distance_between(
        start_lat, start_lng, end_lat, end_lng, accuracy=accuracy, context=context
    )
