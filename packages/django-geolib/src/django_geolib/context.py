"""Caller-owned state for geolib operations."""
from collections import OrderedDict
from dataclasses import dataclass, field
import logging
from typing import Optional

from django_geolib.conf import get_cache_size
from django_geolib.exceptions import NoDistanceAvailable


logger = logging.getLogger(__name__)


@dataclass
class GeoContext:
    """Holds the last computed distance and the conversion caches.

    Nothing in django-geolib keeps module-level state. Callers that want
    to convert "the distance I just computed" or memoize conversions create
    a context and pass it along (or use the bound methods below). Contexts
    are independent of each other.

    Usage:
        geo = GeoContext()
        geo.get_distance("51.5,7.4", "51.4,7.5", accuracy=10)
        geo.convert_unit("km")  # converts the distance computed above
    """

    last_distance: Optional[int] = None
    max_cache_size: int = field(default_factory=get_cache_size)
    _decimal_cache: OrderedDict = field(
        default_factory=OrderedDict, init=False, repr=False, compare=False
    )
    _sexagesimal_cache: OrderedDict = field(
        default_factory=OrderedDict, init=False, repr=False, compare=False
    )

    def remember_distance(self, meters: int) -> int:
        """Store a computed distance as the last distance."""
        self.last_distance = meters
        return meters

    def resolve_distance(self, distance=None):
        """Return ``distance``, or the last distance when it is missing or zero.

        Raises:
            NoDistanceAvailable: If no distance was given or computed
        """
        if distance:
            return distance
        if self.last_distance is None:
            raise NoDistanceAvailable()
        return self.last_distance

    def cached_decimal(self, text: str) -> Optional[float]:
        """Return the cached decimal value of sexagesimal ``text``, if any."""
        return self._lookup(self._decimal_cache, text)

    def store_decimal(self, text: str, value: float) -> float:
        return self._store(self._decimal_cache, text, value)

    def cached_sexagesimal(self, value) -> Optional[str]:
        """Return the cached sexagesimal text for decimal ``value``, if any."""
        return self._lookup(self._sexagesimal_cache, value)

    def store_sexagesimal(self, value, text: str) -> str:
        return self._store(self._sexagesimal_cache, value, text)

    def clear(self) -> None:
        """Forget the last distance and empty both caches."""
        self.last_distance = None
        self._decimal_cache.clear()
        self._sexagesimal_cache.clear()

    def _lookup(self, cache: OrderedDict, key):
        if key not in cache:
            return None
        cache.move_to_end(key)
        logger.debug(f"Conversion cache hit for {key!r}")
        return cache[key]

    def _store(self, cache: OrderedDict, key, value):
        if self.max_cache_size == 0:
            return value
        cache[key] = value
        cache.move_to_end(key)
        while len(cache) > self.max_cache_size:
            cache.popitem(last=False)
        return value

    # Bound operations

    def get_distance(self, start, end, accuracy=None) -> int:
        from django_geolib.distance import get_distance
        return get_distance(start, end, accuracy=accuracy, context=self)

    def distance_between(self, start_lat, start_lng, end_lat, end_lng, accuracy=None) -> int:
        from django_geolib.distance import distance_between
        return distance_between(
            start_lat, start_lng, end_lat, end_lng, accuracy=accuracy, context=self
        )

    def distance_between_strings(self, start: str, end: str, accuracy=None) -> int:
        from django_geolib.distance import distance_between_strings
        return distance_between_strings(start, end, accuracy=accuracy, context=self)

    def convert_unit(self, unit: str = 'm', distance=None, precision: Optional[int] = None):
        from django_geolib.units import convert_unit
        return convert_unit(unit, distance, precision, context=self)

    def use_decimal(self, raw) -> float:
        from django_geolib.coordinates import use_decimal
        return use_decimal(raw, context=self)

    def sexagesimal_to_decimal(self, text: str) -> float:
        from django_geolib.sexagesimal import sexagesimal_to_decimal
        return sexagesimal_to_decimal(text, context=self)

    def decimal_to_sexagesimal(self, value) -> str:
        from django_geolib.sexagesimal import decimal_to_sexagesimal
        return decimal_to_sexagesimal(value, context=self)
