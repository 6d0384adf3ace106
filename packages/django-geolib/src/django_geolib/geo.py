"""GeoPoint value object for geographic coordinates."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, TYPE_CHECKING

from .coordinates import split_point, use_decimal, validate_latitude, validate_longitude
from .distance import distance_between
from .sexagesimal import decimal_to_sexagesimal

if TYPE_CHECKING:
    from .context import GeoContext


def _as_decimal(raw, value: float) -> Decimal:
    if isinstance(raw, Decimal):
        return raw
    return Decimal(str(value))


@dataclass(frozen=True)
class GeoPoint:
    """Immutable geographic coordinate point.

    Represents a latitude/longitude coordinate pair with great-circle
    distance calculation. Coordinates may be given as numbers, decimal
    text or sexagesimal text and are stored as Decimal degrees.
    """

    latitude: Decimal
    longitude: Decimal

    def __post_init__(self) -> None:
        """Normalize coordinates to Decimal and check their ranges."""
        latitude = validate_latitude(use_decimal(self.latitude))
        longitude = validate_longitude(use_decimal(self.longitude))
        # Use object.__setattr__ since dataclass is frozen
        object.__setattr__(self, 'latitude', _as_decimal(self.latitude, latitude))
        object.__setattr__(self, 'longitude', _as_decimal(self.longitude, longitude))

    @classmethod
    def from_string(cls, text: str) -> 'GeoPoint':
        """Create a GeoPoint from a ``"lat,lng"`` string."""
        latitude, longitude = split_point(text)
        return cls(latitude=latitude, longitude=longitude)

    def distance_to(
        self,
        other: 'GeoPoint',
        accuracy=None,
        context: Optional['GeoContext'] = None,
    ) -> int:
        """Calculate the great-circle distance to another point.

        Args:
            other: The target GeoPoint to measure distance to.
            accuracy: Round to a multiple of this many meters.
            context: GeoContext that records the result as its last distance.

        Returns:
            Distance in whole meters.
        """
        return distance_between(
            self.latitude,
            self.longitude,
            other.latitude,
            other.longitude,
            accuracy=accuracy,
            context=context,
        )

    def to_sexagesimal(self) -> tuple[str, str]:
        """Return (latitude, longitude) in sexagesimal notation."""
        return (
            decimal_to_sexagesimal(self.latitude),
            decimal_to_sexagesimal(self.longitude),
        )

    def __str__(self) -> str:
        """Return human-readable string representation."""
        return f"({self.latitude}, {self.longitude})"

    def __repr__(self) -> str:
        """Return debuggable representation."""
        return f"GeoPoint(latitude={self.latitude!r}, longitude={self.longitude!r})"
