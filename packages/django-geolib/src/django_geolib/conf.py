"""Configuration for django-geolib.

All settings are optional. When Django settings are not configured
(the library used outside a project) the defaults apply.
"""

from django.conf import settings

from django_geolib.exceptions import GeolibConfigError


DEFAULTS = {
    "GEOLIB_UNIT_PRECISION": 4,
    "GEOLIB_DEFAULT_ACCURACY": 1,
    "GEOLIB_STRICT_UNITS": False,
    "GEOLIB_VALIDATE_RANGES": True,
    "GEOLIB_CACHE_SIZE": 256,
}


def _get_setting(name: str):
    if not settings.configured:
        return DEFAULTS[name]
    value = getattr(settings, name, None)
    if value is None:
        return DEFAULTS[name]
    return value


def _get_non_negative_int(name: str) -> int:
    value = _get_setting(name)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise GeolibConfigError(
            f"{name} must be a non-negative integer, got {value!r}"
        )
    return value


def _get_bool(name: str) -> bool:
    value = _get_setting(name)
    if not isinstance(value, bool):
        raise GeolibConfigError(f"{name} must be True or False, got {value!r}")
    return value


def get_unit_precision() -> int:
    """Default number of decimal places for unit conversions.

    Reads GEOLIB_UNIT_PRECISION from Django settings.
    """
    return _get_non_negative_int("GEOLIB_UNIT_PRECISION")


def get_default_accuracy():
    """Default distance accuracy in meters.

    Reads GEOLIB_DEFAULT_ACCURACY from Django settings.

    Raises:
        GeolibConfigError: If the value is not a positive number
    """
    value = _get_setting("GEOLIB_DEFAULT_ACCURACY")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise GeolibConfigError(
            f"GEOLIB_DEFAULT_ACCURACY must be a positive number, got {value!r}"
        )
    return value


def strict_units() -> bool:
    """Whether unknown units raise instead of passing the value through."""
    return _get_bool("GEOLIB_STRICT_UNITS")


def validate_ranges() -> bool:
    """Whether latitude/longitude range checks are enforced."""
    return _get_bool("GEOLIB_VALIDATE_RANGES")


def get_cache_size() -> int:
    """Maximum number of entries kept in each GeoContext cache."""
    return _get_non_negative_int("GEOLIB_CACHE_SIZE")
