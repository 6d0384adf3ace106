"""Django Geolib - Distance, unit and sexagesimal coordinate primitives."""

__version__ = '0.1.0'

__all__ = [
    # Distance
    'EARTH_RADIUS_METERS',
    'distance_between',
    'distance_between_strings',
    'get_distance',
    # Units
    'UNIT_FACTORS',
    'convert_unit',
    # Coordinates
    'use_decimal',
    'is_sexagesimal',
    'sexagesimal_to_decimal',
    'decimal_to_sexagesimal',
    # Rounding
    'round_to',
    # Value objects and state
    'GeoPoint',
    'GeoContext',
    # Exceptions
    'GeolibError',
    'CoordinateError',
    'UnrecognizedCoordinateFormat',
    'InvalidSexagesimalFormat',
    'CoordinateOutOfRange',
    'NoDistanceAvailable',
    'UnknownUnit',
    'InvalidAccuracy',
]

_LAZY = {
    'EARTH_RADIUS_METERS': 'distance',
    'distance_between': 'distance',
    'distance_between_strings': 'distance',
    'get_distance': 'distance',
    'UNIT_FACTORS': 'units',
    'convert_unit': 'units',
    'use_decimal': 'coordinates',
    'is_sexagesimal': 'sexagesimal',
    'sexagesimal_to_decimal': 'sexagesimal',
    'decimal_to_sexagesimal': 'sexagesimal',
    'round_to': 'rounding',
    'GeoPoint': 'geo',
    'GeoContext': 'context',
    'GeolibError': 'exceptions',
    'CoordinateError': 'exceptions',
    'UnrecognizedCoordinateFormat': 'exceptions',
    'InvalidSexagesimalFormat': 'exceptions',
    'CoordinateOutOfRange': 'exceptions',
    'NoDistanceAvailable': 'exceptions',
    'UnknownUnit': 'exceptions',
    'InvalidAccuracy': 'exceptions',
}


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in _LAZY:
        from importlib import import_module
        module = import_module(f'django_geolib.{_LAZY[name]}')
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
