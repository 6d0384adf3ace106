"""Exceptions for django-geolib."""


class GeolibError(ValueError):
    """Base exception for geolib errors."""
    pass


class CoordinateError(GeolibError):
    """Base exception for coordinates that cannot be used."""
    pass


class UnrecognizedCoordinateFormat(CoordinateError):
    """Raised when a value is neither decimal nor sexagesimal."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unrecognized coordinate format: {value!r}")


class InvalidSexagesimalFormat(CoordinateError):
    """Raised when sexagesimal text does not match the expected notation."""

    def __init__(self, value, reason: str = ''):
        self.value = value
        self.reason = reason
        message = f"Invalid sexagesimal coordinate: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class CoordinateOutOfRange(CoordinateError):
    """Raised when a latitude or longitude falls outside its valid range."""

    def __init__(self, value, axis: str, limit: int):
        self.value = value
        self.axis = axis
        self.limit = limit
        super().__init__(
            f"{axis.capitalize()} {value} is out of range [-{limit}, {limit}]"
        )


class NoDistanceAvailable(GeolibError):
    """Raised when a unit conversion has no distance to convert."""

    def __init__(self):
        super().__init__(
            "No distance given and no distance has been computed yet"
        )


class UnknownUnit(GeolibError):
    """Raised in strict mode when a distance unit is not supported."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Unknown distance unit '{unit}'")


class InvalidAccuracy(GeolibError):
    """Raised when a distance accuracy is not a positive number."""

    def __init__(self, accuracy):
        self.accuracy = accuracy
        super().__init__(f"Accuracy must be a positive number, got {accuracy!r}")


class GeolibConfigError(GeolibError):
    """Raised when a GEOLIB_* setting is invalid."""
    pass
