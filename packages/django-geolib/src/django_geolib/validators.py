"""Django validators for coordinate fields.

Usage:
    class Place(models.Model):
        latitude = models.CharField(
            max_length=32, validators=[validate_latitude_value]
        )
"""
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from django_geolib.coordinates import use_decimal, validate_latitude, validate_longitude
from django_geolib.exceptions import (
    CoordinateError,
    CoordinateOutOfRange,
    InvalidSexagesimalFormat,
)
from django_geolib.sexagesimal import sexagesimal_to_decimal


def validate_sexagesimal(value):
    """Accept only sexagesimal text such as 51° 30' 11.86" N."""
    try:
        sexagesimal_to_decimal(value)
    except InvalidSexagesimalFormat as exc:
        raise ValidationError(
            _("%(value)s is not a valid degrees/minutes/seconds coordinate."),
            code='invalid_sexagesimal',
            params={'value': value},
        ) from exc


def validate_coordinate(value):
    """Accept a decimal or sexagesimal coordinate."""
    try:
        use_decimal(value)
    except CoordinateError as exc:
        raise ValidationError(
            _("%(value)s is not a valid coordinate."),
            code='invalid_coordinate',
            params={'value': value},
        ) from exc


def _validate_axis(value, check):
    try:
        check(use_decimal(value), enforce=True)
    except CoordinateOutOfRange as exc:
        raise ValidationError(
            _("%(value)s is outside the valid %(axis)s range."),
            code='out_of_range',
            params={'value': value, 'axis': exc.axis},
        ) from exc
    except CoordinateError as exc:
        raise ValidationError(
            _("%(value)s is not a valid coordinate."),
            code='invalid_coordinate',
            params={'value': value},
        ) from exc


def validate_latitude_value(value):
    """Accept a coordinate that is a valid latitude."""
    _validate_axis(value, validate_latitude)


def validate_longitude_value(value):
    """Accept a coordinate that is a valid longitude."""
    _validate_axis(value, validate_longitude)
