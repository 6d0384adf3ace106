"""Django app configuration for django-geolib."""
from django.apps import AppConfig


class DjangoGeolibConfig(AppConfig):
    """App configuration for django-geolib."""

    name = 'django_geolib'
    verbose_name = 'Django Geolib'

    def ready(self):
        # Fail at startup rather than on first use when a GEOLIB_* setting is invalid
        from django_geolib import conf

        conf.get_unit_precision()
        conf.get_default_accuracy()
        conf.strict_units()
        conf.validate_ranges()
        conf.get_cache_size()
