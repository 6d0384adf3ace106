"""Pytest configuration for django-geolib tests."""
import django
from django.conf import settings


def pytest_configure():
    """Configure Django settings for pytest."""
    if not settings.configured:
        settings.configure(
            DEBUG=True,
            INSTALLED_APPS=[
                'django_geolib',
            ],
            USE_TZ=True,
            GEOLIB_UNIT_PRECISION=4,
            GEOLIB_DEFAULT_ACCURACY=1,
            GEOLIB_STRICT_UNITS=False,
            GEOLIB_VALIDATE_RANGES=True,
            GEOLIB_CACHE_SIZE=256,
        )
    django.setup()
