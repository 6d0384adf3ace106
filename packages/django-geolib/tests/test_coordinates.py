"""Tests for coordinate normalization and validation."""
import pytest
from decimal import Decimal
from django.test import override_settings

from django_geolib.context import GeoContext
from django_geolib.coordinates import (
    split_point,
    use_decimal,
    validate_latitude,
    validate_longitude,
)
from django_geolib.exceptions import (
    CoordinateError,
    CoordinateOutOfRange,
    UnrecognizedCoordinateFormat,
)


class TestUseDecimal:
    """Tests for use_decimal()."""

    def test_decimal_text(self):
        """Plain decimal text is returned as a float."""
        assert use_decimal('51.503293') == 51.503293
        assert use_decimal('-0.1195') == -0.1195

    def test_trailing_zeros_are_decimal(self):
        """51.50 is still a plain decimal."""
        assert use_decimal('51.50') == 51.5

    def test_whitespace_is_removed(self):
        """Whitespace around and inside the value is ignored."""
        assert use_decimal('  51.5 ') == 51.5
        assert use_decimal('- 0.5') == -0.5

    def test_numbers_pass_through(self):
        """Numbers are returned as floats."""
        assert use_decimal(7) == 7.0
        assert use_decimal(-0.1195) == -0.1195
        assert use_decimal(Decimal('19.4326')) == 19.4326

    def test_sexagesimal_text(self):
        """Sexagesimal text is converted."""
        assert use_decimal('51° 30\' 11.86" N') == 51.50329444
        assert use_decimal('0° 7\' 10.2" W') == -0.1195

    @pytest.mark.parametrize('value', [
        'abc',
        '51.5abc',
        '51,5',
        '',
        '1e5',
        'nan',
        None,
        True,
        float('nan'),
        float('inf'),
        [51.5],
    ])
    def test_unrecognized_values_raise(self, value):
        """Values in neither format raise."""
        with pytest.raises(UnrecognizedCoordinateFormat):
            use_decimal(value)

    def test_invalid_sexagesimal_is_a_coordinate_error(self):
        """Sexagesimal text with bad minutes fails as a coordinate error."""
        with pytest.raises(CoordinateError):
            use_decimal('51° 75\'')

    def test_context_memoizes_sexagesimal(self):
        """Sexagesimal conversions are cached in the context."""
        context = GeoContext()
        use_decimal('51° 30\' N', context=context)

        assert context.cached_decimal('51°30\'N') == 51.5


class TestRangeValidation:
    """Tests for latitude/longitude range checks."""

    @pytest.mark.parametrize('value', [-90, 0, 51.5, 90])
    def test_valid_latitudes(self, value):
        """Latitudes within [-90, 90] are accepted."""
        assert validate_latitude(value) == float(value)

    @pytest.mark.parametrize('value', [-180, 0, 179.99, 180])
    def test_valid_longitudes(self, value):
        """Longitudes within [-180, 180] are accepted."""
        assert validate_longitude(value) == float(value)

    def test_latitude_out_of_range(self):
        """Latitudes beyond 90 raise."""
        with pytest.raises(CoordinateOutOfRange) as exc_info:
            validate_latitude(90.5)

        assert exc_info.value.axis == 'latitude'
        assert exc_info.value.limit == 90

    def test_longitude_out_of_range(self):
        """Longitudes beyond 180 raise."""
        with pytest.raises(CoordinateOutOfRange) as exc_info:
            validate_longitude(-181)

        assert exc_info.value.axis == 'longitude'

    def test_validation_can_be_disabled(self):
        """GEOLIB_VALIDATE_RANGES=False skips the checks."""
        with override_settings(GEOLIB_VALIDATE_RANGES=False):
            assert validate_latitude(120) == 120.0
            assert validate_longitude(200) == 200.0

    def test_enforce_overrides_setting(self):
        """enforce=True checks even when validation is disabled."""
        with override_settings(GEOLIB_VALIDATE_RANGES=False):
            with pytest.raises(CoordinateOutOfRange):
                validate_latitude(120, enforce=True)

        assert validate_latitude(120, enforce=False) == 120.0


class TestSplitPoint:
    """Tests for split_point()."""

    def test_splits_lat_lng(self):
        """A "lat,lng" string yields two parts."""
        assert split_point('51.503293,-0.1195') == ('51.503293', '-0.1195')

    def test_keeps_sexagesimal_parts(self):
        """Sexagesimal parts are kept intact."""
        assert split_point('51° 30\' N,0° 7\' W') == ('51° 30\' N', '0° 7\' W')

    @pytest.mark.parametrize('value', ['51.5', '1,2,3', None, (51.5, 7.4)])
    def test_malformed_raises(self, value):
        """Anything but two comma-separated values raises."""
        with pytest.raises(UnrecognizedCoordinateFormat):
            split_point(value)
