"""Tests for rounding helpers."""
import pytest
from decimal import Decimal

from django_geolib.exceptions import InvalidAccuracy
from django_geolib.rounding import quantize_distance, round_to


class TestRoundTo:
    """Tests for round_to()."""

    def test_rounds_to_places(self):
        """Values are rounded to the requested decimal places."""
        assert round_to(1234.56789, 4) == 1234.5679
        assert round_to(1234.56789, 2) == 1234.57
        assert round_to(1234.56789, 0) == 1235.0

    def test_halves_round_away_from_zero(self):
        """Halves round away from zero, not to even."""
        assert round_to(2.5, 0) == 3.0
        assert round_to(-2.5, 0) == -3.0
        assert round_to(0.125, 2) == 0.13

    def test_uses_decimal_representation_of_floats(self):
        """1.005 rounds up because it is read as written."""
        assert round_to(1.005, 2) == 1.01

    def test_negative_places_round_to_tens(self):
        """Negative places round to tens, hundreds and so on."""
        assert round_to(1234, -2) == 1200.0
        assert round_to(1250, -2) == 1300.0

    def test_accepts_decimal(self):
        """Decimal input is supported."""
        assert round_to(Decimal('1.23456'), 3) == 1.235

    def test_returns_float(self):
        """Result is always a float."""
        assert isinstance(round_to(3, 2), float)

    def test_more_places_than_default_precision(self):
        """Large values with many places do not overflow decimal precision."""
        assert round_to(12345678901234567890.0, 10) == 12345678901234567890.0
        assert round_to(1.0, 30) == 1.0

    def test_non_finite_values_pass_through(self):
        """Infinity is returned unchanged."""
        assert round_to(float('inf'), 2) == float('inf')

    @pytest.mark.parametrize('value', [0.1, 2.675, -17.123456789, 51.50329444])
    def test_is_idempotent(self, value):
        """Rounding twice gives the same result as rounding once."""
        once = round_to(value, 4)
        assert round_to(once, 4) == once


class TestQuantizeDistance:
    """Tests for quantize_distance()."""

    def test_default_accuracy_keeps_meters(self):
        """Accuracy of 1 keeps whole meters."""
        assert quantize_distance(279352) == 279352

    def test_rounds_to_multiple_of_accuracy(self):
        """Distance is rounded to the nearest multiple."""
        assert quantize_distance(279352, 100) == 279400
        assert quantize_distance(279349, 100) == 279300
        assert quantize_distance(279352, 1000) == 279000

    def test_half_step_rounds_up(self):
        """Exactly half a step rounds up."""
        assert quantize_distance(250, 100) == 300

    def test_fractional_accuracy(self):
        """Fractional accuracy is truncated to whole meters."""
        assert quantize_distance(1234, 0.5) == 1234

    def test_returns_int(self):
        """Result is an int."""
        assert isinstance(quantize_distance(1234.0, 10), int)

    @pytest.mark.parametrize('accuracy', [
        0, -10, 'ten', None, True, float('nan'), float('inf'), Decimal('Infinity'),
    ])
    def test_invalid_accuracy_raises(self, accuracy):
        """Accuracy must be a positive number."""
        with pytest.raises(InvalidAccuracy):
            quantize_distance(1234, accuracy)
