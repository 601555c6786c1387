"""Decomposition and composition tests."""

from fractions import Fraction

import pytest

from pyxsdduration import (
    DAY,
    HOUR,
    MAX_ELAPSED,
    MONTHISH,
    SECOND,
    YEARISH,
    Component,
    DurationComponents,
    NumericOverflowError,
    compose,
    decompose,
)


class TestDecompose:
    def test_greedy_largest_first(self):
        assert decompose(20 * MONTHISH) == DurationComponents(years=1, months=8, days=4)

    def test_zero(self):
        assert decompose(0).is_zero

    def test_negative(self):
        components = decompose(-1)
        assert components.negative is True
        assert components.seconds == Fraction(1, 1_000_000_000)

    def test_seconds_are_exact(self):
        assert decompose(90 * SECOND + SECOND // 2).seconds == Fraction(61, 2)

    def test_custom_units(self, calendar_units):
        assert decompose(20 * MONTHISH, calendar_units) == DurationComponents(years=1, months=8)

    def test_components_below_their_unit(self):
        components = decompose(MAX_ELAPSED)
        assert components.months * MONTHISH < YEARISH
        assert components.days * DAY < MONTHISH
        assert components.hours < 24


class TestCompose:
    def test_weighted_sum(self):
        components = DurationComponents(years=1, months=2, days=3, hours=4)
        assert compose(components) == YEARISH + 2 * MONTHISH + 3 * DAY + 4 * HOUR

    def test_non_canonical_magnitudes(self):
        assert compose(DurationComponents(months=20)) == 20 * MONTHISH

    def test_negative(self):
        assert compose(DurationComponents(negative=True, days=60)) == -60 * DAY

    def test_overflow(self):
        with pytest.raises(NumericOverflowError):
            compose(DurationComponents(years=300))

    def test_custom_units(self, calendar_units):
        assert compose(DurationComponents(years=1), calendar_units) == 12 * MONTHISH


class TestDurationComponents:
    def test_get(self):
        components = DurationComponents(hours=5)
        assert components.get(Component.HOURS) == 5
        assert components.get(Component.DAYS) == 0

    def test_seconds_coerced_to_fraction(self):
        assert DurationComponents(seconds=30).seconds == Fraction(30)

    def test_negative_value_rejected(self):
        with pytest.raises(ValueError):
            DurationComponents(years=-1)

    def test_negative_seconds_rejected(self):
        with pytest.raises(ValueError):
            DurationComponents(seconds=Fraction(-1, 2))

    def test_non_int_rejected(self):
        with pytest.raises(TypeError):
            DurationComponents(days=1.5)

    def test_non_terminating_seconds_rejected(self):
        with pytest.raises(ValueError):
            DurationComponents(seconds=Fraction(1, 3))

    def test_is_zero(self):
        assert DurationComponents().is_zero
        assert not DurationComponents(seconds=Fraction(1, 10)).is_zero
