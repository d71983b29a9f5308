"""
Unit tests for geonav/utils/angles.py.

Tests cover:
    - Degree/radian conversion
    - Signed longitude boundaries
    - Truncating floating-point modulo
    - Decimal degrees <-> DMS, including the zero-degree sign limitation

Run with: pytest tests/geonav/utils/test_angles.py -v
"""

import math
import unittest

import numpy as np
import pytest

from geonav.utils.angles import (
    DMS,
    dec_to_dms,
    deg_to_rad,
    dms_to_dec,
    fmod,
    rad_to_deg,
    signed_lon,
)


class TestDegRadConversion(unittest.TestCase):
    """Test degree/radian conversion."""

    def test_known_values(self) -> None:
        """Test common angles."""
        self.assertAlmostEqual(deg_to_rad(180.0), math.pi, places=12)
        self.assertAlmostEqual(deg_to_rad(-90.0), -math.pi / 2.0, places=12)
        self.assertAlmostEqual(rad_to_deg(math.pi / 4.0), 45.0, places=12)

    def test_round_trip(self) -> None:
        """Test deg -> rad -> deg returns the input."""
        for deg in (-720.0, -45.5, 0.0, 1e-9, 279.735, 1000.0):
            with self.subTest(deg=deg):
                self.assertAlmostEqual(rad_to_deg(deg_to_rad(deg)), deg, places=9)

    def test_array_input(self) -> None:
        """Test vectorized conversion."""
        rad = deg_to_rad(np.array([0.0, 90.0, 180.0]))
        np.testing.assert_allclose(rad, [0.0, np.pi / 2.0, np.pi])


class TestSignedLon(unittest.TestCase):
    """Test conversion of [0, 360) longitudes to signed form."""

    def test_boundary_180(self) -> None:
        """180° stays 180°."""
        self.assertEqual(signed_lon(180.0), 180.0)

    def test_western_hemisphere(self) -> None:
        """Values above 180° wrap to negative."""
        self.assertEqual(signed_lon(270.0), -90.0)
        self.assertAlmostEqual(signed_lon(357.29), -2.71, places=10)

    def test_eastern_hemisphere_unchanged(self) -> None:
        """Values in [0, 180] pass through."""
        for lon in (0.0, 10.5, 179.999):
            self.assertEqual(signed_lon(lon), lon)

    def test_negative_passthrough(self) -> None:
        """Negative inputs are not modified."""
        self.assertEqual(signed_lon(-45.0), -45.0)


class TestFmod(unittest.TestCase):
    """Test truncating floating-point remainder."""

    def test_positive_operands(self) -> None:
        """Matches ordinary remainder for positive values."""
        self.assertAlmostEqual(fmod(537.266, 360.0), 177.266, places=9)
        self.assertEqual(fmod(720.0, 360.0), 0.0)

    def test_sign_follows_dividend(self) -> None:
        """Result takes the sign of x (truncation, not floor)."""
        self.assertEqual(fmod(-1.0, 360.0), -1.0)
        self.assertEqual(fmod(-370.0, 360.0), -10.0)
        self.assertNotEqual(fmod(-1.0, 360.0), -1.0 % 360.0)

    def test_matches_math_fmod(self) -> None:
        """Agrees with C-style fmod for a range of values."""
        for x in (-725.5, -180.0, -0.25, 0.0, 3.75, 539.9):
            with self.subTest(x=x):
                self.assertAlmostEqual(fmod(x, 360.0), math.fmod(x, 360.0), places=9)

    def test_zero_divisor(self) -> None:
        """Division by zero raises."""
        with pytest.raises(ZeroDivisionError):
            fmod(1.0, 0.0)


class TestDecToDMS(unittest.TestCase):
    """Test decimal degrees to DMS."""

    def test_positive(self) -> None:
        """Test a positive latitude."""
        dms = dec_to_dms(10.76)
        self.assertEqual(dms.degrees, 10)
        self.assertEqual(dms.minutes, 45)
        self.assertAlmostEqual(dms.seconds, 36.0, places=6)

    def test_negative_sign_in_degrees(self) -> None:
        """Sign is carried by degrees; minutes/seconds stay non-negative."""
        deg, minutes, seconds = dec_to_dms(-2.71)
        self.assertEqual(deg, -2)
        self.assertEqual(minutes, 42)
        self.assertAlmostEqual(seconds, 36.0, places=6)

    def test_whole_degrees(self) -> None:
        """Whole degrees give zero minutes and seconds."""
        self.assertEqual(dec_to_dms(45.0), DMS(45, 0, 0.0))

    def test_negative_below_one_degree_loses_sign(self) -> None:
        """-0.5° cannot carry its sign in the degrees field."""
        dms = dec_to_dms(-0.5)
        self.assertEqual(dms.degrees, 0)
        self.assertEqual(dms.minutes, 30)
        self.assertAlmostEqual(dms.seconds, 0.0, places=9)
        self.assertEqual(dms_to_dec(dms), 0.5)


class TestDMSToDec(unittest.TestCase):
    """Test DMS to decimal degrees."""

    def test_components(self) -> None:
        """Test separate arguments."""
        self.assertAlmostEqual(dms_to_dec(10, 45, 36.0), 10.76, places=12)
        self.assertAlmostEqual(dms_to_dec(-2, 30, 0.0), -2.5, places=12)

    def test_tuple_argument(self) -> None:
        """Test passing a single DMS tuple."""
        self.assertAlmostEqual(dms_to_dec(DMS(-2, 42, 36.0)), -2.71, places=12)
        self.assertAlmostEqual(dms_to_dec((55, 59, 55.32)), 55.9987, places=12)

    def test_wrong_length_sequence(self) -> None:
        """A sequence must have three components."""
        with pytest.raises(ValueError):
            dms_to_dec((10, 30))

    def test_round_trip(self) -> None:
        """dms_to_dec(dec_to_dms(x)) == x away from the zero-degree case."""
        for value in (55.9987, -2.71, 179.999999, -89.123456, 1.0001, -33.5):
            with self.subTest(value=value):
                self.assertAlmostEqual(dms_to_dec(dec_to_dms(value)), value, places=9)


if __name__ == "__main__":
    unittest.main()
