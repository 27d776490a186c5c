"""
Tests for time units.
"""

import unittest

from timerqueue.unit import Hour, Millisecond, Minute, Second, to_milliseconds


class TestTimeUnits(unittest.TestCase):
    """Test the time unit family."""

    def test_every_time_unit_shares_the_second_root(self):
        """Test that the family root resolves to Second."""
        for unit in (Second, Millisecond, Minute, Hour):
            self.assertIs(unit.ROOT, Second)

    def test_converting_to_a_foreign_unit_is_rejected(self):
        """Test that to() refuses types outside the family."""
        with self.assertRaises(TypeError):
            Second(1).to(float)

    def test_values_are_stored_in_seconds(self):
        """Test base-unit storage for each scale."""
        self.assertEqual(float(Second(3)), 3.0)
        self.assertEqual(float(Minute(2)), 120.0)
        self.assertEqual(float(Hour(1)), 3600.0)
        self.assertAlmostEqual(float(Millisecond(250)), 0.25)

    def test_same_family_arithmetic(self):
        """Test adding units of different scales."""
        total = Second(1) + Millisecond(500)
        self.assertIsInstance(total, Second)
        self.assertAlmostEqual(total.to(Millisecond), 1500.0)

    def test_scaling_by_numbers(self):
        """Test multiplying and dividing by plain numbers."""
        self.assertAlmostEqual(float(Millisecond(100) * 3), 0.3)
        self.assertAlmostEqual(float(Minute(1) / 4), 15.0)

    def test_mixing_with_plain_numbers_is_rejected(self):
        """Test that adding a bare number to a unit raises TypeError."""
        with self.assertRaises(TypeError):
            Second(1) + 5
        with self.assertRaises(TypeError):
            Second(1) < 5

    def test_comparisons_across_scales(self):
        """Test ordering and equality between scales."""
        self.assertLess(Millisecond(999), Second(1))
        self.assertEqual(Minute(1), Second(60))
        self.assertNotEqual(Second(1), 1.0)

    def test_units_are_hashable(self):
        """Test that units can be used as dict keys."""
        delays = {Second(1): "one"}
        self.assertEqual(delays[Second(1)], "one")

    def test_string_forms(self):
        """Test human-readable representations."""
        self.assertEqual(str(Millisecond(1)), "1.0 ms")
        self.assertEqual(repr(Second(2)), "2 s (= 2 s)")


class TestToMilliseconds(unittest.TestCase):
    """Test conversion to queue clock milliseconds."""

    def test_plain_numbers_pass_through(self):
        """Test that ints and floats are already milliseconds."""
        self.assertEqual(to_milliseconds(250), 250.0)
        self.assertEqual(to_milliseconds(1.5), 1.5)

    def test_units_are_converted(self):
        """Test conversion of each unit scale."""
        self.assertAlmostEqual(to_milliseconds(Second(1.5)), 1500.0)
        self.assertAlmostEqual(to_milliseconds(Millisecond(300)), 300.0)
        self.assertAlmostEqual(to_milliseconds(Minute(1)), 60000.0)

    def test_rejects_non_numbers(self):
        """Test that strings, None and bools raise TypeError."""
        for value in ("10", None, True):
            with self.assertRaises(TypeError):
                to_milliseconds(value)


if __name__ == "__main__":
    unittest.main()
