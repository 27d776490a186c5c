"""
Tests for host primitives.
"""

import io
import time
import unittest

from rich.console import Console

from timerqueue.clock import Host, ManualHost, SystemHost
from timerqueue.unit import Second


class TestManualHost(unittest.TestCase):
    """Test the deterministic host."""

    def test_starts_at_given_time(self):
        """Test the initial clock value."""
        self.assertEqual(ManualHost().now(), 0.0)
        self.assertEqual(ManualHost(start=250).now(), 250.0)
        self.assertAlmostEqual(ManualHost(start=Second(1)).now(), 1000.0)

    def test_sleep_advances_and_records(self):
        """Test that sleeping moves the clock and is recorded."""
        host = ManualHost()
        host.sleep(5)
        host.sleep(2.5)
        self.assertEqual(host.now(), 7.5)
        self.assertEqual(host.sleeps, [5.0, 2.5])

    def test_advance_does_not_record_sleep(self):
        """Test moving the clock without sleeping."""
        host = ManualHost()
        host.advance(100)
        self.assertEqual(host.now(), 100.0)
        self.assertEqual(host.sleeps, [])

    def test_negative_durations_rejected(self):
        """Test that the clock cannot move backwards."""
        host = ManualHost()
        with self.assertRaises(ValueError):
            host.sleep(-1)
        with self.assertRaises(ValueError):
            host.advance(-1)

    def test_echo_records_lines(self):
        """Test the output sink."""
        host = ManualHost()
        host.echo("A")
        host.echo("B")
        self.assertEqual(host.output, ["A", "B"])

    def test_satisfies_host_protocol(self):
        """Test runtime protocol conformance."""
        self.assertIsInstance(ManualHost(), Host)


class TestSystemHost(unittest.TestCase):
    """Test the wall-clock host."""

    def test_now_is_epoch_milliseconds(self):
        """Test that now() tracks time.time() in milliseconds."""
        before = time.time() * 1000.0
        now = SystemHost().now()
        after = time.time() * 1000.0
        self.assertLessEqual(before, now)
        self.assertLessEqual(now, after)

    def test_sleep_blocks(self):
        """Test that sleep blocks for roughly the requested time."""
        host = SystemHost()
        start = time.monotonic()
        host.sleep(20)
        self.assertGreaterEqual(time.monotonic() - start, 0.015)

    def test_non_positive_sleep_returns(self):
        """Test that zero and negative sleeps do not block or fail."""
        host = SystemHost()
        host.sleep(0)
        host.sleep(-5)

    def test_echo_writes_to_console(self):
        """Test that echo prints one line through the console."""
        buffer = io.StringIO()
        host = SystemHost(Console(file=buffer, width=80))
        host.echo("[C]")
        self.assertEqual(buffer.getvalue(), "[C]\n")

    def test_satisfies_host_protocol(self):
        """Test runtime protocol conformance."""
        self.assertIsInstance(SystemHost(), Host)


if __name__ == "__main__":
    unittest.main()
