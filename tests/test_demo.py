"""
Tests for the self-test scenario and its command line entry point.
"""

import logging
import unittest
from unittest import mock

from timerqueue import demo
from timerqueue.clock import ManualHost
from timerqueue.queue import HeapTimerQueue, TimerQueue

EXPECTED_OUTPUT = ["You should see: C,A,D,E,F", "C", "A", "D", "E", "F", "done"]


class TestRunScenario(unittest.TestCase):
    """Test the scenario against both queues."""

    def test_scan_queue_output(self):
        """Test the scenario on the polling scan queue."""
        host = ManualHost()
        demo.run_scenario(TimerQueue(host))
        self.assertEqual(host.output, EXPECTED_OUTPUT)

    def test_heap_queue_output(self):
        """Test the scenario on the heap queue."""
        host = ManualHost()
        demo.run_scenario(HeapTimerQueue(host))
        self.assertEqual(host.output, EXPECTED_OUTPUT)

    def test_scenario_leaves_queue_empty(self):
        """Test that the scenario drains everything it scheduled."""
        queue = TimerQueue(ManualHost())
        demo.run_scenario(queue)
        self.assertEqual(len(queue), 0)
        self.assertEqual(queue.schedule(demo.echo(queue.clock, "X"), 0), 6)


class TestMain(unittest.TestCase):
    """Test the command line entry point."""

    def run_main(self, argv):
        host = ManualHost()
        with mock.patch.object(demo, "SystemHost", return_value=host):
            code = demo.main(argv)
        return code, host

    def test_default_uses_scan_queue(self):
        """Test running with no arguments."""
        with mock.patch.object(demo, "run_scenario", wraps=demo.run_scenario) as run:
            code, host = self.run_main([])
        self.assertEqual(code, 0)
        self.assertIsInstance(run.call_args.args[0], TimerQueue)
        self.assertEqual(host.output, EXPECTED_OUTPUT)

    def test_heap_flag(self):
        """Test selecting the heap queue."""
        with mock.patch.object(demo, "run_scenario", wraps=demo.run_scenario) as run:
            code, host = self.run_main(["--heap"])
        self.assertEqual(code, 0)
        self.assertIsInstance(run.call_args.args[0], HeapTimerQueue)
        self.assertEqual(host.output, EXPECTED_OUTPUT)

    def test_verbose_enables_debug_logging(self):
        """Test that --verbose lowers the package log level."""
        with mock.patch.object(demo, "set_level") as set_level:
            self.run_main(["--verbose"])
        set_level.assert_called_once_with(logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
