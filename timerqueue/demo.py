"""Self-test scenario for timer queues.

Schedules A, B, C and D, cancels B, then schedules E which, when it fires,
schedules F. Draining the queue prints the labels in due-time order:

    You should see: C,A,D,E,F
    C
    A
    D
    E
    F
    done

Run it against the wall clock with ``timerqueue-demo`` (or
``python -m timerqueue.demo``); it takes about a second and a half.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from timerqueue import config
from timerqueue.clock import Host, SystemHost
from timerqueue.log import get_logger, set_level
from timerqueue.queue import BaseTimerQueue, HeapTimerQueue, TimerQueue
from timerqueue.timer import Action

LOGGER = get_logger(__name__)


def echo(host: Host, label: str) -> Action:
    def _echo() -> None:
        host.echo(label)

    return _echo


def run_scenario(queue: BaseTimerQueue) -> None:
    """Schedule the scenario on ``queue``, drain it and print ``done``."""
    host = queue.clock
    host.echo(config.SCENARIO_BANNER)

    handles = {
        label: queue.call_later(echo(host, label), delay)
        for label, delay in config.SCENARIO_DELAYS.items()
    }
    queue.cancel(handles[config.SCENARIO_CANCELLED])

    parent_label, parent_delay = config.SCENARIO_PARENT
    child_label, child_delay = config.SCENARIO_CHILD

    def _parent() -> None:
        host.echo(parent_label)
        queue.call_later(echo(host, child_label), child_delay)

    queue.call_later(_parent, parent_delay)

    queue.drain()
    host.echo(config.SCENARIO_DONE)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timerqueue-demo",
        description="Run the timer queue self-test scenario against the wall clock.",
    )
    parser.add_argument(
        "--heap",
        action="store_true",
        help="use the min-heap queue instead of the polling scan queue",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log schedule, cancel and fire events",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)

    queue_cls = HeapTimerQueue if args.heap else TimerQueue
    queue = queue_cls(SystemHost())
    LOGGER.debug("running scenario with %s", queue_cls.__name__)
    run_scenario(queue)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
