"""Cooperative timer scheduling for code without a native event loop.

timerqueue emulates ``setTimeout`` and ``clearTimeout``: callers schedule
zero-argument actions to run after a delay, cancel them by handle, and then
hand control to the queue, which polls the clock and fires due actions until
nothing is left.

Framework Components:
    Timer Queues (timerqueue.queue):
        • TimerQueue: Insertion-ordered store drained by repeated linear scans
        • HeapTimerQueue: Min-heap store with lazy cancellation tombstones
        • BaseTimerQueue: Shared handle allocation, scheduling and logging

    Timer Entries (timerqueue.timer):
        • TimerEntry: Handle, action and absolute due time of one pending action

    Host Primitives (timerqueue.clock):
        • SystemHost: Wall clock, blocking sleep and rich console output
        • ManualHost: Deterministic clock for tests and simulations

    Time Units (timerqueue.unit):
        • Second, Millisecond, Minute, Hour with type-safe arithmetic
        • to_milliseconds: Conversion used for every delay and due time

Scheduling Model:
    Single-threaded and cooperative. Queues are explicit objects with no
    global state; pass the instance to whatever needs to schedule. Actions
    may schedule and cancel on the same queue while it drains. An action that
    raises stops the current ``drain`` call and the exception reaches the
    caller untouched.

Usage Patterns:
    >>> from timerqueue import TimerQueue
    >>> from timerqueue.unit import Millisecond
    >>>
    >>> queue = TimerQueue()
    >>> queue.call_later(lambda: print("A"), Millisecond(500))
    >>> b = queue.call_later(lambda: print("B"), 1220)
    >>> queue.call_later(lambda: print("C"), 300)
    >>> queue.cancel(b)
    >>> queue.drain()  # prints C then A, returns once the queue is empty
"""

from timerqueue.clock import Host, ManualHost, SystemHost
from timerqueue.queue import BaseTimerQueue, HeapTimerQueue, TimerQueue
from timerqueue.timer import TimerEntry

__version__ = "0.1.0"

__all__ = [
    "BaseTimerQueue",
    "HeapTimerQueue",
    "Host",
    "ManualHost",
    "SystemHost",
    "TimerEntry",
    "TimerQueue",
]
