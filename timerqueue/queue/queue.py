"""Cooperative timer queues: schedule, cancel and drain delayed actions.

This module provides the timer queue used to emulate ``setTimeout`` and
``clearTimeout`` in code that has no native timer or event loop. A queue
stores pending delayed actions, hands out integer handles for cancellation,
and is driven by an explicit ``drain`` call that polls the host clock and
fires due actions until nothing is left.

Key Features:
    • Integer handles issued in strictly increasing order, never reused
    • Cancellation by handle; unknown or already-fired handles are ignored
    • Re-entrant: actions may schedule or cancel while the queue drains
    • Host injection: clock, sleep and output come from a Host, so tests run
      against a ManualHost without ever sleeping
    • Delays expressed in milliseconds or as Time units

Execution Model:
    Everything runs on the caller's thread. The only suspension point is the
    host's blocking sleep inside ``drain``. An action that raises aborts the
    current ``drain`` call; its entry is already gone, the remaining entries
    stay queued, and calling ``drain`` again resumes.

Usage Pattern:
    >>> host = ManualHost()
    >>> queue = TimerQueue(host)
    >>> queue.call_later(lambda: host.echo("later"), 500)
    0
    >>> handle = queue.call_later(lambda: host.echo("never"), 200)
    >>> queue.cancel(handle)
    >>> queue.drain()
    >>> host.output
    ['later']
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from timerqueue.clock import Host, SystemHost
from timerqueue.config import POLL_INTERVAL
from timerqueue.log import get_logger
from timerqueue.timer import Action, TimerEntry
from timerqueue.unit import Number, Time, to_milliseconds

LOGGER = get_logger(__name__)


class BaseTimerQueue(ABC):
    """Abstract base class for timer queues.

    The base class owns the id counter, argument checking, relative
    scheduling and logging. Subclasses decide how entries are stored and
    in which order ``drain`` discovers due entries.

    Attributes:
        _host (Host): Clock, sleep and output primitives the queue polls.
        _next_id (int): Handle given to the next scheduled entry.
        _poll_interval (float): Milliseconds slept between unsuccessful due
            checks.

    Abstract Methods:
        • _push(entry): Store a newly scheduled entry
        • _remove(timer_id): Drop the entry with that id, report whether it existed
        • pending(): Ids of live entries in insertion order
        • drain(): Fire due entries until the queue is empty
    """

    _host: Host
    _next_id: int
    _poll_interval: float

    def __init__(
        self,
        host: Host | None = None,
        poll_interval: Time | Number = POLL_INTERVAL,
    ):
        """Initialize an empty queue.

        Args:
            host (Host | None): Host primitives. Defaults to a SystemHost on
                the wall clock.
            poll_interval (Time | Number): Sleep between unsuccessful due
                checks, in milliseconds or as a Time unit. Defaults to
                ``config.POLL_INTERVAL``.
                A zero interval never sleeps between checks; on a host whose
                clock only advances when slept on (ManualHost), drain then
                never returns while an entry is still waiting to become due.

        Raises:
            ValueError: If ``poll_interval`` is negative.
        """
        self._host = host if host is not None else SystemHost()
        self._poll_interval = to_milliseconds(poll_interval)
        if self._poll_interval < 0:
            raise ValueError(f"poll interval must not be negative: {self._poll_interval}")
        self._next_id = 0

    @property
    def clock(self) -> Host:
        """Host the queue reads time from and sleeps on."""
        return self._host

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    def schedule(self, action: Action, due_at: Time | Number) -> int:
        """Add a delayed action due at an absolute time.

        Args:
            action (Action): Zero-argument callable. It may itself schedule or
                cancel entries on this queue.
            due_at (Time | Number): Absolute due time on the host clock, in
                milliseconds or as a Time unit.

        Returns:
            int: Handle of the new entry, usable with ``cancel``.

        Raises:
            TypeError: If ``action`` is not callable or ``due_at`` is not a
                time value.
        """
        if not callable(action):
            raise TypeError(f"action must be callable, got {type(action).__name__}")
        entry = TimerEntry(self._next_id, action, to_milliseconds(due_at))
        self._next_id += 1
        self._push(entry)
        LOGGER.debug("scheduled timer %d due at %.3f ms", entry.id, entry.due_at)
        return entry.id

    def call_later(self, action: Action, delay: Time | Number) -> int:
        """Add a delayed action due ``delay`` after the host's current time.

        Returns:
            int: Handle of the new entry.
        """
        return self.schedule(action, self._host.now() + to_milliseconds(delay))

    def cancel(self, timer_id: int) -> None:
        """Drop the entry with handle ``timer_id``.

        Cancelling a handle that was never issued, was already cancelled, or
        has already fired does nothing.
        """
        if self._remove(timer_id):
            LOGGER.debug("cancelled timer %d", timer_id)

    def _fire(self, entry: TimerEntry) -> None:
        # entry is already out of the collection at this point
        LOGGER.debug("firing timer %d (due %.3f ms)", entry.id, entry.due_at)
        entry.fire()

    @abstractmethod
    def _push(self, entry: TimerEntry) -> None:
        """Store a newly scheduled entry."""

    @abstractmethod
    def _remove(self, timer_id: int) -> bool:
        """Drop every live entry with ``timer_id``; return whether one existed."""

    @abstractmethod
    def pending(self) -> list[int]:
        """Return the ids of live entries in insertion order."""

    @abstractmethod
    def drain(self) -> None:
        """Fire due entries until the queue is empty."""

    def __len__(self) -> int:
        return len(self.pending())

    def __bool__(self) -> bool:
        return len(self) > 0

    def __contains__(self, timer_id: object) -> bool:
        return timer_id in self.pending()

    def __iter__(self) -> Iterator[int]:
        return iter(self.pending())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pending={len(self)}, next_id={self._next_id})"


class TimerQueue(BaseTimerQueue):
    """Timer queue driven by repeated linear scans.

    Entries are kept in insertion order. ``drain`` reads the clock once per
    pass and walks the entries from the front; the first entry found due is
    removed and fired, and the scan restarts from the beginning so that any
    schedule or cancel performed by the action is seen immediately. Every
    unsuccessful check sleeps for the poll interval.

    Ordering:
        Due entries fire in the order the scan discovers them. Entries with
        well separated due times therefore fire in due-time order, while
        entries that are already due at the same pass fire in insertion order.
        Each firing costs a scan, so a full drain is O(n²).

    Example:
        >>> host = ManualHost()
        >>> queue = TimerQueue(host)
        >>> for label, delay in (("A", 500), ("C", 300)):
        ...     _ = queue.call_later(lambda label=label: host.echo(label), delay)
        >>> queue.drain()
        >>> host.output
        ['C', 'A']
    """

    _entries: list[TimerEntry]

    def __init__(
        self,
        host: Host | None = None,
        poll_interval: Time | Number = POLL_INTERVAL,
    ):
        super().__init__(host, poll_interval)
        self._entries = []

    def _push(self, entry: TimerEntry) -> None:
        self._entries.append(entry)

    def _remove(self, timer_id: int) -> bool:
        # match by id, not position; mutate in place so an ongoing scan sees it
        before = len(self._entries)
        self._entries[:] = [entry for entry in self._entries if entry.id != timer_id]
        return len(self._entries) != before

    def pending(self) -> list[int]:
        return [entry.id for entry in self._entries]

    def drain(self) -> None:
        """Fire due entries until the queue is empty.

        Blocks, polling the host clock, for as long as entries remain. An
        exception raised by an action propagates out unchanged.
        """
        while self._entries:
            now = self._host.now()
            for entry in self._entries:
                if entry.is_due(now):
                    self._remove(entry.id)
                    self._fire(entry)
                    break
                self._host.sleep(self._poll_interval)
