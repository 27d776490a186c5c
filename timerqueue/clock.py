"""Host primitives that timer queues poll and block on.

A timer queue never reads the system clock or sleeps on its own. Everything
it needs from the outside world goes through a Host:

    • now():       current time in milliseconds
    • sleep(ms):   block the only thread for roughly ``ms`` milliseconds
    • echo(text):  write one line of output

Two hosts are provided. SystemHost is backed by the wall clock, ``time.sleep``
and a rich Console. ManualHost keeps its own clock that only moves when
something sleeps on it or calls ``advance``, which makes queue behaviour fully
deterministic in tests.

Example:
    >>> host = ManualHost()
    >>> host.sleep(250)
    >>> host.now()
    250.0
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

from rich.console import Console

from timerqueue.unit import Number, Time, to_milliseconds

CONSOLE = Console(highlight=False)


@runtime_checkable
class Host(Protocol):
    """Clock, blocking sleep and output sink used by timer queues."""

    def now(self) -> float: ...
    def sleep(self, ms: float) -> None: ...
    def echo(self, text: str) -> None: ...


class SystemHost:
    """Host backed by the wall clock.

    ``now`` is milliseconds since the epoch, ``sleep`` blocks the calling
    thread and ``echo`` prints through a rich Console.

    Args:
        console (Console | None): Output console. Defaults to the shared
            module console writing to stdout.
    """

    _console: Console

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else CONSOLE

    def now(self) -> float:
        return time.time() * 1000.0

    def sleep(self, ms: float) -> None:
        if ms > 0:
            time.sleep(ms / 1000.0)

    def echo(self, text: str) -> None:
        self._console.print(text, markup=False)


class ManualHost:
    """Deterministic host whose clock only moves when told to.

    Sleeping advances the clock by exactly the requested duration instead of
    blocking, so a queue draining against a ManualHost runs instantly while
    observing the same sequence of timestamps a real clock would give.

    Attributes:
        output (list[str]): Lines passed to ``echo``, in order.
        sleeps (list[float]): Durations passed to ``sleep``, in order.

    Example:
        >>> host = ManualHost(start=1000)
        >>> host.advance(2000)
        >>> host.now()
        3000.0
    """

    output: list[str]
    sleeps: list[float]

    def __init__(self, start: Time | Number = 0.0) -> None:
        self._now = to_milliseconds(start)
        self.output = []
        self.sleeps = []

    def now(self) -> float:
        return self._now

    def sleep(self, ms: float) -> None:
        """Advance the clock by ``ms`` and record the sleep.

        Raises:
            ValueError: If ``ms`` is negative.
        """
        ms = to_milliseconds(ms)
        if ms < 0:
            raise ValueError(f"cannot sleep for a negative duration: {ms}")
        self.sleeps.append(ms)
        self._now += ms

    def advance(self, ms: Time | Number) -> None:
        """Move the clock forward without recording a sleep.

        Raises:
            ValueError: If ``ms`` is negative.
        """
        ms = to_milliseconds(ms)
        if ms < 0:
            raise ValueError(f"cannot move the clock backwards: {ms}")
        self._now += ms

    def echo(self, text: str) -> None:
        self.output.append(text)


__all__ = ["CONSOLE", "Host", "ManualHost", "SystemHost"]
