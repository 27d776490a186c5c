"""Timer entries stored by timer queues.

A TimerEntry is one pending delayed action: the handle returned to the
caller, the zero-argument callable to run, and the absolute time at which it
becomes eligible to fire. Entries are immutable; a queue creates one per
``schedule`` call and drops it either on cancellation or immediately before
invoking its action.

Due check:
    An entry is due only when the current time is strictly greater than its
    ``due_at``. An entry due exactly "now" waits for the next clock tick.

Example:
    >>> entry = TimerEntry(id=0, action=lambda: None, due_at=500.0)
    >>> entry.is_due(500.0)
    False
    >>> entry.is_due(500.5)
    True
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Action = Callable[[], Any]


@dataclass(frozen=True)
class TimerEntry:
    """One pending delayed action.

    Note:
        Entries are never reused. An id belongs to exactly one entry for the
        lifetime of the queue that issued it.

    Attributes:
        id (int): Handle assigned by the queue, strictly increasing from 0.
        action (Action): Zero-argument callable invoked when the entry fires.
        due_at (float): Absolute due time in milliseconds on the queue's clock.
    """

    id: int
    action: Action
    due_at: float

    def is_due(self, now: float) -> bool:
        """Return True once ``now`` has strictly passed ``due_at``."""
        return now > self.due_at

    def fire(self) -> Any:
        """Invoke the action. Exceptions are left to the caller."""
        return self.action()

    def __repr__(self) -> str:
        return f"TimerEntry(id={self.id}, due_at={self.due_at:.3f})"
