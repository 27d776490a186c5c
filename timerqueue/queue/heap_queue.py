"""Timer queue backed by a min-heap with lazy cancellation."""

from __future__ import annotations

import heapq

from timerqueue.clock import Host
from timerqueue.config import POLL_INTERVAL
from timerqueue.timer import TimerEntry
from timerqueue.unit import Number, Time

from .queue import BaseTimerQueue


class HeapTimerQueue(BaseTimerQueue):
    """Timer queue that sleeps straight to the next due time.

    Entries live in a min-heap keyed by ``(due_at, id)``. Removing an
    arbitrary entry from a heap is awkward, so ``cancel`` only records the id
    in a set of cancelled ids; those tombstones are dropped when they reach
    the top of the heap. ``drain`` blocks once per firing for the time left
    until the earliest live entry is due, instead of polling every entry.

    The public contract is the same as TimerQueue: strictly increasing ids,
    the strict ``now > due_at`` due check, removal before firing, re-entrant
    schedule and cancel, and exceptions propagating out of ``drain``. Entries
    with equal due times fire in insertion order.

    Note:
        With a zero poll interval the queue re-checks an entry due exactly
        "now" without sleeping, so drain only returns once the host clock
        moves on by itself. A ManualHost never does, and drain never returns.

    Attributes:
        _heap (list[tuple[float, int, TimerEntry]]): Scheduled entries,
            including cancelled ones not yet popped.
        _live (set[int]): Ids that are scheduled and not cancelled.
        _cancelled (set[int]): Tombstones still sitting in the heap.
    """

    _heap: list[tuple[float, int, TimerEntry]]
    _live: set[int]
    _cancelled: set[int]

    def __init__(
        self,
        host: Host | None = None,
        poll_interval: Time | Number = POLL_INTERVAL,
    ):
        super().__init__(host, poll_interval)
        self._heap = []
        self._live = set()
        self._cancelled = set()

    def _push(self, entry: TimerEntry) -> None:
        heapq.heappush(self._heap, (entry.due_at, entry.id, entry))
        self._live.add(entry.id)

    def _remove(self, timer_id: int) -> bool:
        if timer_id not in self:
            return False
        self._live.discard(timer_id)
        self._cancelled.add(timer_id)
        return True

    def pending(self) -> list[int]:
        # ids grow with insertion, so sorting restores insertion order
        return sorted(self._live)

    def __len__(self) -> int:
        return len(self._live)

    def __contains__(self, timer_id: object) -> bool:
        try:
            return timer_id in self._live
        except TypeError:
            # unhashable handles were never issued
            return False

    def _pop_cancelled(self) -> None:
        while self._heap and self._heap[0][1] in self._cancelled:
            _, timer_id, _ = heapq.heappop(self._heap)
            self._cancelled.discard(timer_id)

    def drain(self) -> None:
        """Fire due entries until the queue is empty.

        Blocks on the host until the earliest live entry is due, fires it, and
        repeats. An exception raised by an action propagates out unchanged.
        """
        while True:
            self._pop_cancelled()
            if not self._heap:
                return
            due_at, timer_id, entry = self._heap[0]
            now = self._host.now()
            if not entry.is_due(now):
                self._host.sleep(max(due_at - now, self._poll_interval))
                continue
            heapq.heappop(self._heap)
            self._live.discard(timer_id)
            self._fire(entry)
