from .heap_queue import HeapTimerQueue
from .queue import BaseTimerQueue, TimerQueue

__all__ = ["BaseTimerQueue", "HeapTimerQueue", "TimerQueue"]
