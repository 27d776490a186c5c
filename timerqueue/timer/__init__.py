"""Timer entries held by timer queues.

Components:
    TimerEntry: One pending delayed action with its handle and due time
    Action: Type alias for the zero-argument callables entries carry

Timer Lifecycle:
    1. Creation: ``schedule`` allocates a fresh id and stores a new entry
    2. Cancellation: ``cancel`` drops the entry before it ever fires
    3. Firing: ``drain`` removes the entry, then invokes its action
"""

from .timer import Action, TimerEntry

__all__ = ["Action", "TimerEntry"]
