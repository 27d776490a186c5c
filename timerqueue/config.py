"""Package-wide constants for timer queues, logging and the demo scenario."""

from timerqueue.unit import Millisecond

# Queue Configuration
POLL_INTERVAL = Millisecond(1)  # sleep between unsuccessful due checks

# Logging Configuration
LOGGER_NAME = "timerqueue"
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(name)s | %(message)s"

# Demo Scenario
SCENARIO_BANNER = "You should see: C,A,D,E,F"
SCENARIO_DELAYS = {
    "A": Millisecond(500),
    "B": Millisecond(1220),
    "C": Millisecond(300),
    "D": Millisecond(1000),
}
SCENARIO_CANCELLED = "B"
SCENARIO_PARENT = ("E", Millisecond(1300))
SCENARIO_CHILD = ("F", Millisecond(100))  # scheduled by the parent when it fires
SCENARIO_DONE = "done"
