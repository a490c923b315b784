import sys
from pathlib import Path

import pytest

# Modules live at the repository root; make them importable without installing.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ManualTimer:
    """Stands in for threading.Timer; fires only when the test says so."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False
        self.fired = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.fired = True
        self.function(*self.args, **self.kwargs)


class ManualTimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, function, args=None, kwargs=None):
        timer = ManualTimer(interval, function, args, kwargs)
        self.timers.append(timer)
        return timer

    @property
    def pending(self):
        return [t for t in self.timers if t.started and not t.cancelled and not t.fired]

    def advance(self, seconds=1):
        """Fire the armed timer once per simulated second."""
        for _ in range(seconds):
            for timer in self.pending:
                timer.fire()


class ScriptedRandom:
    """random.Random stand-in returning fixed draws."""

    def __init__(self, lane=0, roll=0.99, jitter=0.0):
        self.lane = lane
        self.roll = roll
        self.jitter = jitter

    def randrange(self, stop):
        return self.lane

    def random(self):
        return self.roll

    def uniform(self, a, b):
        return a + self.jitter


@pytest.fixture
def timers():
    return ManualTimerFactory()


@pytest.fixture
def scripted_random():
    """Factory: scripted_random(lane=2, roll=0.0) builds a ScriptedRandom."""
    return ScriptedRandom
