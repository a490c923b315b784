# game_clock.py

import logging
import threading
from enum import Enum

logger = logging.getLogger(__name__)


class ClockState(Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    EXPIRED = 'expired'


class GameClock:
    """Wall-clock countdown, independent of the frame rate.

    One timer is armed at a time. Every start() and stop() bumps a generation
    counter; a timer that fires for an older generation does nothing, so a
    cancelled countdown can never decrement or expire a newer one.
    """

    def __init__(self, on_tick=None, on_expire=None, interval=1.0, timer_factory=threading.Timer):
        self.on_tick = on_tick
        self.on_expire = on_expire
        self.interval = interval
        self.timer_factory = timer_factory

        self._lock = threading.Lock()
        self._timer = None
        self._generation = 0
        self.state = ClockState.IDLE
        self.time_remaining = 0

    @property
    def running(self):
        return self.state is ClockState.RUNNING

    def start(self, duration_seconds: int):
        if duration_seconds <= 0:
            raise ValueError(f"duration_seconds must be positive, got {duration_seconds}")
        with self._lock:
            self._cancel_locked()
            self._generation += 1
            self.time_remaining = duration_seconds
            self.state = ClockState.RUNNING
            self._schedule_locked(self._generation)
        logger.info("Clock started (%ds)", duration_seconds)

    def stop(self):
        with self._lock:
            self._cancel_locked()
            self._generation += 1
            was = self.state
            self.state = ClockState.IDLE
        if was is ClockState.RUNNING:
            logger.info("Clock stopped with %ds left", self.time_remaining)

    def _schedule_locked(self, generation):
        timer = self.timer_factory(self.interval, self._on_interval, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _cancel_locked(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_interval(self, generation):
        with self._lock:
            if generation != self._generation or self.state is not ClockState.RUNNING:
                return
            self.time_remaining = max(0, self.time_remaining - 1)
            remaining = self.time_remaining
            expired = remaining <= 0
            if expired:
                self.state = ClockState.EXPIRED
                self._timer = None
            else:
                self._schedule_locked(generation)
            # Callbacks belong to the run that passed the generation check.
            on_tick, on_expire = self.on_tick, self.on_expire

        if on_tick:
            on_tick(remaining)
        if expired:
            logger.info("Time up")
            if on_expire:
                on_expire()
