"""
Exposure tracker: a session clock plus accumulated "tan progress".

While running, every tick adds one second and ``uv_index / 100`` percent of
progress, capped at 100. The tick cadence comes from a ``PeriodicTimer``
that exists only while the session is running: ``start`` schedules it,
``pause`` and ``reset`` cancel it.

The tracker does not validate the UV index. Rejecting negative values is the
caller's job (see ``panels.TanTrackerWidget``).
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from functools import partial
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

MAX_PROGRESS = 100.0
DEFAULT_TICK_INTERVAL = 1.0  # seconds


@dataclass
class ExposureSession:
    """Mutable session state. Use ``ExposureTracker.snapshot()`` for a copy."""

    elapsed_seconds: int = 0
    progress_percent: float = 0.0
    running: bool = False
    uv_index: float = 0.0


class PeriodicTimer:
    """Calls ``function`` every ``interval`` seconds on a daemon thread.

    A call never overlaps the previous one: the next wait starts only after
    ``function`` returns. ``cancel`` stops the loop; a timer cannot be
    restarted.
    """

    def __init__(self, interval: float, function: Callable[[], None]) -> None:
        self.interval = interval
        self.function = function
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, name="exposure-tick", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        self._stopped.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    @property
    def active(self) -> bool:
        return self._thread.is_alive() and not self._stopped.is_set()

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            self.function()


class ExposureTracker:
    """Session clock with start/pause/reset and a per-second tick."""

    def __init__(
        self,
        uv_index: float = 0.0,
        *,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        on_tick: Callable[[ExposureSession], None] | None = None,
    ) -> None:
        self.session = ExposureSession(uv_index=uv_index)
        self.tick_interval = tick_interval
        self.on_tick = on_tick
        self._timer: PeriodicTimer | None = None
        # Bumped whenever the timer is replaced; stale timers tick into nothing
        self._generation = 0
        self._lock = threading.RLock()

    # -- state transitions -------------------------------------------------

    def start(self) -> None:
        """Start ticking. No-op if already running."""
        with self._lock:
            if self.session.running:
                return
            self.session.running = True
            self._generation += 1
            self._timer = PeriodicTimer(
                self.tick_interval, partial(self._scheduled_tick, self._generation)
            )
            self._timer.start()
        logger.debug("Tracker started at %ds", self.session.elapsed_seconds)

    def pause(self) -> None:
        """Stop ticking, keeping elapsed time and progress. No-op if paused."""
        with self._lock:
            if not self.session.running:
                return
            self.session.running = False
            self._generation += 1
            timer, self._timer = self._timer, None
        self._cancel(timer)
        logger.debug("Tracker paused at %ds", self.session.elapsed_seconds)

    def reset(self) -> None:
        """Stop ticking and zero the clock and progress."""
        with self._lock:
            self.session.running = False
            self.session.elapsed_seconds = 0
            self.session.progress_percent = 0.0
            self._generation += 1
            timer, self._timer = self._timer, None
        self._cancel(timer)

    def toggle(self) -> None:
        """Start when paused, pause when running."""
        if self.session.running:
            self.pause()
        else:
            self.start()

    def set_uv_index(self, uv_index: float) -> None:
        """Use ``uv_index`` from the next tick on."""
        with self._lock:
            self.session.uv_index = uv_index

    # -- clock -------------------------------------------------------------

    def tick(self) -> None:
        """Advance one second. Has no effect while paused."""
        self._advance(None)

    def _scheduled_tick(self, generation: int) -> None:
        self._advance(generation)

    def _advance(self, generation: int | None) -> None:
        with self._lock:
            if not self.session.running:
                return
            if generation is not None and generation != self._generation:
                return
            self.session.elapsed_seconds += 1
            self.session.progress_percent = min(
                self.session.progress_percent + self.session.uv_index / 100, MAX_PROGRESS
            )
            snapshot = self.snapshot()
        if self.on_tick is not None:
            self.on_tick(snapshot)

    def snapshot(self) -> ExposureSession:
        """Copy of the current session state."""
        with self._lock:
            return replace(self.session)

    @property
    def running(self) -> bool:
        return self.session.running

    @property
    def timer_active(self) -> bool:
        return self._timer is not None and self._timer.active

    def _cancel(self, timer: PeriodicTimer | None) -> None:
        # Outside the lock: the timer thread may be blocked on it inside tick().
        if timer is not None:
            timer.cancel()


def format_elapsed(seconds: int) -> str:
    """Render seconds as ``MM:SS``."""
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"
