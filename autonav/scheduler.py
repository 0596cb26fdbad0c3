"""Debounced, serialized scheduling of synchronization passes."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from enum import Enum

logger = logging.getLogger(__name__)

DEFAULT_QUIET_SECONDS = 0.5


class SchedulerState(Enum):
    IDLE = "idle"
    PENDING_RUN = "pending_run"


class SyncScheduler:
    """Coalesce change bursts into one trailing-edge pass.

    ``request`` from IDLE arms the quiet period and moves to PENDING_RUN;
    further requests while PENDING_RUN push the deadline back. When the
    deadline passes, one daemon worker runs the pass and the state returns to
    IDLE. Requests that arrive while a pass runs re-arm PENDING_RUN, so
    exactly one follow-up pass runs after the current one. Passes never
    overlap, including ones started through ``run_now``.
    """

    def __init__(
        self,
        run_pass: Callable[[], object],
        quiet_seconds: float = DEFAULT_QUIET_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._run_pass = run_pass
        self._quiet_seconds = max(0.0, quiet_seconds)
        self._clock = clock
        self._cond = threading.Condition()
        self._pass_lock = threading.Lock()
        self._state = SchedulerState.IDLE
        self._deadline = 0.0
        self._worker: threading.Thread | None = None
        self._running = False
        self._closed = False
        self.pass_count = 0
        self.failure_count = 0

    @property
    def state(self) -> SchedulerState:
        with self._cond:
            return self._state

    @property
    def is_running(self) -> bool:
        with self._cond:
            return self._running

    def request(self) -> None:
        """Note that something changed; the pass runs after the quiet period."""
        with self._cond:
            if self._closed:
                return
            self._deadline = self._clock() + self._quiet_seconds
            if self._state is SchedulerState.IDLE:
                logger.debug("sync requested; waiting %.3fs for quiet", self._quiet_seconds)
                self._state = SchedulerState.PENDING_RUN
            self._cond.notify_all()
            if self._worker is not None:
                return
            worker = threading.Thread(target=self._work, name="autonav-sync", daemon=True)
            self._worker = worker
        worker.start()

    def run_now(self) -> object:
        """Run one pass on the calling thread, serialized with the worker."""
        with self._pass_lock:
            with self._cond:
                self._running = True
            try:
                return self._run_pass()
            finally:
                with self._cond:
                    self._running = False
                    self.pass_count += 1
                    self._cond.notify_all()

    def _work(self) -> None:
        while True:
            with self._cond:
                while True:
                    if self._closed or self._state is SchedulerState.IDLE:
                        self._worker = None
                        self._cond.notify_all()
                        return
                    remaining = self._deadline - self._clock()
                    if remaining <= 0:
                        break
                    self._cond.wait(remaining)
                self._state = SchedulerState.IDLE

            try:
                logger.debug("running sync pass")
                self.run_now()
            except Exception:
                with self._cond:
                    self.failure_count += 1
                logger.exception("sync pass failed; waiting for the next change")

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until no pass is pending or running; ``False`` on timeout."""
        with self._cond:
            return self._cond.wait_for(
                lambda: self._state is SchedulerState.IDLE and not self._running and self._worker is None,
                timeout,
            )

    def close(self, timeout: float | None = None) -> None:
        """Drop any pending pass and wait for a running one to finish."""
        with self._cond:
            self._closed = True
            self._state = SchedulerState.IDLE
            self._cond.notify_all()
            worker = self._worker
        if worker is not None and worker is not threading.current_thread():
            worker.join(timeout)


__all__ = [
    "DEFAULT_QUIET_SECONDS",
    "SchedulerState",
    "SyncScheduler",
]
