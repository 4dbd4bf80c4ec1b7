# timers.py
"""
Background callbacks owned by a game session.

Two kinds are needed: a one-shot delayed action (the post-score speed-up)
and a fixed-interval repeater (the survival clock). Both run on daemon
threads and return a handle that can be cancelled; the callback itself is
responsible for taking the session lock.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ScheduledTask:
    def __init__(self, name: str):
        self.name = name
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()


class _OneShot(ScheduledTask):
    def __init__(self, name: str, delay: float, callback: Callable[[], None]):
        super().__init__(name)
        self._timer = threading.Timer(delay, self._fire, args=(callback,))
        self._timer.daemon = True

    def start(self) -> None:
        self._timer.start()

    def _fire(self, callback: Callable[[], None]) -> None:
        if not self.cancelled:
            callback()

    def cancel(self) -> None:
        super().cancel()
        self._timer.cancel()


class _Repeating(ScheduledTask):
    def __init__(self, name: str, interval: float, callback: Callable[[], None]):
        super().__init__(name)
        self._interval = interval
        self._callback = callback
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        # Event.wait returns True once cancelled
        while not self._cancelled.wait(self._interval):
            self._callback()


class Scheduler:
    """threading-backed scheduler used by the real game loop."""

    def call_later(self, delay: float, callback: Callable[[], None], name: str = "delayed") -> ScheduledTask:
        task = _OneShot(name, delay, callback)
        task.start()
        logger.debug("scheduled %s in %.2fs", name, delay)
        return task

    def call_every(self, interval: float, callback: Callable[[], None], name: str = "interval") -> ScheduledTask:
        task = _Repeating(name, interval, callback)
        task.start()
        logger.debug("scheduled %s every %.2fs", name, interval)
        return task


def cancel_quietly(task: Optional[ScheduledTask]) -> None:
    if task is not None:
        task.cancel()
