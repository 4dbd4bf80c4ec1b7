"""Shared fixtures: a virtual-time scheduler and session factories."""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from src.snake.config import Config
from src.snake.enums import GameState, InputEvent
from src.snake.session import GameSession
from src.snake.timers import ScheduledTask

FAR_FOOD = (20, 15)


class ManualTask(ScheduledTask):
    def __init__(self, name, due, interval, callback):
        super().__init__(name)
        self.due = due
        self.interval = interval
        self.callback = callback
        self.done = False


class ManualScheduler:
    """Scheduler whose clock only moves when a test calls advance()."""

    def __init__(self):
        self.now = 0.0
        self.tasks = []

    def call_later(self, delay, callback, name="delayed"):
        task = ManualTask(name, self.now + delay, None, callback)
        self.tasks.append(task)
        return task

    def call_every(self, interval, callback, name="interval"):
        task = ManualTask(name, self.now + interval, interval, callback)
        self.tasks.append(task)
        return task

    def pending(self):
        return [t for t in self.tasks if not t.done and not t.cancelled]

    def advance(self, seconds):
        target = self.now + seconds + 1e-9
        while True:
            due = [t for t in self.pending() if t.due <= target]
            if not due:
                break
            task = min(due, key=lambda t: t.due)
            self.now = task.due
            if task.interval is None:
                task.done = True
            else:
                task.due += task.interval
            task.callback()
        self.now = target


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def make_session(scheduler):
    sessions = []

    def factory(start_state=GameState.TITLE, **overrides):
        cfg = Config(seed=overrides.pop("seed", 7), **overrides)
        session = GameSession(cfg, scheduler=scheduler, start_state=start_state)
        sessions.append(session)
        return session

    yield factory
    for session in sessions:
        session.close()


@pytest.fixture
def playing(make_session):
    """Normal-mode session that has been started, with food parked out of the way."""
    session = make_session()
    session.handle_event(InputEvent.CONFIRM)  # title -> playing
    session.handle_event(InputEvent.CONFIRM)  # start moving
    session.spawner.food = FAR_FOOD
    return session
