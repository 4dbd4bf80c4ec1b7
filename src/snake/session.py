# session.py
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np  # type: ignore

from .collision import Collision, check_collision
from .config import CFG, Config
from .enums import (
    DIRECTION_FOR_INPUT,
    Difficulty,
    Direction,
    GameState,
    InputEvent,
    MenuItem,
    Orientation,
    SessionEvent,
    SpeedTier,
)
from .food import FoodSpawner, SpeedState, is_speedup_milestone, ramp_rule
from .grid import Cell, Grid
from .snake import Snake
from .timers import ScheduledTask, Scheduler, cancel_quietly

logger = logging.getLogger(__name__)


# ---------- Render contract ----------
@dataclass(frozen=True)
class SegmentView:
    cell: Cell
    orientation: Orientation
    is_tail: bool


@dataclass(frozen=True)
class Frame:
    """Everything the renderer needs for one frame; no pixels involved."""
    state: GameState
    difficulty: Difficulty
    started: bool
    paused: bool
    game_over: bool
    game_over_reason: Optional[str]
    head: Cell
    direction: Direction
    segments: Tuple[SegmentView, ...]
    food: Optional[Cell]
    score: int
    survival_seconds: int
    speed_level: int
    ticks_per_move: int
    menu_item: MenuItem
    intro_opacity: float
    speed_tier: SpeedTier
    color_override: Optional[SpeedTier]
    board: np.ndarray

    @property
    def color(self) -> SpeedTier:
        return self.color_override or self.speed_tier


# ---------- Session ----------
class GameSession:
    """
    Owns all mutable game state. The frame driver calls handle_event() for
    each key press and update() once per frame; background timers mutate the
    survival clock and the pace under the same lock.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[np.random.Generator] = None,
        start_state: GameState = GameState.INTRO,
    ):
        self.cfg = cfg.validate()
        self.scheduler = scheduler or Scheduler()
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.grid = Grid(cfg.grid_w, cfg.grid_h)
        self.lock = threading.RLock()

        self.state = start_state
        self.difficulty = Difficulty.NORMAL
        self.menu_item = MenuItem.NEW_GAME
        self.intro_opacity = 1.0
        self.fading_intro = False
        self.color_override: Optional[SpeedTier] = None

        self._events: List[SessionEvent] = []
        self._survival_task: Optional[ScheduledTask] = None
        self._ramp_tasks: List[ScheduledTask] = []
        self._generation = 0
        self._reset_round()

    # ---------- Round lifecycle ----------
    def _reset_round(self) -> None:
        self._cancel_timers()
        self._generation += 1
        self.snake = Snake.initial()
        self.spawner = FoodSpawner(self.grid, self.rng)
        self.score = 0
        self.speed = SpeedState.initial(self.cfg)
        self.started = False
        self.game_over_reason: Optional[str] = None
        self.survival_seconds = 0
        self.clock_count = 0

    def _start_round(self) -> None:
        self.started = True
        self.spawner.ensure(self.snake.occupied_cells())
        self._survival_task = self.scheduler.call_every(1.0, self._on_second, name="survival-clock")
        logger.info("round started (%s)", self.difficulty.value)

    def _cancel_timers(self) -> None:
        cancel_quietly(self._survival_task)
        self._survival_task = None
        for task in self._ramp_tasks:
            task.cancel()
        self._ramp_tasks = []

    def close(self) -> None:
        with self.lock:
            self._cancel_timers()

    def _set_state(self, state: GameState) -> None:
        if state is not self.state:
            logger.info("state %s -> %s", self.state.value, state.value)
            self.state = state

    # ---------- Input ----------
    def handle_event(self, event: InputEvent) -> None:
        with self.lock:
            if self.state is GameState.INTRO:
                self._on_intro(event)
            elif self.state is GameState.TITLE:
                self._on_title(event)
            elif self.state is GameState.PLAYING:
                self._on_playing(event)
            elif self.state is GameState.PAUSED:
                self._on_paused(event)
            elif self.state is GameState.GAME_OVER:
                self._on_game_over(event)

    def _on_intro(self, event: InputEvent) -> None:
        if event is InputEvent.CONFIRM and not self.fading_intro:
            self.fading_intro = True

    def _on_title(self, event: InputEvent) -> None:
        if event is InputEvent.DOWN:
            self.menu_item = self.menu_item.next()
        elif event is InputEvent.UP:
            self.menu_item = self.menu_item.previous()
        elif event is InputEvent.CONFIRM:
            if self.menu_item is MenuItem.EXIT:
                self._set_state(GameState.EXIT)
                return
            self.difficulty = Difficulty.HARD if self.menu_item is MenuItem.NEW_GAME_HARD else Difficulty.NORMAL
            self._reset_round()
            self._set_state(GameState.PLAYING)

    def _on_playing(self, event: InputEvent) -> None:
        if event is InputEvent.CYCLE_COLOR:
            self._cycle_color()
        elif not self.started:
            if event is InputEvent.CONFIRM:
                self._start_round()
        elif event in DIRECTION_FOR_INPUT:
            self.snake.turn(DIRECTION_FOR_INPUT[event])
        elif event is InputEvent.PAUSE:
            self._set_state(GameState.PAUSED)

    def _on_paused(self, event: InputEvent) -> None:
        if event is InputEvent.PAUSE:
            self._set_state(GameState.PLAYING)
        elif event is InputEvent.QUIT:
            self._set_state(GameState.EXIT)
        elif event is InputEvent.CYCLE_COLOR:
            self._cycle_color()

    def _on_game_over(self, event: InputEvent) -> None:
        if event is InputEvent.CONFIRM:
            self._reset_round()
            self._set_state(GameState.PLAYING)
            self._start_round()
        elif event is InputEvent.QUIT:
            self._set_state(GameState.EXIT)
        elif event is InputEvent.TOGGLE_MODE:
            self.difficulty = self.difficulty.toggled()
            logger.info("mode switched to %s", self.difficulty.value)
        elif event is InputEvent.CYCLE_COLOR:
            self._cycle_color()

    def _cycle_color(self) -> None:
        self.color_override = (self.color_override or SpeedTier.GREEN).next()
        logger.debug("color override -> %s", self.color_override.value)

    # ---------- Frame update ----------
    def update(self) -> bool:
        """Advance one frame. Returns False once the session wants to exit."""
        with self.lock:
            if self.state is GameState.INTRO:
                if self.fading_intro:
                    self.intro_opacity = max(0.0, self.intro_opacity - self.cfg.intro_fade_step)
                    if self.intro_opacity <= 0.0:
                        self._set_state(GameState.TITLE)
            elif self.state is GameState.PLAYING and self.started:
                self.clock_count += 1
                if self.clock_count > self.speed.ticks_per_move:
                    self.clock_count = 0
                    self.tick()
            return self.state is not GameState.EXIT

    def tick(self) -> Collision:
        """One movement step: move, collide, eat, trim."""
        with self.lock:
            self.snake.move()
            collision = check_collision(self.snake, self.grid)
            if collision.fatal:
                self._end_round(collision)
            elif self.spawner.try_eat(self.snake.head):
                self._eat()
            self.snake.trim_path()
            if not collision.fatal:
                self.spawner.ensure(self.snake.occupied_cells())
            logger.debug("tick head=%s score=%d", self.snake.head, self.score)
            return collision

    def _eat(self) -> None:
        self.snake.grow()
        self.score += 1
        if is_speedup_milestone(self.score, self.cfg.score_per_speedup):
            self._schedule_speedup()

    def _schedule_speedup(self) -> None:
        rule = ramp_rule(self.cfg, self.difficulty)
        generation = self._generation

        def apply() -> None:
            with self.lock:
                if generation != self._generation:
                    return
                self.speed.speed_up(rule)
                logger.info(
                    "speed up: ticks_per_move=%d level=%d",
                    self.speed.ticks_per_move, self.speed.level,
                )

        self._ramp_tasks.append(
            self.scheduler.call_later(self.cfg.reaction_delay_s, apply, name="speed-up")
        )

    def _end_round(self, collision: Collision) -> None:
        if self.state is GameState.GAME_OVER:
            return
        self.started = False
        self.game_over_reason = collision.reason
        cancel_quietly(self._survival_task)
        self._survival_task = None
        self._set_state(GameState.GAME_OVER)
        self._events.append(SessionEvent.GAME_OVER_SOUND)
        logger.info(
            "game over (%s): score=%d survived=%ds", collision.reason, self.score, self.survival_seconds
        )

    def _on_second(self) -> None:
        with self.lock:
            if self.state is GameState.PLAYING and self.started:
                self.survival_seconds += 1

    # ---------- Output ----------
    def drain_events(self) -> List[SessionEvent]:
        with self.lock:
            events, self._events = self._events, []
            return events

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def snapshot(self) -> Frame:
        with self.lock:
            snake = self.snake
            tail = len(snake.segments) - 1
            segments = tuple(
                SegmentView(
                    cell=snake.positions[i],
                    orientation=snake.segment_orientation(seg),
                    is_tail=seg.index == tail,
                )
                for i, seg in enumerate(snake.segments)
            )
            return Frame(
                state=self.state,
                difficulty=self.difficulty,
                started=self.started,
                paused=self.state is GameState.PAUSED,
                game_over=self.game_over,
                game_over_reason=self.game_over_reason,
                head=snake.head,
                direction=snake.direction,
                segments=segments,
                food=self.spawner.food,
                score=self.score,
                survival_seconds=self.survival_seconds,
                speed_level=self.speed.level,
                ticks_per_move=self.speed.ticks_per_move,
                menu_item=self.menu_item,
                intro_opacity=self.intro_opacity,
                speed_tier=SpeedTier.for_level(self.speed.level),
                color_override=self.color_override,
                board=self.grid.board(snake.head, snake.body_cells(), self.spawner.food),
            )
