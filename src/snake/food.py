# food.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Collection, Optional

import numpy as np  # type: ignore

from .config import Config, RampRule
from .enums import Difficulty
from .grid import Cell, Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places one food at a time on a free cell, chosen uniformly at random."""

    def __init__(self, grid: Grid, rng: np.random.Generator):
        self.grid = grid
        self.rng = rng
        self.food: Optional[Cell] = None

    @property
    def active(self) -> bool:
        return self.food is not None

    def spawn(self, occupied: Collection[Cell]) -> Cell:
        # Unbounded rejection sampling: a board with no free cell never returns.
        blocked = set(occupied)
        while True:
            cell = self.grid.random_cell(self.rng)
            if cell not in blocked:
                self.food = cell
                logger.debug("food spawned at %s", cell)
                return cell

    def ensure(self, occupied: Collection[Cell]) -> Cell:
        if self.food is None:
            return self.spawn(occupied)
        return self.food

    def try_eat(self, head: Cell) -> bool:
        if self.food is not None and head == self.food:
            self.food = None
            return True
        return False

    def clear(self) -> None:
        self.food = None


@dataclass
class SpeedState:
    ticks_per_move: int
    level: int

    @classmethod
    def initial(cls, cfg: Config) -> "SpeedState":
        return cls(ticks_per_move=cfg.start_ticks_per_move, level=cfg.start_speed_level)

    def speed_up(self, rule: RampRule) -> None:
        # The display level always advances, even when the pace is already at its floor.
        self.ticks_per_move = max(rule.floor, self.ticks_per_move - rule.step)
        self.level += rule.level_step


def ramp_rule(cfg: Config, difficulty: Difficulty) -> RampRule:
    return cfg.hard if difficulty is Difficulty.HARD else cfg.normal


def is_speedup_milestone(score: int, every: int) -> bool:
    return score > 0 and score % every == 0
