from dataclasses import dataclass
from typing import Optional

from .grid import Grid
from .snake import Snake


@dataclass(frozen=True)
class Collision:
    wall: bool = False
    self_hit: bool = False

    @property
    def fatal(self) -> bool:
        return self.wall or self.self_hit

    @property
    def reason(self) -> Optional[str]:
        if self.wall:
            return "wall"
        if self.self_hit:
            return "self"
        return None


def hits_wall(snake: Snake, grid: Grid) -> bool:
    return not grid.contains(snake.head)


def hits_self(snake: Snake) -> bool:
    # Entry 0 is the cell the head just left; only the slots the body
    # still covers (indices 1..len-1) count.
    return snake.head in snake.path.cells(len(snake.segments))[1:]


def check_collision(snake: Snake, grid: Grid) -> Collision:
    """Pure verdict for the current head position; both checks always run."""
    return Collision(wall=hits_wall(snake, grid), self_hit=hits_self(snake))
