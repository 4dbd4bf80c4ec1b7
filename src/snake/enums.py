from enum import Enum, IntEnum


class Orientation(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Direction(Enum):
    """Grid directions as (dx, dy); y grows downwards."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def orientation(self) -> Orientation:
        return Orientation.VERTICAL if self.dx == 0 else Orientation.HORIZONTAL

    def same_axis(self, other: "Direction") -> bool:
        return self.orientation is other.orientation


class GameState(Enum):
    INTRO = "intro"
    TITLE = "title"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    EXIT = "exit"


class Difficulty(Enum):
    NORMAL = "normal"
    HARD = "hard"

    def toggled(self) -> "Difficulty":
        return Difficulty.HARD if self is Difficulty.NORMAL else Difficulty.NORMAL


class MenuItem(Enum):
    NEW_GAME = "new_game"
    NEW_GAME_HARD = "new_game_hard"
    EXIT = "exit"

    def next(self) -> "MenuItem":
        items = list(MenuItem)
        return items[(items.index(self) + 1) % len(items)]

    def previous(self) -> "MenuItem":
        items = list(MenuItem)
        return items[(items.index(self) - 1) % len(items)]


class InputEvent(Enum):
    CONFIRM = "confirm"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    QUIT = "quit"
    TOGGLE_MODE = "toggle_mode"
    CYCLE_COLOR = "cycle_color"


DIRECTION_FOR_INPUT = {
    InputEvent.UP: Direction.UP,
    InputEvent.DOWN: Direction.DOWN,
    InputEvent.LEFT: Direction.LEFT,
    InputEvent.RIGHT: Direction.RIGHT,
}


class SessionEvent(Enum):
    GAME_OVER_SOUND = "game_over_sound_requested"


class CellState(IntEnum):
    EMPTY = 0
    HEAD = 1
    BODY = 2
    FOOD = 3


class SpeedTier(Enum):
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"

    @classmethod
    def for_level(cls, level: int) -> "SpeedTier":
        if level >= 7:
            return cls.RED
        if level >= 3:
            return cls.ORANGE
        return cls.GREEN

    def next(self) -> "SpeedTier":
        tiers = list(SpeedTier)
        return tiers[(tiers.index(self) + 1) % len(tiers)]
