"""Grid snake arcade game: core game state machine plus pygame front end."""

from src.snake.session import Frame, GameSession, SegmentView
from src.snake.enums import Difficulty, Direction, GameState, InputEvent

__all__ = ["Frame", "GameSession", "SegmentView", "Difficulty", "Direction", "GameState", "InputEvent"]
