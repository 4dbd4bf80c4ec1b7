from dataclasses import dataclass, field

# ----- Window & grid -----
CELL_SIZE = 32
GRID_W, GRID_H = 25, 20
BORDER_TOP, BORDER_SIDE = 50, 10

def window_size(grid_w: int, grid_h: int):
    return grid_w * CELL_SIZE + 2 * BORDER_SIDE, grid_h * CELL_SIZE + BORDER_TOP + BORDER_SIDE

# ----- Colors -----
BG        = (0, 20, 0)
GRID_ALT  = (0, 0, 0)
GRID_LINE = (0, 85, 0)
GREEN     = (139, 192, 60)
ORANGE    = (255, 147, 0)
RED       = (255, 60, 60)
FOOD      = (255, 0, 0)
TEXT      = (220, 220, 230)
MODE_TEXT = (116, 158, 53)

# ----- Tunables -----
@dataclass(frozen=True)
class RampRule:
    """How much one speed-up milestone changes the pace for a difficulty."""
    step: int          # ticks_per_move removed per milestone
    level_step: int    # display speed levels added per milestone
    floor: int         # ticks_per_move never goes below this


@dataclass
class Config:
    seed: int | None = None
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    fps: int = 60
    start_ticks_per_move: int = 20
    start_speed_level: int = 1
    score_per_speedup: int = 10
    reaction_delay_s: float = 2.0
    intro_fade_step: float = 0.05
    normal: RampRule = field(default_factory=lambda: RampRule(step=2, level_step=1, floor=5))
    hard: RampRule = field(default_factory=lambda: RampRule(step=4, level_step=2, floor=4))

    def validate(self) -> "Config":
        # initial snake occupies column 0, rows 0..3
        if self.grid_w < 1 or self.grid_h < 5:
            raise ValueError(f"grid {self.grid_w}x{self.grid_h} too small for the initial snake")
        if self.start_ticks_per_move < 1 or self.fps < 1:
            raise ValueError("start_ticks_per_move and fps must be positive")
        if self.score_per_speedup < 1:
            raise ValueError("score_per_speedup must be positive")
        for rule in (self.normal, self.hard):
            if rule.floor < 1 or rule.floor > self.start_ticks_per_move:
                raise ValueError(f"ramp floor {rule.floor} outside 1..{self.start_ticks_per_move}")
        if not 0 < self.intro_fade_step <= 1:
            raise ValueError("intro_fade_step must be in (0, 1]")
        return self

CFG = Config()
