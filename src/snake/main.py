# main.py
import argparse
import dataclasses
import logging
from typing import Optional

import pygame # type: ignore

from .audio import Audio
from .config import CFG, Config, window_size
from .enums import GameState, InputEvent
from .render import draw_frame
from .session import GameSession

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_RETURN: InputEvent.CONFIRM,
    pygame.K_KP_ENTER: InputEvent.CONFIRM,
    pygame.K_UP: InputEvent.UP,
    pygame.K_w: InputEvent.UP,
    pygame.K_DOWN: InputEvent.DOWN,
    pygame.K_s: InputEvent.DOWN,
    pygame.K_LEFT: InputEvent.LEFT,
    pygame.K_a: InputEvent.LEFT,
    pygame.K_RIGHT: InputEvent.RIGHT,
    pygame.K_d: InputEvent.RIGHT,
    pygame.K_ESCAPE: InputEvent.PAUSE,
    pygame.K_q: InputEvent.QUIT,
    pygame.K_m: InputEvent.TOGGLE_MODE,
    pygame.K_c: InputEvent.CYCLE_COLOR,
}
MUTE_KEY = pygame.K_n


def map_key(key: int) -> Optional[InputEvent]:
    return KEYMAP.get(key)


def handle_input(session: GameSession, audio: Audio) -> bool:
    """Forward key presses to the session. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == MUTE_KEY:
                audio.toggle_mute()
                continue
            cand = map_key(event.key)
            if cand is not None:
                session.handle_event(cand)
    return True


def build_config(args: argparse.Namespace) -> Config:
    overrides = {"fps": args.fps}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.grid is not None:
        overrides["grid_w"], overrides["grid_h"] = args.grid
    return dataclasses.replace(CFG, **overrides).validate()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake arcade game")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--fps", type=int, default=CFG.fps, help="frames per second")
    parser.add_argument(
        "--grid", type=int, nargs=2, metavar=("W", "H"), default=None,
        help="grid size in cells (default %dx%d)" % (CFG.grid_w, CFG.grid_h),
    )
    parser.add_argument("--skip-intro", action="store_true", help="start at the title menu")
    parser.add_argument("--sound", type=str, default=None, help="game over sound file; muted if omitted")
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = build_config(args)
    logger.info("starting: grid=%dx%d fps=%d seed=%s", cfg.grid_w, cfg.grid_h, cfg.fps, cfg.seed)

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode(window_size(cfg.grid_w, cfg.grid_h))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    audio = Audio(args.sound)

    start = GameState.TITLE if args.skip_intro else GameState.INTRO
    session = GameSession(cfg, start_state=start)
    running = True

    try:
        while running:
            # 1) input
            running = handle_input(session, audio)
            if not running:
                break

            # 2) update (movement is throttled inside the session)
            running = session.update()
            audio.handle(session.drain_events())

            # 3) render
            draw_frame(screen, font, session.snapshot())
            pygame.display.flip()
            clock.tick(cfg.fps)
    finally:
        frame = session.snapshot()
        session.close()
        pygame.quit()

    print(f"[GAME] score={frame.score} survived={frame.survival_seconds}s speed={frame.speed_level}")


if __name__ == "__main__":
    main()
