# render.py
from typing import Tuple

import pygame  # type: ignore

from .config import (
    CELL_SIZE, BORDER_TOP, BORDER_SIDE,
    BG, GRID_ALT, GRID_LINE, GREEN, ORANGE, RED, FOOD, TEXT, MODE_TEXT,
)
from .enums import CellState, Difficulty, GameState, MenuItem, Orientation, SpeedTier
from .session import Frame

TIER_COLORS = {
    SpeedTier.GREEN: GREEN,
    SpeedTier.ORANGE: ORANGE,
    SpeedTier.RED: RED,
}

MENU_LABELS = {
    MenuItem.NEW_GAME: "New Game",
    MenuItem.NEW_GAME_HARD: "New Game (Hard)",
    MenuItem.EXIT: "Exit",
}


# ---------- Helpers ----------
def cell_rect(gx: int, gy: int) -> pygame.Rect:
    return pygame.Rect(BORDER_SIDE + gx * CELL_SIZE, BORDER_TOP + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int], inset: int = 0) -> None:
    pygame.draw.rect(screen, color, cell_rect(gx, gy).inflate(-2 * inset, -2 * inset))

def draw_segment(screen: pygame.Surface, gx: int, gy: int, color, orientation: Orientation, tail: bool) -> None:
    """Body pieces are narrowed across their direction of travel; the tail a bit more."""
    across = CELL_SIZE // 4 if tail else CELL_SIZE // 8
    rect = cell_rect(gx, gy)
    if orientation is Orientation.VERTICAL:
        rect = rect.inflate(-2 * across, 0)
    else:
        rect = rect.inflate(0, -2 * across)
    pygame.draw.rect(screen, color, rect)

def draw_text_center(screen: pygame.Surface, font: pygame.font.Font, text: str, y: int, color=TEXT) -> None:
    for i, line in enumerate(text.split("\n")):
        surf = font.render(line, True, color)
        screen.blit(surf, surf.get_rect(center=(screen.get_width() // 2, y + i * (font.get_linesize() + 4))))

def draw_overlay(screen: pygame.Surface, alpha: int = 140) -> None:
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    screen.blit(overlay, (0, 0))


# ---------- Screens ----------
def draw_intro(screen: pygame.Surface, font: pygame.font.Font, frame: Frame) -> None:
    screen.fill(GRID_ALT)
    level = int(255 * frame.intro_opacity)
    draw_text_center(screen, font, "SNAKE", screen.get_height() // 2 - 30, (0, level, 0))
    draw_text_center(screen, font, "Press Enter", screen.get_height() // 2 + 20, (level, level, level))

def draw_title(screen: pygame.Surface, font: pygame.font.Font, frame: Frame) -> None:
    screen.fill(BG)
    draw_text_center(screen, font, "SNAKE", screen.get_height() // 3)
    for i, item in enumerate(MenuItem):
        color = GREEN if item is frame.menu_item else TEXT
        label = ("> " if item is frame.menu_item else "  ") + MENU_LABELS[item]
        draw_text_center(screen, font, label, screen.get_height() // 2 + i * 40, color)

def draw_board(screen: pygame.Surface, frame: Frame) -> None:
    screen.fill(BG)
    h, w = frame.board.shape
    for gy in range(h):
        for gx in range(w):
            if (gx + gy) % 2:
                draw_cell(screen, gx, gy, GRID_ALT)
    pygame.draw.rect(
        screen, GRID_LINE,
        pygame.Rect(BORDER_SIDE, BORDER_TOP, w * CELL_SIZE, h * CELL_SIZE).inflate(6, 6),
        3,
    )

def draw_game(screen: pygame.Surface, font: pygame.font.Font, frame: Frame) -> None:
    draw_board(screen, frame)
    color = TIER_COLORS[frame.color]

    # food
    ys, xs = (frame.board == CellState.FOOD).nonzero()
    for gx, gy in zip(xs, ys):
        draw_cell(screen, int(gx), int(gy), FOOD, inset=CELL_SIZE // 6)
    # snake
    for seg in frame.segments:
        draw_segment(screen, seg.cell[0], seg.cell[1], color, seg.orientation, seg.is_tail)
    hx, hy = frame.head
    if 0 <= hx < frame.board.shape[1] and 0 <= hy < frame.board.shape[0]:
        draw_cell(screen, hx, hy, color)

    # hud
    mode = "Hard Mode" if frame.difficulty is Difficulty.HARD else "Normal Mode"
    hud = [
        (mode, MODE_TEXT),
        (f"Seconds Survived: {frame.survival_seconds}", TEXT),
        (f"Score: {frame.score}", TEXT),
        (f"Current Speed: {frame.speed_level}", TEXT),
    ]
    x = BORDER_SIDE
    for text, c in hud:
        surf = font.render(text, True, c)
        screen.blit(surf, (x, (BORDER_TOP - surf.get_height()) // 2))
        x += surf.get_width() + 40

    if frame.paused:
        draw_overlay(screen)
        draw_text_center(screen, font, "Game Paused. Escape to resume\nor Q to quit.", screen.get_height() // 2)
    elif frame.state is GameState.PLAYING and not frame.started:
        draw_overlay(screen)
        draw_text_center(screen, font, "Arrow keys or WASD keys move snake\nEnter starts game", screen.get_height() // 2)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, frame: Frame) -> None:
    draw_overlay(screen)
    draw_text_center(
        screen, font,
        f"GAME OVER\n\nScore: {frame.score}\n\nEnter = New Game\nM = Change mode\nQ = Quit",
        screen.get_height() // 2 - 80,
    )

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, frame: Frame) -> None:
    if frame.state is GameState.INTRO:
        draw_intro(screen, font, frame)
    elif frame.state is GameState.TITLE:
        draw_title(screen, font, frame)
    elif frame.state in (GameState.PLAYING, GameState.PAUSED, GameState.GAME_OVER):
        draw_game(screen, font, frame)
        if frame.game_over:
            draw_game_over(screen, font, frame)
