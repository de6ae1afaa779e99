# render.py
from typing import Tuple

import pygame # type: ignore

from .config import (
    Cell, WINDOW_WIDTH, WINDOW_HEIGHT,
    BG, HEAD_COLOR, BODY_COLOR, FOOD_COLOR, TEXT, GAME_OVER_TEXT,
)
from .game import Frame
from .geometry import cell_to_screen_rect, cells_to_screen_rects

# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, cell: Cell, color: Tuple[int, int, int], padding: float = 1.0) -> None:
    pygame.draw.rect(screen, color, pygame.Rect(*cell_to_screen_rect(cell, padding)))

# ---------- Draw ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, frame: Frame) -> None:
    """Pure read of the frame: nothing here touches game state."""
    screen.fill(BG)
    # food
    if frame.food is not None:
        draw_cell(screen, frame.food, FOOD_COLOR, padding=2.0)
    # snake, tail first so the head is drawn on top
    rects = cells_to_screen_rects(frame.body, padding=1.0)
    for i in range(len(rects) - 1, -1, -1):
        color = HEAD_COLOR if i == 0 else BODY_COLOR
        pygame.draw.rect(screen, color, pygame.Rect(*rects[i].tolist()))
    # score
    txt = font.render(f"Score: {frame.score}", True, TEXT)
    screen.blit(txt, (10, 10))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font) -> None:
    title = font.render("GAME OVER", True, GAME_OVER_TEXT)
    sub   = font.render("Press SPACE to restart", True, GAME_OVER_TEXT)

    tx = title.get_rect(center=(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2 - 20))
    sx = sub.get_rect(center=(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2 + 20))

    screen.blit(title, tx)
    screen.blit(sub, sx)

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, big_font: pygame.font.Font, frame: Frame) -> None:
    draw_game(screen, font, frame)
    if frame.is_over:
        draw_game_over(screen, big_font)
