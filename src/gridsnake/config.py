# config.py
from dataclasses import dataclass
from typing import Tuple

Cell = Tuple[int, int]

# ----- Grid & window -----
GRID_WIDTH, GRID_HEIGHT = 20, 15
CELL_SIZE = 30.0
WINDOW_WIDTH = GRID_WIDTH * CELL_SIZE
WINDOW_HEIGHT = GRID_HEIGHT * CELL_SIZE

# ----- Colors -----
BG         = (0, 0, 0)
HEAD_COLOR = (0, 255, 0)
BODY_COLOR = (0, 204, 0)
FOOD_COLOR = (255, 0, 0)
TEXT       = (255, 255, 255)
GAME_OVER_TEXT = (255, 0, 0)

# ----- Directions (dx, dy), y grows upward -----
UP, DOWN, LEFT, RIGHT = (0, 1), (0, -1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Start of every game -----
START_CELL: Cell = (5, 5)
START_DIRECTION = RIGHT

# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    move_every_s: float = 0.15
    fps: int = 60
    food_avoids_snake: bool = False  # off: food may land under the snake

CFG = Config()
