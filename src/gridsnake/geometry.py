# geometry.py
"""
Coordinate transforms between grid cells, render space and screen pixels.

Render space is centred on the middle of the grid with y pointing up; a cell
maps to the centre of its square. Screen space is what pygame draws into:
origin at the top-left corner, y pointing down.
"""
from typing import Iterable, Tuple

import numpy as np  # type: ignore

from .config import Cell, CELL_SIZE, GRID_WIDTH, GRID_HEIGHT, WINDOW_WIDTH, WINDOW_HEIGHT

Point = Tuple[float, float]

_HALF = np.array([GRID_WIDTH / 2.0, GRID_HEIGHT / 2.0], dtype=np.float64)


def in_bounds(cell: Cell) -> bool:
    """Check if a cell is inside the grid."""
    x, y = cell
    return 0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT


def grid_to_world(cell: Cell) -> Point:
    x, y = cell
    return (
        (x - GRID_WIDTH / 2.0) * CELL_SIZE + CELL_SIZE / 2.0,
        (y - GRID_HEIGHT / 2.0) * CELL_SIZE + CELL_SIZE / 2.0,
    )


def world_to_grid(point: Point) -> Cell:
    """
    Inverse of grid_to_world, snapped to the nearest integer cell.
    The game itself only ever stores cells; this is here so a render-space
    point (a sprite position, a click) can be mapped back onto the grid.
    """
    wx, wy = point
    return (
        int(round((wx - CELL_SIZE / 2.0) / CELL_SIZE + GRID_WIDTH / 2.0)),
        int(round((wy - CELL_SIZE / 2.0) / CELL_SIZE + GRID_HEIGHT / 2.0)),
    )


def cells_to_world(cells: Iterable[Cell]) -> np.ndarray:
    """
    Vectorised grid_to_world for a whole body.
    Returns a float array of shape [N, 2]; empty input gives shape [0, 2].
    """
    arr = np.asarray(list(cells), dtype=np.float64).reshape(-1, 2)
    return (arr - _HALF) * CELL_SIZE + CELL_SIZE / 2.0


def world_to_screen(point: Point) -> Point:
    wx, wy = point
    return (wx + WINDOW_WIDTH / 2.0, WINDOW_HEIGHT / 2.0 - wy)


def cell_to_screen_rect(cell: Cell, padding: float = 0.0) -> Tuple[float, float, float, float]:
    """
    (left, top, width, height) of a cell in screen pixels, shrunk by
    `padding` on every side.
    """
    cx, cy = world_to_screen(grid_to_world(cell))
    size = CELL_SIZE - 2 * padding
    return (cx - size / 2.0, cy - size / 2.0, size, size)


def cells_to_screen_rects(cells: Iterable[Cell], padding: float = 0.0) -> np.ndarray:
    """
    cell_to_screen_rect for a whole body in one go.
    Returns a float array of shape [N, 4] with rows (left, top, width, height).
    """
    centers = cells_to_world(cells)
    size = CELL_SIZE - 2 * padding
    rects = np.empty((len(centers), 4), dtype=np.float64)
    rects[:, 0] = centers[:, 0] + WINDOW_WIDTH / 2.0 - size / 2.0
    rects[:, 1] = WINDOW_HEIGHT / 2.0 - centers[:, 1] - size / 2.0
    rects[:, 2:] = size
    return rects
