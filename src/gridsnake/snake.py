# snake.py
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Tuple

from .config import Cell, DIRECTIONS, START_CELL, START_DIRECTION


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


# ---------- State ----------
@dataclass
class SnakeState:
    body: Deque[Cell] = field(default_factory=lambda: deque([START_CELL]))  # head at index 0
    direction: Tuple[int, int] = START_DIRECTION
    growing: bool = False

    @property
    def head(self) -> Cell:
        assert self.body, "snake body must never be empty"
        return self.body[0]

    @property
    def score(self) -> int:
        return len(self.body)

    def set_direction(self, requested: Tuple[int, int]) -> bool:
        """
        Turn towards `requested` unless it points straight back into the neck.
        Returns True if the heading was changed.
        """
        assert requested in DIRECTIONS, f"Invalid direction {requested}"
        if is_opposite(requested, self.direction):
            return False
        self.direction = requested
        return True

    def advance(self) -> Cell:
        """
        Move one cell along the current direction and return the new head.
        No wraparound: the head may leave the grid, collision checks catch it.
        """
        hx, hy = self.head
        dx, dy = self.direction
        new_head = (hx + dx, hy + dy)

        self.body.appendleft(new_head)
        if self.growing:
            self.growing = False
        else:
            self.body.pop()
        return new_head

    def mark_growing(self) -> None:
        self.growing = True


def new_snake_state() -> SnakeState:
    return SnakeState()
