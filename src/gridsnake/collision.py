# collision.py
"""
Collision predicates evaluated against the snake right after it moves.

None of these touch game state; the session decides what each hit means.
An out-of-grid head can never equal an in-grid food cell, so a food hit and
a wall hit never coincide. A food hit and a self hit can (food spawned
under the body); the self hit still ends the game.
"""
from typing import Optional, Sequence

from .config import Cell
from .geometry import in_bounds


def is_wall_collision(head: Cell) -> bool:
    return not in_bounds(head)


def is_self_collision(body: Sequence[Cell]) -> bool:
    """True if any segment behind the head shares the head's cell."""
    if not body:
        return False
    head = body[0]
    return any(segment == head for i, segment in enumerate(body) if i > 0)


def is_food_collision(head: Cell, food: Optional[Cell]) -> bool:
    return food is not None and head == food


def terminal_reason(body: Sequence[Cell]) -> Optional[str]:
    """
    Which terminal collision the current body is in, checked wall first,
    then self. None while the snake is alive.
    """
    if is_wall_collision(body[0]):
        return "wall"
    if is_self_collision(body):
        return "self"
    return None
