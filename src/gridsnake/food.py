# food.py
import logging
import random
from typing import Iterable, Optional

from .config import CFG, Cell, GRID_WIDTH, GRID_HEIGHT
from .geometry import in_bounds

logger = logging.getLogger(__name__)


class FoodSpawner:
    """
    Places food uniformly at random over the whole grid.

    By default cells under the snake are NOT excluded, so food can appear
    beneath the body. With `avoid_snake=True` the cells passed to spawn()
    are resampled away.
    """

    def __init__(self, seed: Optional[int] = CFG.seed, avoid_snake: bool = CFG.food_avoids_snake):
        self.rng = random.Random(seed)
        self.avoid_snake = avoid_snake

    def _random_cell(self) -> Cell:
        return (self.rng.randrange(GRID_WIDTH), self.rng.randrange(GRID_HEIGHT))

    def spawn(self, exclude: Iterable[Cell] = ()) -> Cell:
        if not self.avoid_snake:
            return self._random_cell()

        blocked = {cell for cell in exclude if in_bounds(cell)}
        if len(blocked) >= GRID_WIDTH * GRID_HEIGHT:
            logger.warning("No free cell left for food; spawning anywhere on the grid")
            return self._random_cell()

        while True:
            cell = self._random_cell()
            if cell not in blocked:
                return cell
