# game.py
import enum
import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .clock import MovementClock
from .collision import is_food_collision, terminal_reason
from .config import CFG, Cell, Config, GRID_WIDTH, GRID_HEIGHT
from .food import FoodSpawner
from .geometry import in_bounds
from .snake import SnakeState, new_snake_state

logger = logging.getLogger(__name__)


class GamePhase(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


# ---------- Read-only view for the renderer ----------
@dataclass(frozen=True)
class Frame:
    body: Tuple[Cell, ...]         # head at index 0
    food: Optional[Cell]
    score: int
    phase: GamePhase
    ticked: bool                   # did the snake move this frame?
    death_reason: Optional[str] = None

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER


# ---------- Session ----------
@dataclass
class GameSession:
    """
    Owns every piece of mutable game state and runs the per-frame pipeline:

        direction update -> movement tick -> advance (if ticked) -> food /
        wall / self checks -> phase transition -> food top-up

    The checks run on every frame, so food that respawns under the resting
    head is eaten on the next frame without waiting for a move.

    While the game is over only the restart signal is processed.
    """
    cfg: Config = field(default_factory=lambda: CFG)
    snake: SnakeState = field(init=False)
    clock: MovementClock = field(init=False)
    spawner: FoodSpawner = field(init=False)
    food: Optional[Cell] = field(init=False, default=None)
    phase: GamePhase = field(init=False, default=GamePhase.PLAYING)
    death_reason: Optional[str] = field(init=False, default=None)

    def __post_init__(self):
        self.snake = new_snake_state()
        self.clock = MovementClock(period=self.cfg.move_every_s)
        self.spawner = FoodSpawner(seed=self.cfg.seed, avoid_snake=self.cfg.food_avoids_snake)
        self.food = self._spawn_food()

    @property
    def score(self) -> int:
        return self.snake.score

    def _spawn_food(self) -> Cell:
        food = self.spawner.spawn(self.snake.body)
        logger.debug("Food spawned at %s", food)
        return food

    # Per-frame entry point ----------------------------------------------------
    def step(self, dt: float, direction: Optional[Tuple[int, int]] = None,
             restart: bool = False) -> Frame:
        """
        Run one frame of the pipeline and return what the renderer should draw.
        `direction` is ignored while the game is over, `restart` while playing.
        """
        if self.phase is GamePhase.GAME_OVER:
            if restart:
                self.restart()
            return self.frame(ticked=False)

        # 1) Input: reversal guard lives in SnakeState
        if direction is not None:
            self.snake.set_direction(direction)

        # 2) Movement gate
        ticked = self.clock.tick(dt)
        if ticked:
            self.snake.advance()

        # 3) Checks run every frame; between ticks only food can change anything
        self._resolve_collisions()

        # 4) Food top-up (only reachable if nothing was ever spawned)
        if self.phase is GamePhase.PLAYING and self.food is None:
            self.food = self._spawn_food()

        return self.frame(ticked=ticked)

    def _resolve_collisions(self) -> None:
        head = self.snake.head

        if is_food_collision(head, self.food):
            self.snake.mark_growing()
            logger.debug("Ate food at %s (length %d)", head, self.score)
            self.food = self._spawn_food()

        reason = terminal_reason(self.snake.body)
        if reason is not None:
            self.phase = GamePhase.GAME_OVER
            self.death_reason = reason
            logger.info("Game over: %s collision at %s, score %d", reason, head, self.score)

    def restart(self) -> bool:
        """Start a fresh game from GameOver. Returns False (and does nothing) while playing."""
        if self.phase is not GamePhase.GAME_OVER:
            return False

        self.snake = new_snake_state()
        self.clock.reset()
        self.death_reason = None
        self.food = self._spawn_food()
        self.phase = GamePhase.PLAYING
        logger.info("Game restarted")
        return True

    # Views --------------------------------------------------------------------
    def frame(self, ticked: bool = False) -> Frame:
        return Frame(
            body=tuple(self.snake.body),
            food=self.food,
            score=self.score,
            phase=self.phase,
            ticked=ticked,
            death_reason=self.death_reason,
        )

    def board_text(self) -> str:
        """
        ASCII picture of the grid, top row (y = GRID_HEIGHT - 1) first:
        H = head, S = body, F = food, . = empty.
        Cells outside the grid (a head that just hit the wall) are not drawn.
        """
        board = [["." for _ in range(GRID_WIDTH)] for _ in range(GRID_HEIGHT)]

        def put(cell: Cell, ch: str) -> None:
            if in_bounds(cell):
                board[cell[1]][cell[0]] = ch

        if self.food is not None:
            put(self.food, "F")
        for cell in self.snake.body:
            put(cell, "S")
        put(self.snake.head, "H")

        return "\n".join("".join(board[y]) for y in range(GRID_HEIGHT - 1, -1, -1))
