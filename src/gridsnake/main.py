# main.py
import argparse
import logging
from typing import Optional, Tuple

import pygame # type: ignore

from .config import WINDOW_WIDTH, WINDOW_HEIGHT, UP, DOWN, LEFT, RIGHT, CFG, Config
from .game import GameSession
from .render import draw_frame

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

# ---------- Input ----------
def poll_input() -> Tuple[bool, Optional[Tuple[int, int]], bool]:
    """
    Drain this frame's events.
    Returns (running, direction, restart); only the first direction key
    pressed this frame counts.
    """
    running = True
    direction: Optional[Tuple[int, int]] = None
    restart = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                running = False
            elif event.key == pygame.K_SPACE:
                restart = True
            elif direction is None and event.key in KEY_TO_DIRECTION:
                direction = KEY_TO_DIRECTION[event.key]
    return running, direction, restart

# ---------- Loop ----------
def run(cfg: Config) -> None:
    pygame.init()
    font = pygame.font.SysFont(None, 30)
    big_font = pygame.font.SysFont(None, 40)
    screen = pygame.display.set_mode((int(WINDOW_WIDTH), int(WINDOW_HEIGHT)))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()

    session = GameSession(cfg)
    logger.info("Starting game (seed=%s, tick=%.3fs)", cfg.seed, cfg.move_every_s)
    running = True

    while running:
        # 1) input
        running, direction, restart = poll_input()
        if not running:
            break

        # 2) update; tick() returns ms since the previous frame
        dt = clock.tick(cfg.fps) / 1000.0
        frame = session.step(dt, direction=direction, restart=restart)

        # 3) render
        draw_frame(screen, font, big_font, frame)
        pygame.display.flip()

    pygame.quit()

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play snake on a 20x15 grid.")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="food RNG seed (default: random)")
    parser.add_argument("--fps", type=int, default=CFG.fps)
    parser.add_argument(
        "--tick",
        type=float,
        default=CFG.move_every_s,
        help="seconds between snake moves",
    )
    parser.add_argument(
        "--food-avoids-snake",
        action="store_true",
        help="never spawn food on a cell the snake occupies",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.tick <= 0:
        build_parser().error("--tick must be positive")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    cfg = Config(
        seed=args.seed,
        move_every_s=args.tick,
        fps=args.fps,
        food_avoids_snake=args.food_avoids_snake,
    )
    run(cfg)

if __name__ == "__main__":
    main()
