"""
Tests for game.py - the per-frame pipeline and Playing / GameOver transitions.
"""

import logging
from collections import deque

import pytest

from gridsnake.config import Config, GRID_WIDTH, GRID_HEIGHT, UP, DOWN, LEFT, RIGHT
from gridsnake.game import Frame, GamePhase, GameSession
from gridsnake.snake import SnakeState

TICK = 0.15


@pytest.fixture
def session():
    s = GameSession(Config(seed=7))
    s.food = (0, 0)  # out of the way unless a test moves it
    return s


def park_food_away(session):
    """Keep respawned food off the snake's path along row 5."""
    session.spawner.spawn = lambda exclude=(): (0, 0)


class TestStartAndFrame:
    """Tests for the initial session and its frame view."""

    def test_initial_state(self):
        s = GameSession(Config(seed=3))
        assert s.phase is GamePhase.PLAYING
        assert list(s.snake.body) == [(5, 5)]
        assert s.snake.direction == RIGHT
        assert s.snake.growing is False
        assert s.food is not None
        assert s.score == 1

    def test_frame_is_read_only_snapshot(self, session):
        frame = session.frame()
        assert isinstance(frame, Frame)
        assert frame.body == ((5, 5),)
        assert frame.head == (5, 5)
        assert frame.score == 1
        assert frame.is_over is False
        with pytest.raises(Exception):
            frame.score = 99

    def test_no_tick_no_move(self, session):
        frame = session.step(TICK / 3)
        assert frame.ticked is False
        assert frame.body == ((5, 5),)


class TestMovement:
    """Tests for direction handling inside step()."""

    def test_one_move_per_tick(self, session):
        frame = session.step(TICK)
        assert frame.ticked is True
        assert frame.head == (6, 5)

    def test_long_frame_moves_once(self, session):
        frame = session.step(TICK * 5)
        assert frame.head == (6, 5)

    def test_reverse_request_ignored(self, session):
        session.step(TICK, direction=LEFT)
        assert session.snake.direction == RIGHT
        assert session.snake.head == (6, 5)

    def test_turn_applied_before_move(self, session):
        frame = session.step(TICK, direction=UP)
        assert frame.head == (5, 6)

    def test_direction_kept_between_ticks(self, session):
        session.step(0.0, direction=DOWN)
        frame = session.step(TICK)
        assert frame.head == (5, 4)


class TestFood:
    """Tests for eating and growth."""

    def test_eat_then_grow_next_tick(self, session):
        session.food = (6, 5)
        park_food_away(session)

        frame = session.step(TICK)
        assert frame.head == (6, 5)
        assert session.snake.growing is True
        assert frame.score == 1
        assert frame.food == (0, 0)

        frame = session.step(TICK)
        assert frame.body == ((7, 5), (6, 5))
        assert frame.score == 2
        assert session.snake.growing is False

    def test_length_is_one_plus_foods_eaten(self, session):
        park_food_away(session)
        eaten = 4
        for i in range(eaten):
            session.food = (6 + i, 5)
            session.step(TICK)
        session.step(TICK)
        assert session.score == 1 + eaten
        assert session.phase is GamePhase.PLAYING

    def test_food_is_replaced_in_same_frame(self):
        s = GameSession(Config(seed=11))
        s.food = (6, 5)
        frame = s.step(TICK)
        assert frame.food is not None
        x, y = frame.food
        assert 0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT

    def test_missing_food_is_respawned(self, session):
        session.food = None
        frame = session.step(0.0)
        assert frame.food is not None

    def test_food_under_resting_head_is_eaten_without_a_tick(self, session):
        session.food = (6, 5)
        spots = iter([(6, 5), (0, 0)])
        session.spawner.spawn = lambda exclude=(): next(spots)

        session.step(TICK)
        # respawned right under the head
        assert session.food == (6, 5)

        frame = session.step(0.0)
        assert frame.ticked is False
        assert frame.food == (0, 0)
        assert frame.head == (6, 5)
        assert session.snake.growing is True

    def test_checks_are_harmless_between_ticks(self, session):
        for _ in range(5):
            frame = session.step(0.0)
        assert frame.body == ((5, 5),)
        assert frame.food == (0, 0)
        assert session.snake.growing is False
        assert session.phase is GamePhase.PLAYING


class TestGameOver:
    """Tests for Playing -> GameOver."""

    def test_wall_collision(self, session, caplog):
        session.snake = SnakeState(body=deque([(GRID_WIDTH - 1, 5)]), direction=RIGHT)
        with caplog.at_level(logging.INFO, logger="gridsnake.game"):
            frame = session.step(TICK)
        assert frame.is_over
        assert frame.death_reason == "wall"
        assert "Game over" in caplog.text

    @pytest.mark.parametrize(
        "start, heading",
        [((0, 5), LEFT), ((GRID_WIDTH - 1, 5), RIGHT), ((5, 0), DOWN), ((5, GRID_HEIGHT - 1), UP)],
    )
    def test_every_wall(self, session, start, heading):
        session.snake = SnakeState(body=deque([start]), direction=heading)
        session.step(TICK)
        assert session.phase is GamePhase.GAME_OVER

    def test_self_collision(self, session):
        # Head at (5,5) heading down into its own body at (5,4).
        session.snake = SnakeState(
            body=deque([(5, 5), (6, 5), (6, 4), (5, 4), (4, 4)]),
            direction=DOWN,
        )
        frame = session.step(TICK)
        assert frame.is_over
        assert frame.death_reason == "self"

    def test_chasing_tail_is_legal(self, session):
        # The tail moves out of the way on the same tick.
        session.snake = SnakeState(
            body=deque([(5, 5), (6, 5), (6, 4), (5, 4)]),
            direction=DOWN,
        )
        session.step(TICK)
        assert session.phase is GamePhase.PLAYING

    def test_game_over_freezes_simulation(self, session):
        session.snake = SnakeState(body=deque([(GRID_WIDTH - 1, 5)]), direction=RIGHT)
        session.step(TICK)
        body, food = tuple(session.snake.body), session.food

        for _ in range(5):
            frame = session.step(TICK, direction=UP)
        assert frame.body == body
        assert frame.food == food
        assert frame.ticked is False
        assert session.snake.direction == RIGHT


class TestRestart:
    """Tests for GameOver -> Playing."""

    def end_game(self, session):
        session.snake = SnakeState(body=deque([(0, 0)]), direction=LEFT)
        session.step(TICK)
        assert session.phase is GamePhase.GAME_OVER

    def test_restart_resets_everything(self, session):
        self.end_game(session)
        session.clock.elapsed = 0.1

        frame = session.step(0.0, restart=True)
        assert frame.phase is GamePhase.PLAYING
        assert frame.body == ((5, 5),)
        assert frame.death_reason is None
        assert session.snake.direction == RIGHT
        assert session.snake.growing is False
        assert session.clock.elapsed == 0.0
        assert frame.food is not None

    def test_restart_ignored_while_playing(self, session):
        session.step(TICK)
        assert session.restart() is False
        frame = session.step(0.0, restart=True)
        assert frame.head == (6, 5)

    def test_play_continues_after_restart(self, session):
        self.end_game(session)
        session.step(0.0, restart=True)
        session.food = (0, 14)
        frame = session.step(TICK)
        assert frame.head == (6, 5)
        assert not frame.is_over


class TestBoardText:
    """Tests for GameSession.board_text()."""

    def test_layout(self, session):
        session.snake = SnakeState(body=deque([(2, 0), (1, 0)]))
        session.food = (0, GRID_HEIGHT - 1)
        rows = session.board_text().splitlines()
        assert len(rows) == GRID_HEIGHT
        assert all(len(r) == GRID_WIDTH for r in rows)
        assert rows[0][0] == "F"
        assert rows[-1][:3] == ".SH"
