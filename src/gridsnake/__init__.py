# __init__.py
"""Grid snake: deterministic game core plus a thin pygame host."""

from .config import CFG, Config
from .game import Frame, GamePhase, GameSession

__all__ = ["CFG", "Config", "Frame", "GamePhase", "GameSession"]
