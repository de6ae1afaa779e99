# clock.py
from dataclasses import dataclass

from .config import CFG


@dataclass
class MovementClock:
    """
    Repeating fixed-period ticker. Fed the frame delta every frame, it
    reports at most one tick per call: a long frame spanning several
    periods still yields a single move, and only the remainder is kept.
    """
    period: float = CFG.move_every_s
    elapsed: float = 0.0

    def __post_init__(self):
        assert self.period > 0, "tick period must be positive"

    def tick(self, dt: float) -> bool:
        """Advance by `dt` seconds; True if a period elapsed during this call."""
        assert dt >= 0, f"negative frame delta {dt}"
        self.elapsed += dt
        if self.elapsed < self.period:
            return False
        self.elapsed %= self.period
        return True

    def reset(self) -> None:
        self.elapsed = 0.0
