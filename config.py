"""
Game configuration
"""
from dataclasses import dataclass
from typing import Optional

from controls import ControlScheme


@dataclass
class GameConfig:
    width: int = 20
    height: int = 20
    initial_robots: int = 10
    robots_increment: int = 5
    new_level_bonus: int = 10
    wait_multiplier: int = 4
    level_pause: float = 1.0      # seconds the cleared board stays up
    game_over_pause: float = 1.0
    control_scheme: ControlScheme = ControlScheme.CLASSIC
    verbose: bool = False
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if self.initial_robots < 0 or self.robots_increment < 0:
            raise ValueError("robot counts must not be negative")
        if self.initial_robots > self.capacity:
            raise ValueError(f"{self.initial_robots} robots do not fit on a {self.width}x{self.height} grid")
        if self.wait_multiplier < 1:
            raise ValueError("wait multiplier must be at least 1")

    @property
    def capacity(self) -> int:
        """Robots that fit next to the player"""
        return self.width * self.height - 1
