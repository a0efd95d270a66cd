"""
Robot class for the pursuing robots
"""
from enum import Enum
from typing import Tuple


class RobotStatus(Enum):
    ALIVE = "alive"
    JUNK = "junk"


def step_towards(current: int, target: int) -> int:
    if current < target:
        return current + 1
    if current > target:
        return current - 1
    return current


class Robot:
    def __init__(self, robot_id: int, position: Tuple[int, int]):
        self.id = robot_id
        self.position = position  # (x, y), 1-indexed
        self.status = RobotStatus.ALIVE

    def __repr__(self):
        return f"Robot({self.id}, {self.position}, {self.status.value})"

    @property
    def is_alive(self) -> bool:
        return self.status is RobotStatus.ALIVE

    def make_junk(self):
        # Junk never comes back to life
        self.status = RobotStatus.JUNK

    def advance(self, target: Tuple[int, int]):
        """Move one cell towards target on each axis; junk stays put"""
        if not self.is_alive:
            return
        x, y = self.position
        tx, ty = target
        self.position = (step_towards(x, tx), step_towards(y, ty))
