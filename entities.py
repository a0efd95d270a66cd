"""
Entity store: the player and the robots sharing one grid
"""
from typing import List, Tuple

from grid import Grid
from rng import RangeRandom
from robot import Robot


class EntityStore:
    def __init__(self, grid: Grid, rng: RangeRandom):
        self.grid = grid
        self.rng = rng
        self.player: Tuple[int, int] = (1, 1)
        self.robots: List[Robot] = []

    def teleport_player(self):
        """Put the player on a random cell that no robot occupies"""
        occupied = self.robot_positions()
        if len(occupied) >= self.grid.capacity:
            raise ValueError("no free cell left to teleport to")
        while True:
            pos = self.rng.cell(self.grid.width, self.grid.height)
            if pos not in occupied:
                self.player = pos
                return pos

    def populate_robots(self, count: int):
        """Replace all robots with count live ones on distinct free cells"""
        if count < 0:
            raise ValueError(f"robot count must not be negative, got {count}")
        if count > self.grid.capacity - 1:
            raise ValueError(f"{count} robots do not fit on a {self.grid.width}x{self.grid.height} grid")

        robots = []
        taken = {self.player}
        for robot_id in range(count):
            while True:
                pos = self.rng.cell(self.grid.width, self.grid.height)
                if pos not in taken:
                    break
            taken.add(pos)
            robots.append(Robot(robot_id, pos))
        self.robots = robots
        return robots

    def robot_positions(self):
        return {robot.position for robot in self.robots}

    def robots_at(self, pos) -> List[Robot]:
        return [robot for robot in self.robots if robot.position == pos]

    @property
    def robot_count(self) -> int:
        return len(self.robots)

    @property
    def alive_count(self) -> int:
        return sum(1 for robot in self.robots if robot.is_alive)

    @property
    def junk_count(self) -> int:
        return self.robot_count - self.alive_count
