"""
Simulation class holding the whole game state and the turn rules
"""
from dataclasses import dataclass
from typing import List, Optional

from config import GameConfig
from controls import Action, Command
from entities import EntityStore
from grid import Grid
from rng import RangeRandom


@dataclass
class TurnResult:
    hit: bool
    level_cleared: bool
    level: int
    score: int


class Simulation:
    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[RangeRandom] = None):
        self.config = config or GameConfig()
        self.grid = Grid(self.config.width, self.config.height)
        self.rng = rng or RangeRandom(self.config.seed)
        self.entities = EntityStore(self.grid, self.rng)

        # Session
        self.level = 1
        self.score = 0
        self.multiplier = 1
        self.robots_num = self.config.initial_robots
        self.turns = 0
        self.player_hit = False

        # Debug lines for the current turn, shown in verbose mode
        self.events: List[str] = []

        # Place the player and the first robots
        self.reset()

    @property
    def player(self):
        return self.entities.player

    @property
    def robots(self):
        return self.entities.robots

    def _log(self, message: str):
        self.events.append(f"DEBUG: {message}")

    def move_player(self, dx: int, dy: int):
        if dx not in (-1, 0, 1) or dy not in (-1, 0, 1):
            raise ValueError(f"invalid move ({dx}, {dy})")
        self.entities.player = self.grid.clamp_move(self.player, dx, dy)

    def teleport(self):
        pos = self.entities.teleport_player()
        self._log(f"Player teleported to {pos}")

    def advance_robots(self):
        target = self.player
        for robot in self.robots:
            robot.advance(target)

    def resolve_collisions(self) -> bool:
        """Junk colliding robots and return True if a robot reached the player.

        Robots are scanned in creation order. The first robot found on the
        player's cell ends the scan, so robots after it are neither checked
        against the player nor against each other in this pass.
        """
        robots = self.robots
        for i, robot in enumerate(robots):
            for other in robots[:i]:
                if robot.position != other.position:
                    continue
                # A pile that is already junk does not score twice
                if robot.is_alive or other.is_alive:
                    robot.make_junk()
                    other.make_junk()
                    self.score += self.level
                    self._log(f"R{other.id} and R{robot.id} collided at {robot.position}")
            if robot.position == self.player:
                self.player_hit = True
                self._log(f"R{robot.id} hit the player at {self.player}")
                return True
        self.player_hit = False
        return False

    def all_dead(self) -> bool:
        return all(not robot.is_alive for robot in self.robots)

    def advance_level(self):
        bonus = self.config.new_level_bonus * self.level * self.multiplier
        self.score += bonus
        self._log(f"Level {self.level} cleared, bonus {bonus} (x{self.multiplier})")

        self.level += 1
        self.multiplier = 1
        self.robots_num = min(self.robots_num + self.config.robots_increment, self.config.capacity)
        self.player_hit = False
        self.entities.teleport_player()
        self.entities.populate_robots(self.robots_num)

    def wait(self):
        """Stand still until a robot hits the player or none is left alive.

        Raises the multiplier of the next level bonus. The outcome is read
        from player_hit and all_dead() afterwards.
        """
        self.multiplier = self.config.wait_multiplier
        self._log(f"Waiting with multiplier x{self.multiplier}")
        while not self.all_dead():
            self.advance_robots()
            if self.resolve_collisions():
                return

    def step(self, command: Command) -> TurnResult:
        """One turn without the level advance, so the cleared board can be shown"""
        self.events = []
        self.turns += 1

        if command.action is Action.WAIT:
            self.wait()
            hit = self.player_hit
        else:
            if command.action is Action.MOVE:
                self.move_player(command.dx, command.dy)
            elif command.action is Action.TELEPORT:
                self.teleport()
            self.advance_robots()
            hit = self.resolve_collisions()

        cleared = self.all_dead()
        if cleared:
            # Clearing the level wins over a hit in the same turn
            hit = False
            self.player_hit = False

        return TurnResult(hit=hit, level_cleared=cleared, level=self.level, score=self.score)

    def play_turn(self, command: Command) -> TurnResult:
        result = self.step(command)
        if result.level_cleared:
            self.advance_level()
            result.level = self.level
            result.score = self.score
        return result

    def reset(self):
        self.robots_num = self.config.initial_robots
        self.level = 1
        self.score = 0
        self.multiplier = 1
        self.turns = 0
        self.player_hit = False
        self.events = []
        self.entities.robots = []
        self.entities.teleport_player()
        self.entities.populate_robots(self.robots_num)
