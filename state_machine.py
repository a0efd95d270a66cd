from enum import Enum
from dataclasses import dataclass
from typing import Dict, List, Tuple

from utils import Color


class GameState(Enum):
    START_MENU = "start_menu"
    SETTINGS = "settings"
    PLAYING = "playing"
    LEVEL_TRANSITION = "level_transition"
    GAME_OVER = "game_over"
    QUIT = "quit"


@dataclass
class Transition:
    name: str
    sources: Tuple[GameState, ...]
    target: GameState

    def __str__(self):
        return f"{Color.YELLOW}{self.name}{Color.RESET}"


class StateMachine:
    def __init__(self, initial: GameState = GameState.START_MENU):
        self.state = initial
        self.transitions: Dict[str, Transition] = {}
        self.history: List[str] = []

    def add_transition(self, name: str, sources, target: GameState):
        if isinstance(sources, GameState):
            sources = (sources,)
        self.transitions[name] = Transition(name, tuple(sources), target)

    def is_enabled(self, transition_name: str) -> bool:
        """Check if a transition can fire from the current state"""
        return self.state in self.transitions[transition_name].sources

    def fire(self, transition_name: str) -> bool:
        """Fire a transition if enabled"""
        if not self.is_enabled(transition_name):
            return False
        self.state = self.transitions[transition_name].target
        self.history.append(f"Fired: {transition_name}")
        return True

    def enabled_transitions(self) -> List[str]:
        return [name for name in self.transitions if self.is_enabled(name)]

    @property
    def finished(self) -> bool:
        return self.state is GameState.QUIT


def create_game_state_machine() -> StateMachine:
    """Create the start -> settings -> playing -> game over state machine"""
    machine = StateMachine(GameState.START_MENU)

    transitions = [
        ("open_settings", GameState.START_MENU, GameState.SETTINGS),
        ("close_settings", GameState.SETTINGS, GameState.START_MENU),
        ("start_game", GameState.START_MENU, GameState.PLAYING),

        # Level cleared: show the board, then carry on with more robots
        ("clear_level", GameState.PLAYING, GameState.LEVEL_TRANSITION),
        ("next_level", GameState.LEVEL_TRANSITION, GameState.PLAYING),

        ("player_hit", GameState.PLAYING, GameState.GAME_OVER),
        ("retry", GameState.GAME_OVER, GameState.PLAYING),
        ("give_up", GameState.GAME_OVER, GameState.QUIT),

        # stdin closed
        ("end_of_input",
         tuple(state for state in GameState if state is not GameState.QUIT),
         GameState.QUIT),
    ]

    for name, sources, target in transitions:
        machine.add_transition(name, sources, target)

    return machine
