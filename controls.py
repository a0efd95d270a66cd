"""
Commands and the key bindings of the two control schemes
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ControlScheme(Enum):
    CLASSIC = "classic"  # numeric keypad
    ALT = "alt"          # letters


class Action(Enum):
    MOVE = "move"
    TELEPORT = "teleport"
    WAIT = "wait"
    NOOP = "noop"


@dataclass(frozen=True)
class Command:
    action: Action
    dx: int = 0
    dy: int = 0


# Direction name -> (dx, dy); y grows downwards
DIRECTIONS = {
    'up': (0, -1),
    'up_right': (1, -1),
    'right': (1, 0),
    'down_right': (1, 1),
    'down': (0, 1),
    'down_left': (-1, 1),
    'left': (-1, 0),
    'up_left': (-1, -1),
    'stay': (0, 0),
}

KEY_BINDINGS = {
    ControlScheme.CLASSIC: {
        '8': 'up', '9': 'up_right', '6': 'right', '3': 'down_right',
        '2': 'down', '1': 'down_left', '4': 'left', '7': 'up_left', '5': 'stay',
    },
    ControlScheme.ALT: {
        'k': 'up', 'u': 'up_right', 'l': 'right', 'n': 'down_right',
        'j': 'down', 'b': 'down_left', 'h': 'left', 'y': 'up_left', '.': 'stay',
    },
}

TELEPORT_KEY = 't'
WAIT_KEY = 'w'

NOOP = Command(Action.NOOP)


def move(direction: str) -> Command:
    dx, dy = DIRECTIONS[direction]
    return Command(Action.MOVE, dx, dy)


def parse_key(key: str, scheme: ControlScheme) -> Command:
    """Map one keystroke to a command; unknown keys become a no-op"""
    if key == TELEPORT_KEY:
        return Command(Action.TELEPORT)
    if key == WAIT_KEY:
        return Command(Action.WAIT)
    direction: Optional[str] = KEY_BINDINGS[scheme].get(key)
    if direction is None:
        return NOOP
    return move(direction)


def describe_scheme(scheme: ControlScheme) -> str:
    """Compact key legend, e.g. 'up=8 up_right=9 ...'"""
    bindings = KEY_BINDINGS[scheme]
    return " ".join(f"{name}={key}" for key, name in bindings.items())
