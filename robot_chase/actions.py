"""Action enumerations.

Defines the human readable :class:`Action` (string enum) used by the turn
reducer and a stable integer :class:`GymAction` mapping for Gymnasium.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions and
``ACTION_DELTAS`` maps each of them to its ``(dx, dy)`` step.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Tuple


class Action(StrEnum):
    """String enum of player actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Step the player, then advance the agents.
        WAIT: Advance the agents without moving.
        TELEPORT: Jump to a random cell; agents do not advance.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    WAIT = auto()
    TELEPORT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    WAIT = auto()
    TELEPORT = auto()
