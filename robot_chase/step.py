"""Turn reducer.

This module wires the systems together into a single *turn* transition given
an ``Action``. :func:`step` is the entry point drivers use for gameplay
progression and, like every system, returns a *new* :class:`Field`.

Turn protocol:

1. Directional actions move the player (``move_player``) and then advance the
   agents (``advance_agents``). The agents still advance when the move itself
   destroyed the player.
2. ``WAIT`` advances the agents only.
3. ``TELEPORT`` relocates the player (``teleport_player``); agents hold still.
4. The turn counter is bumped and a terminal message is set once the player
   has been destroyed.
"""

import logging
from dataclasses import replace
from typing import Optional

from robot_chase.actions import ACTION_DELTAS, MOVE_ACTIONS, Action
from robot_chase.state import Field
from robot_chase.systems.movement import move_player
from robot_chase.systems.pursuit import advance_agents
from robot_chase.systems.teleport import teleport_player
from robot_chase.types import RandomSource
from robot_chase.utils.terminal import is_player_destroyed

logger = logging.getLogger(__name__)

LOSE_MESSAGE = "You have lost."


def step(field: Field, action: Action, rng: Optional[RandomSource] = None) -> Field:
    """Advance the simulation by one action.

    Args:
        field (Field): Previous immutable field.
        action (Action): Player action to apply.
        rng (RandomSource | None): Random source for ``TELEPORT``. Derived
            from the field's seed and turn when omitted.

    Returns:
        Field: Next field. If the player is already destroyed the same object
            is returned unchanged.

    Raises:
        ValueError: If the action is not recognized.
    """
    if is_player_destroyed(field):
        return field

    if action in MOVE_ACTIONS:
        dx, dy = ACTION_DELTAS[action]
        field = move_player(field, dx, dy)
        field = advance_agents(field)
    elif action == Action.WAIT:
        field = advance_agents(field)
    elif action == Action.TELEPORT:
        field = teleport_player(field, rng)
    else:
        raise ValueError(f"Action is not valid: {action!r}")

    return _after_step(field)


def _after_step(field: Field) -> Field:
    """Bump the turn counter and flag a lost session."""
    field = replace(field, turn=field.turn + 1)
    if is_player_destroyed(field) and field.message is None:
        logger.info("player destroyed on turn %d", field.turn)
        field = replace(field, message=LOSE_MESSAGE)
    return field
