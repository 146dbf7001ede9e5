"""Teleport system.

Sends the player to a uniformly random cell. No occupancy check is made: the
player may land on an agent, in which case both are destroyed. Resolution
runs *before* the player's new index entry is written so that an agent at the
destination is still found through its own entry; the player's entry is then
written explicitly because destruction never touches the index.
"""

import logging
from dataclasses import replace
from typing import Optional

from robot_chase.rng import derive_rng
from robot_chase.state import Field
from robot_chase.systems.collision import resolve_collision
from robot_chase.types import PLAYER_SLOT, RandomSource
from robot_chase.utils.grid import random_position
from robot_chase.utils.index import insert_occupant, remove_occupant

logger = logging.getLogger(__name__)

TELEPORT_STREAM = "teleport"


def teleport_player(field: Field, rng: Optional[RandomSource] = None) -> Field:
    """Move the player to a random cell and resolve any collision there.

    Args:
        field (Field): Current field.
        rng (RandomSource | None): Random source; derived from ``field.seed``
            and ``field.turn`` when omitted, or entropy-backed if the field
            has no seed.

    Returns:
        Field: New field with the player relocated, or the same field if the
            player is already destroyed.
    """
    if field.player.is_destroyed:
        return field
    if rng is None:
        rng = derive_rng(field.seed, field.turn, TELEPORT_STREAM)
    new_pos = random_position(rng, field.width, field.height)
    player = field.player
    logger.debug(
        "teleport (%d, %d) -> (%d, %d)",
        player.position.x,
        player.position.y,
        new_pos.x,
        new_pos.y,
    )

    field = replace(
        field,
        entities=field.entities.set(PLAYER_SLOT, replace(player, position=new_pos)),
        index=remove_occupant(field.index, player.position),
    )
    field = resolve_collision(field, PLAYER_SLOT)
    return replace(field, index=insert_occupant(field.index, new_pos, PLAYER_SLOT))
