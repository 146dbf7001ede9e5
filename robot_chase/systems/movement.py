"""Player movement system.

Moves the player by a clamped delta. A delta that would leave the field is
zeroed on that axis only. If nothing is left to move the call is a no-op and
no collision check runs. Otherwise the player's index entry is moved with it:
the old entry is dropped, the new cell is checked for a collision against
whatever is indexed there, and the player's slot is then written at the new
cell. Agents do not move here; the turn reducer advances them separately.
"""

from dataclasses import replace

from robot_chase.state import Field
from robot_chase.systems.collision import resolve_collision
from robot_chase.types import PLAYER_SLOT
from robot_chase.utils.grid import clamp_delta
from robot_chase.utils.index import insert_occupant, remove_occupant


def move_player(field: Field, dx: int, dy: int) -> Field:
    """Move the player by ``(dx, dy)`` if allowed.

    Args:
        field (Field): Current field.
        dx (int): Proposed horizontal delta.
        dy (int): Proposed vertical delta.

    Returns:
        Field: Same field if the player is destroyed or the clamped delta is
            zero, otherwise a new field with the player moved and its
            collision resolved.
    """
    player = field.player
    if player.is_destroyed:
        return field
    dx, dy = clamp_delta(field, player.position, dx, dy)
    if dx == 0 and dy == 0:
        return field

    new_pos = player.position.translate(dx, dy)
    field = replace(
        field,
        entities=field.entities.set(PLAYER_SLOT, replace(player, position=new_pos)),
        index=remove_occupant(field.index, player.position),
    )
    field = resolve_collision(field, PLAYER_SLOT)
    return replace(field, index=insert_occupant(field.index, new_pos, PLAYER_SLOT))
