"""Agent pursuit system.

Every live agent takes one step toward the player each tick. The target is
captured once, before anyone moves, so agents never react to each other's
movement within the same tick. Agent steps are not clamped to the field: an
agent always steps toward a target that is itself on the field.

After all agents have moved the spatial index is rebuilt from scratch and
collisions are resolved for every slot.
"""

from dataclasses import replace
from typing import Tuple

from robot_chase.components import Position
from robot_chase.state import Field
from robot_chase.systems.collision import resolve_all_collisions
from robot_chase.utils.grid import sign
from robot_chase.utils.index import rebuild_index


def pursuit_delta(pos: Position, target: Position) -> Tuple[int, int]:
    """Return the single-step delta from ``pos`` toward ``target``.

    Each axis is in ``{-1, 0, 1}``; an axis already aligned with the target
    gets 0.
    """
    return sign(target.x - pos.x), sign(target.y - pos.y)


def pursuit_system(field: Field) -> Field:
    """Move every live agent one step toward the player's current cell."""
    target = field.player.position
    entities = field.entities.evolver()
    for slot, entity in enumerate(field.entities):
        if not entity.is_agent:
            continue
        dx, dy = pursuit_delta(entity.position, target)
        entities[slot] = replace(entity, position=entity.position.translate(dx, dy))
    return replace(field, entities=entities.persistent())


def advance_agents(field: Field) -> Field:
    """Run one tick: pursue, reindex, then resolve collisions for all slots."""
    field = pursuit_system(field)
    field = replace(field, index=rebuild_index(field.entities))
    return resolve_all_collisions(field)
