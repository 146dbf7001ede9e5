"""Collision resolution system.

Collisions are *detected* by the spatial index (a later write at an occupied
cell replaces the earlier slot) and *resolved* here: if the slot indexed at an
entity's cell is some other slot, both entities become tombstones. This is
the only way anything on the field is destroyed, the player included.

Resolution reads the index as it currently stands. During a full scan a pile
of three or more entities on one cell is destroyed completely: each earlier
slot pairs with the indexed slot in turn. Destruction is idempotent, so
repeating a resolution never changes the outcome.
"""

import logging
from dataclasses import replace

from robot_chase.entity import destroy
from robot_chase.state import Field
from robot_chase.types import Slot
from robot_chase.utils.index import occupant_at_position

logger = logging.getLogger(__name__)


def resolve_collision(field: Field, slot: Slot) -> Field:
    """Resolve a collision for ``slot``.

    Args:
        field (Field): Current field.
        slot (Slot): Slot whose cell is checked against the index.

    Returns:
        Field: Same field if the cell is empty or owned by ``slot``; otherwise
            a new field with both ``slot`` and the indexed occupant destroyed.
    """
    entity = field.entities[slot]
    other = occupant_at_position(field, entity.position)
    if other is None or other == slot:
        return field

    entities = field.entities
    if not (entities[slot].is_destroyed and entities[other].is_destroyed):
        logger.debug(
            "collision at (%d, %d): slot %d with slot %d",
            entity.position.x,
            entity.position.y,
            slot,
            other,
        )
    entities = entities.set(slot, destroy(entities[slot]))
    entities = entities.set(other, destroy(entities[other]))
    return replace(field, entities=entities)


def resolve_all_collisions(field: Field) -> Field:
    """Resolve collisions for every slot in ascending order."""
    for slot in range(len(field.entities)):
        field = resolve_collision(field, slot)
    return field
