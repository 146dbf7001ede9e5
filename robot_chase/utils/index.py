"""Spatial index helpers.

The field keeps a ``PMap[Position, Slot]`` so that occupancy questions are
answered by a single lookup. Functions here are the only code that builds or
queries that map; entity slots are never scanned to find an occupant.

Writes follow *last write wins*: inserting at an occupied position replaces
the previous slot. That is how collisions are detected; resolving them is the
job of :mod:`robot_chase.systems.collision`.
"""

from typing import Iterable, Optional

from pyrsistent import PMap, pmap

from robot_chase.components import Position
from robot_chase.entity import Entity
from robot_chase.state import Field
from robot_chase.types import Slot


def occupant_at(field: Field, x: int, y: int) -> Optional[Slot]:
    """Return the slot indexed at ``(x, y)`` or ``None`` if the cell is empty."""
    return field.index.get(Position(x, y))


def occupant_at_position(field: Field, pos: Position) -> Optional[Slot]:
    """Same as :func:`occupant_at` for a :class:`Position`."""
    return field.index.get(pos)


def has_occupant_at(field: Field, x: int, y: int) -> bool:
    """Return True if any slot is indexed at ``(x, y)``."""
    return occupant_at(field, x, y) is not None


def insert_occupant(
    index: PMap[Position, Slot], pos: Position, slot: Slot
) -> PMap[Position, Slot]:
    """Record ``slot`` at ``pos``, overwriting any previous entry."""
    return index.set(pos, slot)


def remove_occupant(index: PMap[Position, Slot], pos: Position) -> PMap[Position, Slot]:
    """Drop the entry at ``pos``. Missing entries are ignored."""
    return index.discard(pos)


def rebuild_index(entities: Iterable[Entity]) -> PMap[Position, Slot]:
    """Build a fresh index from scratch.

    Entities are visited in slot order and tombstones are skipped. When two
    live entities share a cell the higher slot ends up owning the entry.
    """
    index = pmap().evolver()
    for slot, entity in enumerate(entities):
        if entity.is_destroyed:
            continue
        index[entity.position] = slot
    return index.persistent()
