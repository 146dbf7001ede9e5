"""Entity primitives.

An :class:`Entity` is a tagged value: a :class:`~robot_chase.types.EntityKind`
plus a :class:`~robot_chase.components.Position`. Entities live in
``Field.entities`` and are addressed by their slot, which never changes for
the lifetime of a field.

Destruction does not remove an entity. It replaces the slot's value with a
*tombstone* of kind ``DESTROYED`` that keeps the last position, so slot
numbers held by the spatial index stay valid.

Examples
--------
>>> from robot_chase.entity import spawn_at, destroy
>>> from robot_chase.types import EntityKind
>>> agent = spawn_at(EntityKind.AGENT, 3, 4)
>>> destroy(agent).kind
<EntityKind.DESTROYED: 'destroyed'>
"""

from dataclasses import dataclass, replace

from robot_chase.components import Position
from robot_chase.types import EntityKind


@dataclass(frozen=True)
class Entity:
    """Kind-tagged entity value.

    Attributes:
        kind: Player, agent or destroyed tombstone.
        position: Current (or, for tombstones, last) grid coordinate.
    """

    kind: EntityKind
    position: Position

    @property
    def is_destroyed(self) -> bool:
        return self.kind == EntityKind.DESTROYED

    @property
    def is_agent(self) -> bool:
        return self.kind == EntityKind.AGENT


def spawn_at(kind: EntityKind, x: int, y: int) -> Entity:
    """Return a live entity of ``kind`` at ``(x, y)``."""
    return Entity(kind=kind, position=Position(x, y))


def destroy(entity: Entity) -> Entity:
    """Return the tombstone for ``entity``.

    Idempotent: a tombstone maps to an equal tombstone.
    """
    if entity.is_destroyed:
        return entity
    return replace(entity, kind=EntityKind.DESTROYED)
