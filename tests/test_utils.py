from typing import List, Sequence, Tuple

from pyrsistent import pvector

from robot_chase.entity import Entity, spawn_at
from robot_chase.state import Field
from robot_chase.types import EntityKind
from robot_chase.utils.index import rebuild_index

Placement = Tuple[EntityKind, int, int]


def make_field(
    placements: Sequence[Placement], width: int = 10, height: int = 10
) -> Field:
    """Field with entities in the given slot order and a fully rebuilt index.

    Unlike ``field_from_positions`` this allows shared cells and tombstones,
    which is what collision tests need.
    """
    entities: List[Entity] = [spawn_at(kind, x, y) for kind, x, y in placements]
    return Field(
        width=width,
        height=height,
        entities=pvector(entities),
        index=rebuild_index(entities),
    )


class SequenceRng:
    """Random source that replays a fixed sequence of ``randrange`` results."""

    def __init__(self, values: Sequence[int]):
        self._values = list(values)
        self.calls: List[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value
