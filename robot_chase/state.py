"""Core immutable :class:`Field` dataclass.

This module defines the frozen ``Field`` object that represents the whole
simulation snapshot at a single turn. All systems are pure functions that
take a previous ``Field`` (plus inputs such as a delta or a random source) and
return a *new* ``Field``; nothing is mutated in place. A caller therefore
never observes a half-applied turn.

Design notes:

* ``entities`` is a persistent vector in slot order. Slot 0 is always the
  player. The vector is append-only during construction and afterwards only
  has values replaced, never removed or reordered.
* ``index`` is a persistent map from :class:`Position` to slot. Every live
  entity has an entry at its position. Tombstones are not indexed, except
  transiently as collision residue (see :mod:`robot_chase.systems.collision`).
* ``entities`` and ``index`` are always replaced together by the systems that
  touch them.

See :mod:`robot_chase.step` for how the reducer orchestrates the systems.
"""

from dataclasses import dataclass
from typing import Optional

from pyrsistent import PMap, PVector, pmap, pvector

from robot_chase.components import Position
from robot_chase.entity import Entity
from robot_chase.types import PLAYER_SLOT, Slot


@dataclass(frozen=True)
class Field:
    """Immutable field state.

    Attributes:
        width (int): Field width in cells.
        height (int): Field height in cells.
        entities (PVector[Entity]): Entities by slot; slot 0 is the player.
        index (PMap[Position, Slot]): Spatial index of occupied cells.
        turn (int): Turn counter (0-based).
        message (str | None): Optional informational / terminal message.
        seed (int | None): Base RNG seed for derived random streams.
    """

    width: int
    height: int

    entities: PVector[Entity] = pvector()
    index: PMap[Position, Slot] = pmap()

    turn: int = 0
    message: Optional[str] = None

    seed: Optional[int] = None

    @property
    def player(self) -> Entity:
        """Entity stored in the player slot."""
        return self.entities[PLAYER_SLOT]
