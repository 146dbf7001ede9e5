"""Common type aliases and enumerations.

``Slot`` is the stable integer handle of an entity inside
``Field.entities``; the spatial index stores slots as its payload.
"""

from enum import StrEnum, auto
from typing import Protocol


Slot = int

PLAYER_SLOT: Slot = 0


class EntityKind(StrEnum):
    """Entity variants. ``DESTROYED`` is terminal."""

    PLAYER = auto()
    AGENT = auto()
    DESTROYED = auto()


class RandomSource(Protocol):
    """Minimal randomness capability consumed by spawning and teleport.

    ``random.Random`` satisfies it; tests may pass any object with a
    compatible ``randrange``.
    """

    def randrange(self, stop: int) -> int: ...
