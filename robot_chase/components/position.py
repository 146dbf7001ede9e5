"""Position component.

Immutable integer grid coordinates. Used both as the location of an entity
and as the key of the field's spatial index.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def translate(self, dx: int, dy: int) -> "Position":
        """Return a new position offset by ``(dx, dy)``.

        No bounds checking is performed; callers clamp where required.
        """
        return Position(self.x + dx, self.y + dy)
