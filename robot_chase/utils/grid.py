"""Grid math helpers.

Small pure functions shared by the construction, movement and pursuit code.
"""

from typing import Tuple

from robot_chase.components import Position
from robot_chase.state import Field
from robot_chase.types import RandomSource


def is_in_bounds(field: Field, pos: Position) -> bool:
    """Return True if ``pos`` lies within the field rectangle."""
    return 0 <= pos.x < field.width and 0 <= pos.y < field.height


def sign(value: int) -> int:
    """Clamp ``value`` to exactly one of -1, 0 or 1."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def clamp_axis(coord: int, delta: int, size: int) -> int:
    """Zero ``delta`` if it would push ``coord`` past either edge of ``[0, size)``."""
    if not 0 <= coord + delta < size:
        return 0
    return delta


def clamp_delta(field: Field, pos: Position, dx: int, dy: int) -> Tuple[int, int]:
    """Clamp a step from ``pos`` so it stays on the field, axis by axis."""
    return clamp_axis(pos.x, dx, field.width), clamp_axis(pos.y, dy, field.height)


def random_position(rng: RandomSource, width: int, height: int) -> Position:
    """Draw a uniformly random cell (x first, then y)."""
    x = rng.randrange(width)
    y = rng.randrange(height)
    return Position(x, y)
