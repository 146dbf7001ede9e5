"""Component aggregates.

Re-exports the value types entities are built from. All components are
immutable dataclasses; state changes are expressed by building new values.
"""

from .position import Position

__all__ = [
    "Position",
]
