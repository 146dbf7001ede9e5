"""Plain-text field rendering.

Produces one line per row. Cells are looked up through the spatial index, so
the output shows exactly what the index records, collision residue included.
"""

from typing import Dict, List

from robot_chase.state import Field
from robot_chase.types import EntityKind
from robot_chase.utils.index import occupant_at

EMPTY_GLYPH = "."

DEFAULT_GLYPHS: Dict[EntityKind, str] = {
    EntityKind.PLAYER: "@",
    EntityKind.AGENT: "$",
    EntityKind.DESTROYED: "#",
}


def render_text(field: Field, glyphs: Dict[EntityKind, str] = DEFAULT_GLYPHS) -> str:
    """Render ``field`` as ``height`` lines of ``width`` glyphs."""
    rows: List[str] = []
    for y in range(field.height):
        row: List[str] = []
        for x in range(field.width):
            slot = occupant_at(field, x, y)
            if slot is None:
                row.append(EMPTY_GLYPH)
            else:
                row.append(glyphs[field.entities[slot].kind])
        rows.append("".join(row))
    return "\n".join(rows)
