"""Image rendering of a field.

Draws each indexed cell as a flat coloured square on a grey background.
Output is an RGBA ``PIL.Image`` made of square cells of
``resolution // field.width`` pixels (at least 1). Its size is
``field.width`` by ``field.height`` cells, so the width can fall short of
``resolution`` when it is not a multiple of the field width.
"""

from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from robot_chase.state import Field
from robot_chase.types import EntityKind

DEFAULT_RESOLUTION = 480
DEFAULT_CELL_MARGIN = 0.1

Color = Tuple[int, int, int, int]

BACKGROUND_COLOR: Color = (128, 128, 128, 255)

DEFAULT_COLOR_MAP: Dict[EntityKind, Color] = {
    EntityKind.PLAYER: (46, 134, 222, 255),
    EntityKind.AGENT: (214, 48, 49, 255),
    EntityKind.DESTROYED: (45, 52, 54, 255),
}


def render(
    field: Field,
    resolution: int = DEFAULT_RESOLUTION,
    cell_margin: float = DEFAULT_CELL_MARGIN,
    color_map: Optional[Dict[EntityKind, Color]] = None,
) -> Image.Image:
    """Render ``field`` as a PIL image, one square per indexed cell."""
    if color_map is None:
        color_map = DEFAULT_COLOR_MAP

    cell_size: int = max(1, resolution // field.width)
    margin: int = int(cell_size * cell_margin)

    img = Image.new(
        "RGBA", (field.width * cell_size, field.height * cell_size), BACKGROUND_COLOR
    )
    draw = ImageDraw.Draw(img)

    for pos, slot in field.index.items():
        if not (0 <= pos.x < field.width and 0 <= pos.y < field.height):
            continue
        x0, y0 = pos.x * cell_size, pos.y * cell_size
        color = color_map[field.entities[slot].kind]
        draw.rectangle(
            [
                x0 + margin,
                y0 + margin,
                x0 + cell_size - 1 - margin,
                y0 + cell_size - 1 - margin,
            ],
            fill=color,
        )

    return img


class ImageRenderer:
    resolution: int
    cell_margin: float
    color_map: Dict[EntityKind, Color]

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        cell_margin: float = DEFAULT_CELL_MARGIN,
        color_map: Optional[Dict[EntityKind, Color]] = None,
    ):
        self.resolution = resolution
        self.cell_margin = cell_margin
        self.color_map = color_map or DEFAULT_COLOR_MAP

    def render(self, field: Field) -> Image.Image:
        return render(
            field,
            resolution=self.resolution,
            cell_margin=self.cell_margin,
            color_map=self.color_map,
        )
