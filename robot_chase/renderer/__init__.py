"""Rendering helpers (text and image).

Renderers only read a :class:`~robot_chase.state.Field`; the engine itself
performs no output.
"""

from .image import ImageRenderer
from .text import render_text

__all__ = ["ImageRenderer", "render_text"]
