"""Default session constants."""

FIELD_WIDTH = 30
FIELD_HEIGHT = 12
INITIAL_AGENTS = 10
