"""Session configuration.

Field dimensions and the opening agent count are fixed constants of a
session rather than turn input. :class:`FieldConfig` carries them together
with an optional seed; drivers (CLI, gym environment) build one and hand it to
:func:`create_field_from_config`.
"""

from dataclasses import dataclass
from typing import Optional

from robot_chase.constants import FIELD_HEIGHT, FIELD_WIDTH, INITIAL_AGENTS
from robot_chase.levels.field import create_field
from robot_chase.state import Field
from robot_chase.types import RandomSource


@dataclass(frozen=True)
class FieldConfig:
    width: int = FIELD_WIDTH
    height: int = FIELD_HEIGHT
    agent_count: int = INITIAL_AGENTS
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise ``ValueError`` if the configuration cannot build a field."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Field dimensions must be positive: {self.width}x{self.height}"
            )
        if self.agent_count < 0:
            raise ValueError(f"Agent count must be non-negative: {self.agent_count}")


def create_field_from_config(
    config: FieldConfig, rng: Optional[RandomSource] = None
) -> Field:
    """Validate ``config`` and build the opening field."""
    config.validate()
    return create_field(
        config.agent_count,
        width=config.width,
        height=config.height,
        seed=config.seed,
        rng=rng,
    )
