"""Field construction.

``create_field`` builds the opening position of a session: the player at the
centre of the field and ``agent_count`` agents on distinct random cells.
``field_from_positions`` builds a field from explicit coordinates and is the
way deterministic scenes are authored.

Agent placement rejects occupied cells and draws again. There is no cap on
the number of retries, so asking for close to ``width * height`` agents can
take arbitrarily long.
"""

from dataclasses import replace
from typing import Optional, Sequence, Tuple

from robot_chase.constants import FIELD_HEIGHT, FIELD_WIDTH
from robot_chase.entity import Entity, spawn_at
from robot_chase.rng import derive_rng, draw_seed
from robot_chase.state import Field
from robot_chase.types import EntityKind, RandomSource
from robot_chase.utils.grid import is_in_bounds, random_position
from robot_chase.utils.index import has_occupant_at, insert_occupant

SPAWN_STREAM = "spawn"

# Grid coordinate alias (x, y)
Coord = Tuple[int, int]


def append_entity(field: Field, entity: Entity) -> Field:
    """Append ``entity`` in the next slot and index it at its position."""
    slot = len(field.entities)
    return replace(
        field,
        entities=field.entities.append(entity),
        index=insert_occupant(field.index, entity.position, slot),
    )


def spawn_player(field: Field) -> Field:
    """Place the player at the centre cell. Must run first: it claims slot 0."""
    if len(field.entities) != 0:
        raise ValueError("Player must be spawned into an empty field")
    player = spawn_at(EntityKind.PLAYER, field.width // 2, field.height // 2)
    return append_entity(field, player)


def spawn_agent(field: Field, rng: RandomSource) -> Field:
    """Place one agent on a random unoccupied cell."""
    while True:
        pos = random_position(rng, field.width, field.height)
        if has_occupant_at(field, pos.x, pos.y):
            continue
        return append_entity(field, spawn_at(EntityKind.AGENT, pos.x, pos.y))


def create_field(
    agent_count: int,
    width: int = FIELD_WIDTH,
    height: int = FIELD_HEIGHT,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> Field:
    """Create a new field with the player centred and ``agent_count`` agents.

    Args:
        agent_count (int): Number of agents to spawn.
        width (int): Field width in cells.
        height (int): Field height in cells.
        seed (int | None): Seed stored on the field for derived random streams.
            A fresh one is drawn when omitted, so unseeded fields differ but
            each can still be replayed from its stored seed.
        rng (RandomSource | None): Random source for agent placement. Derived
            from ``seed`` when omitted.

    Returns:
        Field: Turn-0 field with ``agent_count + 1`` live entities on distinct
            cells.

    Raises:
        ValueError: If the dimensions are not positive or ``agent_count`` is
            negative.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Field dimensions must be positive: {width}x{height}")
    if agent_count < 0:
        raise ValueError(f"Agent count must be non-negative: {agent_count}")

    if seed is None:
        seed = draw_seed()
    if rng is None:
        rng = derive_rng(seed, 0, SPAWN_STREAM)

    field = spawn_player(Field(width=width, height=height, seed=seed))
    for _ in range(agent_count):
        field = spawn_agent(field, rng)
    return field


def field_from_positions(
    player: Coord,
    agents: Sequence[Coord],
    width: int,
    height: int,
    seed: Optional[int] = None,
) -> Field:
    """Build a field with entities at explicit cells.

    The player takes slot 0 and agents follow in the given order.

    Raises:
        ValueError: If a coordinate is out of bounds or two entities share
            a cell.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Field dimensions must be positive: {width}x{height}")

    field = Field(width=width, height=height, seed=seed)
    placements = [(EntityKind.PLAYER, player)] + [
        (EntityKind.AGENT, agent) for agent in agents
    ]
    for kind, (x, y) in placements:
        entity = spawn_at(kind, x, y)
        if not is_in_bounds(field, entity.position):
            raise ValueError(f"Out of bounds: {(x, y)} for field {width}x{height}")
        if has_occupant_at(field, x, y):
            raise ValueError(f"Cell already occupied: {(x, y)}")
        field = append_entity(field, entity)
    return field
