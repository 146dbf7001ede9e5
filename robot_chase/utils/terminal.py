"""Terminal condition helper predicates."""

from robot_chase.state import Field


def is_player_destroyed(field: Field) -> bool:
    """Return True if the player slot holds a tombstone."""
    return field.player.is_destroyed


def live_agent_count(field: Field) -> int:
    """Return the number of agents still pursuing the player."""
    return sum(1 for entity in field.entities if entity.is_agent)


def destroyed_agent_count(field: Field) -> int:
    """Return the number of agent slots that hold tombstones."""
    return len(field.entities) - 1 - live_agent_count(field)
