import pytest

from robot_chase.components import Position
from robot_chase.systems.pursuit import advance_agents, pursuit_delta, pursuit_system
from robot_chase.types import EntityKind
from robot_chase.utils.terminal import is_player_destroyed
from tests.test_utils import make_field


@pytest.mark.parametrize(
    "pos, target, expected",
    [
        ((0, 0), (5, 5), (1, 1)),
        ((9, 9), (5, 5), (-1, -1)),
        ((5, 0), (5, 5), (0, 1)),
        ((0, 5), (5, 5), (1, 0)),
        ((5, 5), (5, 5), (0, 0)),
        ((8, 2), (1, 6), (-1, 1)),
    ],
)
def test_pursuit_delta(pos, target, expected) -> None:
    assert pursuit_delta(Position(*pos), Position(*target)) == expected


def test_agents_step_toward_player() -> None:
    field = make_field(
        [(EntityKind.PLAYER, 5, 5), (EntityKind.AGENT, 0, 0), (EntityKind.AGENT, 9, 5)]
    )
    new_field = pursuit_system(field)
    assert new_field.entities[1].position == Position(1, 1)
    assert new_field.entities[2].position == Position(8, 5)
    assert new_field.player.position == Position(5, 5)


def test_tombstones_do_not_move() -> None:
    field = make_field(
        [(EntityKind.PLAYER, 5, 5), (EntityKind.DESTROYED, 0, 0)]
    )
    assert pursuit_system(field).entities[1].position == Position(0, 0)


def test_agents_target_start_of_tick_position() -> None:
    # Agents in a column chase the same cell; none reacts to the other's step.
    field = make_field(
        [(EntityKind.PLAYER, 5, 5), (EntityKind.AGENT, 5, 1), (EntityKind.AGENT, 5, 2)]
    )
    new_field = pursuit_system(field)
    assert new_field.entities[1].position == Position(5, 2)
    assert new_field.entities[2].position == Position(5, 3)


def test_advance_rebuilds_index() -> None:
    field = make_field([(EntityKind.PLAYER, 5, 5), (EntityKind.AGENT, 0, 0)])
    new_field = advance_agents(field)
    assert new_field.index.get(Position(1, 1)) == 1
    assert Position(0, 0) not in new_field.index
    assert new_field.index.get(Position(5, 5)) == 0


def test_agents_meeting_destroy_each_other() -> None:
    field = make_field(
        [
            (EntityKind.PLAYER, 5, 5),
            (EntityKind.AGENT, 3, 4),
            (EntityKind.AGENT, 3, 6),
            (EntityKind.AGENT, 9, 0),
        ]
    )
    new_field = advance_agents(field)
    assert new_field.entities[1].is_destroyed
    assert new_field.entities[2].is_destroyed
    assert new_field.entities[1].position == Position(4, 5)
    assert new_field.entities[3].kind == EntityKind.AGENT
    assert new_field.entities[3].position == Position(8, 1)
    assert not is_player_destroyed(new_field)


def test_agent_stepping_onto_wreckage_is_destroyed() -> None:
    field = make_field(
        [
            (EntityKind.PLAYER, 5, 5),
            (EntityKind.DESTROYED, 4, 5),
            (EntityKind.AGENT, 3, 5),
        ]
    )
    new_field = advance_agents(field)
    assert new_field.entities[2].is_destroyed
    assert new_field.entities[2].position == Position(4, 5)
    assert not is_player_destroyed(new_field)


def test_agent_reaching_player_destroys_both() -> None:
    field = make_field([(EntityKind.PLAYER, 5, 5), (EntityKind.AGENT, 5, 4)])
    new_field = advance_agents(field)
    assert is_player_destroyed(new_field)
    assert new_field.entities[1].is_destroyed
