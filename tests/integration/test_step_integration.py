import pytest

from robot_chase.actions import MOVE_ACTIONS, Action
from robot_chase.components import Position
from robot_chase.levels.field import create_field, field_from_positions
from robot_chase.step import LOSE_MESSAGE, step
from robot_chase.systems.movement import move_player
from robot_chase.systems.pursuit import advance_agents
from robot_chase.utils.terminal import destroyed_agent_count, is_player_destroyed
from tests.test_utils import SequenceRng


def test_agent_catches_stationary_player() -> None:
    field = field_from_positions((5, 5), [(5, 3)], width=10, height=10)

    field = advance_agents(field)
    assert field.entities[1].position == Position(5, 4)
    assert not is_player_destroyed(field)

    field = advance_agents(field)
    assert field.entities[1].position == Position(5, 5)
    assert field.entities[1].is_destroyed
    assert is_player_destroyed(field)


def test_player_alone_never_destroyed() -> None:
    field = create_field(0, width=6, height=4, seed=1)
    deltas = [(1, 0), (1, 0), (1, 0), (1, 0), (0, 1), (0, 1), (0, 1), (-1, -1)] * 5
    for dx, dy in deltas:
        field = move_player(field, dx, dy)
        assert not is_player_destroyed(field)
        assert 0 <= field.player.position.x < 6
        assert 0 <= field.player.position.y < 4


@pytest.mark.parametrize("action", MOVE_ACTIONS)
def test_move_action_moves_then_advances(action: Action) -> None:
    field = field_from_positions((5, 5), [(0, 0)], width=10, height=10)
    new_field = step(field, action)
    assert new_field.player.position != Position(5, 5)
    assert new_field.entities[1].position == Position(1, 1)
    assert new_field.turn == 1


def test_wait_advances_agents_only() -> None:
    field = field_from_positions((5, 5), [(9, 9)], width=10, height=10)
    new_field = step(field, Action.WAIT)
    assert new_field.player.position == Position(5, 5)
    assert new_field.entities[1].position == Position(8, 8)


def test_teleport_does_not_advance_agents() -> None:
    field = field_from_positions((5, 5), [(9, 9)], width=10, height=10)
    new_field = step(field, Action.TELEPORT, rng=SequenceRng([0, 0]))
    assert new_field.player.position == Position(0, 0)
    assert new_field.entities[1].position == Position(9, 9)
    assert new_field.turn == 1


def test_player_destroyed_by_move_sets_message() -> None:
    field = field_from_positions((5, 5), [(6, 5)], width=10, height=10)
    new_field = step(field, Action.RIGHT)
    assert is_player_destroyed(new_field)
    assert new_field.message == LOSE_MESSAGE


def test_destroyed_player_short_circuits() -> None:
    field = field_from_positions((5, 5), [(6, 5)], width=10, height=10)
    lost = step(field, Action.RIGHT)
    assert step(lost, Action.WAIT) is lost


def test_dodging_makes_agents_collide() -> None:
    # Two agents flank the player; converging on it, they meet on the same cell.
    field = field_from_positions((5, 5), [(3, 4), (3, 6)], width=10, height=10)
    field = step(field, Action.WAIT)
    assert destroyed_agent_count(field) == 2
    assert not is_player_destroyed(field)


def test_invalid_action_raises() -> None:
    field = field_from_positions((5, 5), [], width=10, height=10)
    with pytest.raises(ValueError):
        step(field, "jump")  # type: ignore[arg-type]
