from robot_chase.systems.collision import resolve_all_collisions, resolve_collision
from robot_chase.types import EntityKind
from tests.test_utils import make_field


def test_no_collision_on_own_cell() -> None:
    field = make_field([(EntityKind.PLAYER, 5, 5), (EntityKind.AGENT, 1, 1)])
    assert resolve_collision(field, 0) is field
    assert resolve_collision(field, 1) is field


def test_collision_destroys_both_entities() -> None:
    field = make_field([(EntityKind.PLAYER, 5, 5), (EntityKind.AGENT, 5, 5)])
    new_field = resolve_collision(field, 0)
    assert new_field.entities[0].is_destroyed
    assert new_field.entities[1].is_destroyed


def test_collision_is_idempotent() -> None:
    field = make_field([(EntityKind.PLAYER, 5, 5), (EntityKind.AGENT, 5, 5)])
    once = resolve_collision(field, 0)
    twice = resolve_collision(once, 0)
    assert twice == once


def test_collision_leaves_index_untouched() -> None:
    field = make_field([(EntityKind.PLAYER, 5, 5), (EntityKind.AGENT, 5, 5)])
    assert resolve_collision(field, 0).index == field.index


def test_pair_destroyed_third_entity_unaffected() -> None:
    field = make_field(
        [
            (EntityKind.PLAYER, 0, 0),
            (EntityKind.AGENT, 4, 4),
            (EntityKind.AGENT, 4, 4),
            (EntityKind.AGENT, 7, 2),
        ]
    )
    new_field = resolve_all_collisions(field)
    assert new_field.entities[1].is_destroyed
    assert new_field.entities[2].is_destroyed
    assert new_field.entities[3].kind == EntityKind.AGENT
    assert new_field.entities[0].kind == EntityKind.PLAYER


def test_three_way_pileup_destroys_all() -> None:
    field = make_field(
        [
            (EntityKind.PLAYER, 0, 0),
            (EntityKind.AGENT, 4, 4),
            (EntityKind.AGENT, 4, 4),
            (EntityKind.AGENT, 4, 4),
        ]
    )
    new_field = resolve_all_collisions(field)
    assert all(new_field.entities[slot].is_destroyed for slot in (1, 2, 3))
    assert not new_field.entities[0].is_destroyed


def test_full_scan_is_repeatable() -> None:
    field = make_field(
        [
            (EntityKind.PLAYER, 0, 0),
            (EntityKind.AGENT, 4, 4),
            (EntityKind.AGENT, 4, 4),
        ]
    )
    once = resolve_all_collisions(field)
    assert resolve_all_collisions(once) == once
