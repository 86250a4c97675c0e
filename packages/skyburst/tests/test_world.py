"""Tests for entity lifecycle, components, and queries."""

from dataclasses import dataclass

import pytest
from skyburst.types import DeadEntityError
from skyburst.world import World


@dataclass
class Pos:
    x: float
    y: float


@dataclass
class Tag:
    name: str


def test_spawn_assigns_increasing_ids():
    world = World()
    assert world.spawn() == 0
    assert world.spawn() == 1
    assert world.count() == 2


def test_despawn_removes_entity_and_components():
    world = World()
    eid = world.spawn()
    world.attach(eid, Pos(1.0, 2.0))
    world.despawn(eid)
    assert list(world.query(Pos)) == []
    assert world.count() == 0


def test_despawned_id_is_not_reused():
    world = World()
    eid = world.spawn()
    world.despawn(eid)
    assert world.spawn() != eid


def test_despawn_unknown_entity_is_noop():
    world = World()
    world.despawn(42)
    assert world.count() == 0


def test_attach_to_dead_entity_raises():
    world = World()
    eid = world.spawn()
    world.despawn(eid)
    with pytest.raises(DeadEntityError) as info:
        world.attach(eid, Pos(0.0, 0.0))
    assert info.value.entity_id == eid


def test_dead_entity_error_is_key_error():
    world = World()
    with pytest.raises(KeyError):
        world.attach(5, Pos(0.0, 0.0))


def test_attach_replaces_same_type():
    world = World()
    eid = world.spawn()
    world.attach(eid, Pos(0.0, 0.0))
    world.attach(eid, Pos(3.0, 4.0))
    assert list(world.query(Pos)) == [(eid, (Pos(3.0, 4.0),))]


def test_query_requires_all_types():
    world = World()
    a = world.spawn()
    b = world.spawn()
    world.attach(a, Pos(0.0, 0.0))
    world.attach(a, Tag("a"))
    world.attach(b, Pos(1.0, 1.0))
    assert [eid for eid, _ in world.query(Pos, Tag)] == [a]
    assert [eid for eid, _ in world.query(Pos)] == [a, b]


def test_query_without_types_yields_nothing():
    world = World()
    world.spawn()
    assert list(world.query()) == []


def test_despawn_during_query_is_safe():
    world = World()
    for i in range(3):
        world.attach(world.spawn(), Pos(float(i), 0.0))
    for eid, (pos,) in world.query(Pos):
        world.despawn(eid)
    assert world.count() == 0
