import random

import pytest

from phantomlite.environment import Environment
from phantomlite.spawning import (
    MAX_SPAWN_DISTANCE,
    MIN_SPAWN_DISTANCE,
    Spawner,
    default_slime_specs,
)
from phantomlite.types import (
    BehaviorFlags,
    EnemyID,
    EnemyType,
    Rectangle,
    Vector2,
)


def _big_world() -> Environment:
    return Environment(world_bounds=Rectangle(-3000.0, -3000.0, 6000.0, 6000.0))


def _spawner(world=None, seed=7) -> Spawner:
    return Spawner(world=world or _big_world(), rng=random.Random(seed))


def test_default_specs_match_source():
    specs = {spec.type: spec for spec in default_slime_specs()}
    assert specs[EnemyType.SLIME_SMALL].name == "Small Slime"
    assert specs[EnemyType.SLIME_SMALL].hp == 20
    assert specs[EnemyType.SLIME_MEDIUM].name == "Medium Slime"
    assert specs[EnemyType.SLIME_MEDIUM].hp == 40
    assert specs[EnemyType.SLIME_LARGE].name == "Large Slime"
    assert specs[EnemyType.SLIME_LARGE].hp == 80
    assert all(spec.id == EnemyID.FOR_SLIME for spec in specs.values())


def test_default_spec_flags():
    specs = {spec.type: spec for spec in default_slime_specs()}
    assert specs[EnemyType.SLIME_SMALL].behavior_flags == (
        BehaviorFlags.WANDER_NOISE | BehaviorFlags.BASIC_CHASE | BehaviorFlags.MELEE_ATTACK
    )
    assert specs[EnemyType.SLIME_MEDIUM].behavior_flags == (
        BehaviorFlags.WANDER_NOISE
        | BehaviorFlags.ADVANCED_CHASE
        | BehaviorFlags.MELEE_ATTACK
        | BehaviorFlags.STRAFE_TARGET
    )
    assert specs[EnemyType.SLIME_LARGE].behavior_flags == (
        BehaviorFlags.WANDER_NOISE
        | BehaviorFlags.ADVANCED_CHASE
        | BehaviorFlags.CHARGE_DASH
        | BehaviorFlags.MELEE_ATTACK
    )


def test_spawn_small_slime_sets_wander():
    enemy = _spawner().spawn_enemy(Vector2(10.0, 20.0), EnemyType.SLIME_SMALL)
    assert enemy.spec.name == "Small Slime"
    assert enemy.position == Vector2(10.0, 20.0)
    assert enemy.wander_noise.radius == 200.0
    assert enemy.wander_noise.sway_speed == 0.5
    assert enemy.hp == enemy.spec.hp


def test_spawn_medium_slime_sets_strafe():
    enemy = _spawner().spawn_enemy(Vector2(0.0, 0.0), EnemyType.SLIME_MEDIUM)
    assert enemy.strafe_target.orbit_radius == 100.0
    assert enemy.strafe_target.orbit_gain == 0.7
    assert enemy.strafe_target.direction in (1, -1)


def test_spawn_large_slime_sets_charge_dash():
    enemy = _spawner().spawn_enemy(Vector2(0.0, 0.0), EnemyType.SLIME_LARGE)
    assert enemy.charge_dash.charge_duration == 1.0
    assert enemy.charge_dash.dash_speed == 3.0
    assert enemy.charge_dash.dash_duration == 0.5


def test_unknown_type_falls_back_to_small_slime():
    enemy = _spawner().spawn_enemy(Vector2(5.0, 5.0), EnemyType.BOAR)
    assert enemy.spec.type == EnemyType.SLIME_SMALL


def test_clear_removes_specs_and_spawn_fails():
    spawner = _spawner()
    spawner.clear()
    assert spawner.specs == []
    with pytest.raises(LookupError):
        spawner.spawn_enemy(Vector2(0.0, 0.0), EnemyType.SLIME_SMALL)


def test_spawn_around_player_respects_maximum():
    spawner = _spawner()
    existing = [spawner.spawn_enemy(Vector2(0.0, 0.0), EnemyType.SLIME_SMALL)]
    added = spawner.spawn_around_player(Vector2(0.0, 0.0), 50.0, existing, 1)
    assert added == []
    assert len(existing) == 1


def test_spawn_count_follows_difficulty():
    spawner = _spawner()
    enemies = []
    added = spawner.spawn_around_player(Vector2(0.0, 0.0), 10.0, enemies, 10)
    assert len(added) == 2
    assert enemies == added


def test_spawn_count_limited_by_room_left():
    spawner = _spawner()
    enemies = []
    spawner.spawn_around_player(Vector2(0.0, 0.0), 100.0, enemies, 3)
    assert len(enemies) == 3


def test_spawn_positions_within_ring_and_walkable():
    world = _big_world()
    spawner = _spawner(world, seed=3)
    player = Vector2(100.0, -50.0)
    added = spawner.spawn_around_player(player, 40.0, [], 20)
    assert len(added) == 5
    distances = [player.distance_to(enemy.position) for enemy in added]
    assert all(
        MIN_SPAWN_DISTANCE - 1e-6 <= dist <= MAX_SPAWN_DISTANCE + 1e-6
        for dist in distances
    )
    assert all(world.is_walkable(enemy.position.x, enemy.position.y) for enemy in added)


def test_high_difficulty_spawns_only_large():
    spawner = _spawner(seed=11)
    enemies = []
    spawner.spawn_around_player(Vector2(0.0, 0.0), 500.0, enemies, 8)
    assert len(enemies) == 8
    assert all(e.spec.type == EnemyType.SLIME_LARGE for e in enemies)


def test_nothing_spawns_on_blocked_ground():
    world = Environment(
        world_bounds=Rectangle(-3000.0, -3000.0, 6000.0, 6000.0),
        obstacles=[Rectangle(-3000.0, -3000.0, 6000.0, 6000.0)],
    )
    spawner = _spawner(world)
    enemies = []
    added = spawner.spawn_around_player(Vector2(0.0, 0.0), 30.0, enemies, 10)
    assert added == []
    assert enemies == []