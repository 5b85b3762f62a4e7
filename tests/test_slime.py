import random

import pytest

from phantomlite.environment import Environment
from phantomlite.slime import SlimeSystem
from phantomlite.types import DropType, EnemyID, Hit, Rectangle, Vector2


def make_system(**env_kwargs):
    return SlimeSystem(Environment(**env_kwargs), rng=random.Random(7))


def test_spawned_slime_can_be_hit():
    system = make_system()
    system.spawn_slime(Vector2(100.0, 100.0))
    rect = Rectangle(84.0, 84.0, 32.0, 32.0)
    assert system.hit_enemy_at(rect, Hit(dmg=1)) is True
    assert system.enemies[0].hp == 19
    assert system.enemy_count() == 1


def test_spawned_slime_is_small_slime():
    system = make_system()
    slime = system.spawn_slime(Vector2(100.0, 100.0))
    assert slime.spec.name == "Small Slime"
    assert slime.wander_noise.radius == 200.0


def test_hit_knockback_moves_enemy():
    system = make_system()
    slime = system.spawn_slime(Vector2(100.0, 100.0))
    hit = Hit(dmg=1, knockback=Vector2(10.0, 0.0))
    system.hit_enemy_at(Rectangle(84.0, 84.0, 32.0, 32.0), hit)
    assert slime.position.x == pytest.approx(200.0)
    assert system.hit_enemy_at(Rectangle(84.0, 84.0, 32.0, 32.0), hit) is False


def test_slime_spec_values():
    spec = make_system().slime_spec()
    assert spec.id == EnemyID.FOR_SLIME
    assert spec.hp == 2
    assert spec.dmg == 1
    assert spec.speed == 60.0
    drops = {d.type: d.chance for d in spec.drops}
    assert drops == {DropType.HEART: 30, DropType.COIN: 70}


def test_check_player_collision():
    system = make_system()
    system.spawn_slime(Vector2(100.0, 100.0))
    assert system.check_player_collision(Vector2(110.0, 100.0), 20.0) == 0
    assert system.check_player_collision(Vector2(110.0, 100.0), 5.0) is None


def test_take_damage_and_invalid_ids():
    system = make_system()
    slime = system.spawn_slime(Vector2(100.0, 100.0))
    system.take_damage(0, 5)
    assert slime.hp == 15
    system.take_damage(-1, 5)
    system.take_damage(3, 5)
    assert slime.hp == 15


def test_debug_toggles():
    system = make_system()
    assert system.is_debug_enabled() is False
    assert system.toggle_debug_info() is True
    assert system.is_debug_enabled() is True
    system.set_debug(False)
    assert system.is_debug_enabled() is False
    assert system.toggle_steering_debug() is True
    assert system.is_steering_debug_enabled() is True


def test_spawn_demo_slimes_around_player():
    system = make_system(world_bounds=Rectangle(-2000.0, -2000.0, 6000.0, 6000.0))
    system.spawn_demo_slimes(5)
    assert system.enemy_count() == 2
    player = system.env.player_position()
    for enemy in system.enemies:
        assert 299.0 <= enemy.position.distance_to(player) <= 801.0


def test_spawn_demo_slimes_respects_limit():
    system = make_system(world_bounds=Rectangle(-2000.0, -2000.0, 6000.0, 6000.0))
    system.spawn_demo_slimes(1)
    assert system.enemy_count() == 1
    system.spawn_demo_slimes(1)
    assert system.enemy_count() == 1


def test_update_chases_player():
    system = make_system(player_location=Vector2(250.0, 100.0))
    slime = system.spawn_slime(Vector2(100.0, 100.0))
    system.update(0.1)
    assert slime.position.x == pytest.approx(110.0)
    assert slime.position.y == pytest.approx(100.0)


def test_cleanup_empties_system():
    system = make_system()
    system.spawn_slime(Vector2(100.0, 100.0))
    system.cleanup()
    assert system.enemy_count() == 0
    with pytest.raises(LookupError):
        system.spawn_slime(Vector2(100.0, 100.0))