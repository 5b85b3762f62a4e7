import pytest

from phantomlite.environment import Environment
from phantomlite.types import Rectangle, Vector2


def test_bounds_follow_world_rectangle():
    env = Environment(world_bounds=Rectangle(10.0, 20.0, 300.0, 400.0))
    min_x, min_y, max_x, max_y = env.bounds()
    assert (min_x, min_y) == (10.0, 20.0)
    assert max_x - min_x == 300.0
    assert max_y - min_y == 400.0


def test_walkability_respects_bounds_and_obstacles():
    obstacle = Rectangle(100.0, 100.0, 50.0, 50.0)
    env = Environment(obstacles=[obstacle])
    assert env.is_walkable(10.0, 10.0)
    assert not env.is_walkable(-1.0, 10.0)
    assert not env.is_walkable(120.0, 120.0)
    min_x, min_y, max_x, max_y = env.bounds()
    assert not env.is_walkable(max_x + 1.0, min_y + 1.0)


def test_raycast_stops_at_obstacle():
    env = Environment(obstacles=[Rectangle(100.0, 0.0, 20.0, 720.0)])
    origin = Vector2(50.0, 50.0)
    d = env.raycast(origin, Vector2(1.0, 0.0), 150.0)
    assert d < 150.0
    assert not env.is_walkable(origin.x + d, origin.y)
    assert env.is_walkable(origin.x + d - 1.0, origin.y)


def test_raycast_clear_path_returns_max():
    env = Environment()
    assert env.raycast(Vector2(300.0, 300.0), Vector2(0.0, 1.0), 150.0) == 150.0


def test_raycast_from_blocked_origin_is_zero():
    env = Environment(obstacles=[Rectangle(0.0, 0.0, 50.0, 50.0)])
    assert env.raycast(Vector2(10.0, 10.0), Vector2(1.0, 0.0), 100.0) == 0.0


def test_raycast_negative_distance_raises():
    with pytest.raises(ValueError):
        Environment().raycast(Vector2(10.0, 10.0), Vector2(1.0, 0.0), -1.0)


def test_camera_target_maps_to_screen_centre():
    env = Environment()
    env.set_camera_target(Vector2(900.0, 50.0))
    centre = env.world_to_screen(Vector2(900.0, 50.0))
    assert centre.x == pytest.approx(env.screen_width / 2)
    assert centre.y == pytest.approx(env.screen_height / 2)


def test_screen_world_round_trip():
    env = Environment()
    env.set_camera_target(Vector2(123.0, 456.0))
    point = Vector2(17.5, -3.25)
    back = env.screen_to_world(env.world_to_screen(point))
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


def test_player_position_is_a_copy():
    env = Environment(player_location=Vector2(5.0, 6.0))
    pos = env.player_position()
    pos.x = 99.0
    assert env.player_position() == Vector2(5.0, 6.0)


def test_damage_player_reduces_health_and_stops_when_dead():
    env = Environment(player_health=3, player_max_health=3)
    assert env.damage_player(2, Vector2(1.0, 0.0))
    assert env.player_health == 1
    assert env.last_knockback == Vector2(1.0, 0.0)
    assert env.damage_player(5, Vector2(0.0, 1.0))
    assert env.player_health == 0
    assert not env.damage_player(1, Vector2(0.0, 1.0))


def test_enemy_at_position():
    env = Environment(enemy_positions=[Vector2(100.0, 100.0)])
    assert env.is_enemy_at_position(103.0, 104.0, 10.0)
    assert not env.is_enemy_at_position(300.0, 300.0, 10.0)
    assert not Environment().is_enemy_at_position(100.0, 100.0, 10.0)