"""Context-steering behaviour atoms shared by every enemy type."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from phantomlite.types import (
    Color,
    DashState,
    EnemyRuntime,
    Facing,
    BehaviorResult,
    Vector2,
)

if TYPE_CHECKING:
    from phantomlite.environment import Environment

logger = logging.getLogger(__name__)

_RAY_ALPHA = 180
_RAY_SCALE = 50.0
_POSITIVE_COLOR: Color = (0, 228, 48, _RAY_ALPHA)
_NEGATIVE_COLOR: Color = (230, 41, 55, _RAY_ALPHA)
_NEUTRAL_COLOR: Color = (130, 130, 130, _RAY_ALPHA)


@dataclass(frozen=True)
class SteeringRay:
    """One steering ray prepared for debug drawing."""

    start: Vector2
    end: Vector2
    color: Color
    weight: float


def _direction_to(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(b.x - a.x, b.y - a.y)


def _dot(a: Vector2, b: Vector2) -> float:
    return a.x * b.x + a.y * b.y


def _cross(a: Vector2, b: Vector2) -> float:
    return a.x * b.y - a.y * b.x


def _simple_noise(x: float, y: float) -> float:
    """Cheap smooth variation in the range 0..1."""
    n = math.sin(x) * 0.5 + math.cos(y) * 0.5
    return n * 0.5 + 0.5


def _rays(enemy: EnemyRuntime) -> Iterable[tuple[int, Vector2]]:
    return ((i, enemy.ray_direction(i)) for i in range(enemy.NUM_RAYS))


def wander_noise(enemy: EnemyRuntime, dt: float) -> BehaviorResult:
    """Drift around the spawn point along a noise-driven target."""
    wander = enemy.wander_noise
    wander.noise_offset_x += wander.sway_speed * dt
    wander.noise_offset_y += wander.sway_speed * dt * 1.3

    enemy.reset_weights()

    noise_x = _simple_noise(wander.noise_offset_x, 0.0) * 2.0 - 1.0
    noise_y = _simple_noise(0.0, wander.noise_offset_y) * 2.0 - 1.0
    target = Vector2(
        wander.spawn_point.x + noise_x * wander.radius,
        wander.spawn_point.y + noise_y * wander.radius,
    )

    apply_seek_weights(enemy, target, 0.8)
    enemy.apply_steering_movement(enemy.spec.speed, dt)
    return BehaviorResult.RUNNING


def seek_target(enemy: EnemyRuntime, target: Vector2, dt: float) -> BehaviorResult:
    """Move toward ``target`` until within 5 px of the preferred distance."""
    seek = enemy.seek_target
    dist = enemy.position.distance_to(target)
    if abs(dist - seek.preferred_dist) < 5.0:
        seek.active = False
        return BehaviorResult.COMPLETED

    seek.active = True
    enemy.reset_weights()
    apply_seek_weights(enemy, target, seek.seek_gain)
    enemy.apply_steering_movement(enemy.spec.speed, dt)
    return BehaviorResult.RUNNING


def strafe_target(enemy: EnemyRuntime, target: Vector2, dt: float) -> BehaviorResult:
    """Orbit ``target`` at the configured radius."""
    strafe = enemy.strafe_target
    dist = enemy.position.distance_to(target)
    strafe.active = True

    enemy.reset_weights()

    orbit_diff = dist - strafe.orbit_radius
    if abs(orbit_diff) > 10.0:
        apply_seek_weights(enemy, target, -0.5 if orbit_diff > 0 else 0.5)

    apply_strafe_weights(enemy, target, strafe.direction, strafe.orbit_gain)
    enemy.apply_steering_movement(enemy.spec.speed, dt)
    return BehaviorResult.RUNNING


def separate_allies(
    enemy: EnemyRuntime, enemies: Iterable[EnemyRuntime], dt: float
) -> BehaviorResult:
    """Keep a minimum spacing from other living enemies."""
    separate = enemy.separate_allies
    enemy.reset_weights()
    apply_separation_weights(
        enemy, enemies, separate.desired_spacing, separate.separation_gain
    )
    enemy.apply_steering_movement(enemy.spec.speed, dt)
    return BehaviorResult.RUNNING


def avoid_obstacles(enemy: EnemyRuntime, world: Environment, dt: float) -> BehaviorResult:
    """Block rays that run into obstacles, keeping the other weights, then move."""
    avoid = enemy.avoid_obstacle
    apply_obstacle_avoidance_weights(
        enemy, world, avoid.lookahead_px, avoid.avoidance_gain
    )
    enemy.apply_steering_movement(enemy.spec.speed, dt)
    return BehaviorResult.RUNNING


def charge_dash(enemy: EnemyRuntime, target: Vector2, dt: float) -> BehaviorResult:
    """Wind up, dash toward the target, cool down; completes after the cooldown."""
    dash = enemy.charge_dash

    match dash.state:
        case DashState.IDLE:
            dash.state = DashState.CHARGING
            dash.charge_timer = 0.0
            dash.dash_direction = _direction_to(enemy.position, target).normalized()
            return BehaviorResult.RUNNING

        case DashState.CHARGING:
            dash.charge_timer += dt
            if dash.charge_timer >= dash.charge_duration:
                dash.state = DashState.DASHING
                dash.dash_timer = 0.0
            return BehaviorResult.RUNNING

        case DashState.DASHING:
            dash.dash_timer += dt
            step = enemy.spec.speed * dash.dash_speed * dt
            enemy.position.x += dash.dash_direction.x * step
            enemy.position.y += dash.dash_direction.y * step
            enemy.sync_collision_rect()
            enemy.facing = Facing.from_direction(dash.dash_direction)
            if dash.dash_timer >= dash.dash_duration:
                dash.state = DashState.COOLDOWN
                dash.cooldown_timer = 0.0
            enemy.is_moving = True
            return BehaviorResult.RUNNING

        case DashState.COOLDOWN:
            dash.cooldown_timer += dt
            if dash.cooldown_timer >= dash.cooldown_duration:
                dash.state = DashState.IDLE
                return BehaviorResult.COMPLETED
            return BehaviorResult.RUNNING

    return BehaviorResult.FAILED


def ranged_shoot(enemy: EnemyRuntime, target: Vector2, dt: float) -> BehaviorResult:
    """Fire at the target when the cooldown allows; fails while cooling down."""
    shoot = enemy.ranged_shoot

    if not shoot.can_fire:
        shoot.timer += dt
        if shoot.timer >= shoot.cooldown:
            shoot.can_fire = True
            shoot.timer = 0.0

    if shoot.can_fire:
        logger.info("Enemy fired projectile at player")
        shoot.can_fire = False
        shoot.timer = 0.0
        return BehaviorResult.COMPLETED

    return BehaviorResult.FAILED


def attack_melee(enemy: EnemyRuntime, target: Vector2, dt: float) -> BehaviorResult:
    """Start or continue a melee swing at a target within reach."""
    melee = enemy.attack_melee

    if not melee.can_attack:
        melee.timer += dt
        if melee.timer >= melee.cooldown:
            melee.can_attack = True
            melee.timer = 0.0

    if melee.attacking:
        melee.attack_timer += dt
        if melee.attack_timer >= melee.attack_duration:
            melee.attacking = False
            melee.damage_applied = False
            return BehaviorResult.COMPLETED
        return BehaviorResult.RUNNING

    dist = enemy.position.distance_to(target)
    if melee.can_attack and dist <= melee.reach:
        melee.attacking = True
        melee.can_attack = False
        melee.attack_timer = 0.0
        melee.damage_applied = False
        enemy.facing = Facing.from_direction(
            _direction_to(enemy.position, target).normalized()
        )
        logger.info("Enemy performed melee attack on player")
        return BehaviorResult.RUNNING

    return BehaviorResult.FAILED


def apply_context_steering(enemy: EnemyRuntime, dt: float) -> BehaviorResult:
    """Move along the best non-negative ray; fail when every ray is negative."""
    best_ray = 0
    best_weight = -999.0
    for index, weight in enumerate(enemy.weights):
        if weight > best_weight and weight >= 0:
            best_weight = weight
            best_ray = index

    if best_weight < 0.0:
        enemy.is_moving = False
        return BehaviorResult.FAILED

    move_dir = enemy.ray_direction(best_ray)
    step = enemy.spec.speed * dt
    enemy.position.x += move_dir.x * step
    enemy.position.y += move_dir.y * step
    enemy.sync_collision_rect()
    enemy.facing = Facing.from_direction(move_dir)
    enemy.is_moving = True
    return BehaviorResult.RUNNING


def apply_seek_weights(enemy: EnemyRuntime, target: Vector2, gain: float = 1.0) -> None:
    """Add weight to rays in proportion to how well they point at ``target``."""
    target_dir = _direction_to(enemy.position, target).normalized()
    for index, ray_dir in _rays(enemy):
        enemy.weights[index] += _dot(target_dir, ray_dir) * gain


def apply_strafe_weights(
    enemy: EnemyRuntime, target: Vector2, direction: int, gain: float = 1.0
) -> None:
    """Favour rays perpendicular to the target on the side given by ``direction``."""
    target_dir = _direction_to(enemy.position, target).normalized()
    for index, ray_dir in _rays(enemy):
        dot = _dot(target_dir, ray_dir)
        cross = _cross(target_dir, ray_dir)
        sine = math.sqrt(max(0.0, 1.0 - dot * dot))
        if (direction > 0 and cross > 0) or (direction < 0 and cross < 0):
            strafe_weight = sine
        else:
            strafe_weight = -sine
        enemy.weights[index] += strafe_weight * gain


def apply_separation_weights(
    enemy: EnemyRuntime,
    enemies: Iterable[EnemyRuntime],
    desired_dist: float,
    gain: float = 1.0,
) -> None:
    """Push away from living neighbours closer than ``desired_dist``."""
    for other in enemies:
        if other is enemy or not other.is_alive():
            continue
        dist = enemy.position.distance_to(other.position)
        if dist >= desired_dist:
            continue
        repulsion = (1.0 - dist / desired_dist) * gain
        repel_dir = _direction_to(other.position, enemy.position).normalized()
        for index, ray_dir in _rays(enemy):
            dot = _dot(repel_dir, ray_dir)
            if dot > 0:
                enemy.weights[index] += dot * repulsion


def apply_obstacle_avoidance_weights(
    enemy: EnemyRuntime, world: Environment, lookahead_dist: float, gain: float = 1.0
) -> None:
    """Set ``-gain`` on every ray whose lookahead end point is not walkable."""
    start = enemy.position
    for index, ray_dir in _rays(enemy):
        end_x = start.x + ray_dir.x * lookahead_dist
        end_y = start.y + ray_dir.y * lookahead_dist
        if not world.is_walkable(end_x, end_y):
            enemy.weights[index] = -1.0 * gain


def steering_rays(
    enemy: EnemyRuntime, world: Environment | None, screen_space: bool = True
) -> list[SteeringRay]:
    """Debug rays for the steering weights: green positive, red negative, grey zero."""
    base = enemy.position
    if screen_space:
        if world is None:
            raise ValueError("a world is needed to convert to screen space")
        base = world.world_to_screen(base)
    base = Vector2(base.x, base.y)

    rays = []
    for index, ray_dir in _rays(enemy):
        weight = enemy.weights[index]
        length = abs(weight) * _RAY_SCALE
        if weight > 0:
            color = _POSITIVE_COLOR
        elif weight < 0:
            color = _NEGATIVE_COLOR
        else:
            color = _NEUTRAL_COLOR
        end = Vector2(base.x + ray_dir.x * length, base.y + ray_dir.y * length)
        rays.append(SteeringRay(start=base, end=end, color=color, weight=weight))
    return rays