"""Slime-specific behaviours built on the shared steering atoms."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from phantomlite.environment import Environment
from phantomlite.steering import (
    apply_context_steering,
    apply_seek_weights,
    attack_melee,
    wander_noise,
)
from phantomlite.types import BehaviorResult, EnemyRuntime, Vector2

logger = logging.getLogger(__name__)

FAR_LOOKAHEAD = 150.0
NEAR_LOOKAHEAD = 50.0
STRAFE_DISTANCE = 100.0
SEEK_WEIGHT = 1.5
STRAFE_WEIGHT = 1.2
NEAR_AVOIDANCE = 3.0


@dataclass
class DebugSettings:
    """Which debug overlays are switched on for enemy behaviours."""

    show_debug: bool = False
    show_steering: bool = False
    show_obstacle_avoidance: bool = True

    def toggle_debug(self) -> bool:
        self.show_debug = not self.show_debug
        return self.show_debug

    def toggle_steering(self) -> bool:
        self.show_steering = not self.show_steering
        return self.show_steering

    def toggle_obstacle_avoidance(self) -> bool:
        self.show_obstacle_avoidance = not self.show_obstacle_avoidance
        return self.show_obstacle_avoidance


def _dot(a: Vector2, b: Vector2) -> float:
    return a.x * b.x + a.y * b.y


def enhanced_obstacle_avoidance(
    enemy: EnemyRuntime, env: Environment, dt: float
) -> BehaviorResult:
    """Seek the player, steer clear of obstacles by raycasting, orbit when close."""
    enemy.reset_weights()

    player_pos = env.player_position()
    dist_to_player = enemy.position.distance_to(player_pos)
    dir_to_player = (player_pos - enemy.position).normalized()

    rays = [enemy.ray_direction(i) for i in range(enemy.NUM_RAYS)]

    for index, ray_dir in enumerate(rays):
        dot = _dot(ray_dir, dir_to_player)
        enemy.weights[index] += max(0.0, dot) ** 2 * SEEK_WEIGHT

    for index, ray_dir in enumerate(rays):
        distance = env.raycast(enemy.position, ray_dir, FAR_LOOKAHEAD)
        if distance < NEAR_LOOKAHEAD:
            closeness = 1.0 - distance / NEAR_LOOKAHEAD
            enemy.weights[index] += -NEAR_AVOIDANCE * closeness * closeness
        elif distance < FAR_LOOKAHEAD:
            closeness = 1.0 - distance / FAR_LOOKAHEAD
            enemy.weights[index] += -1.0 * closeness

    if dist_to_player < STRAFE_DISTANCE:
        strafe_dir = Vector2(-dir_to_player.y, dir_to_player.x)
        for index, ray_dir in enumerate(rays):
            enemy.weights[index] += max(0.0, _dot(ray_dir, strafe_dir)) * STRAFE_WEIGHT

    apply_context_steering(enemy, dt)
    return BehaviorResult.RUNNING


def wander_random(enemy: EnemyRuntime, dt: float) -> BehaviorResult:
    """Wander around the spawn point."""
    return wander_noise(enemy, dt)


def chase_player(enemy: EnemyRuntime, env: Environment, dt: float) -> BehaviorResult:
    """Add seek weights toward the player when within detection radius."""
    player_pos = env.player_position()
    if enemy.position.distance_to(player_pos) <= enemy.spec.detection_radius:
        apply_seek_weights(enemy, player_pos, 1.0)
        return BehaviorResult.RUNNING
    return BehaviorResult.FAILED


def chase_player_smart(
    enemy: EnemyRuntime, env: Environment, dt: float
) -> BehaviorResult:
    """Chase the player with raycast obstacle avoidance when within detection radius."""
    player_pos = env.player_position()
    if enemy.position.distance_to(player_pos) <= enemy.spec.detection_radius:
        return enhanced_obstacle_avoidance(enemy, env, dt)
    return BehaviorResult.FAILED


def attack_player(enemy: EnemyRuntime, env: Environment, dt: float) -> BehaviorResult:
    """Melee attack aimed at the player."""
    return attack_melee(enemy, env.player_position(), dt)


def attack_player_with_adapter(
    enemy: EnemyRuntime, env: Environment, player_pos: Vector2, dt: float
) -> bool:
    """Try a melee attack and damage the player once per swing; True if attempted."""
    attack = enemy.attack

    if not attack.can_attack:
        attack.timer += dt
        if attack.timer >= attack.cooldown:
            attack.can_attack = True
        return False

    to_player = player_pos - enemy.position
    if abs(to_player) > attack.attack_radius:
        return False

    result = attack_melee(enemy, player_pos, dt)
    melee = enemy.attack_melee
    if result is BehaviorResult.RUNNING and melee.attacking and not melee.damage_applied:
        env.damage_player(enemy.spec.dmg, to_player.normalized())
        melee.damage_applied = True
        logger.info("Damage applied to player: %d", enemy.spec.dmg)
    return True