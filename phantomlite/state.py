"""Bookkeeping for live enemies: the slime spec, per-frame updates and damage."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from phantomlite.environment import Environment
from phantomlite.slime_behaviors import attack_player_with_adapter
from phantomlite.steering import (
    apply_context_steering,
    apply_obstacle_avoidance_weights,
    apply_seek_weights,
    apply_separation_weights,
    apply_strafe_weights,
    wander_noise,
)
from phantomlite.types import (
    WHITE,
    BehaviorFlags,
    Color,
    DropChance,
    DropType,
    EnemyID,
    EnemyRuntime,
    EnemyStats,
    EnemyType,
    Hit,
    Rectangle,
    Vector2,
)

ANIMATION_FRAME_TIME = 0.25
ATTACK_TINT: Color = (255, 150, 150, 255)
STATE_SEED = 42


def forest_slime_spec() -> EnemyStats:
    """Static data of the Forest Slime."""
    return EnemyStats(
        id=EnemyID.FOR_SLIME,
        type=EnemyType.SLIME_SMALL,
        name="Forest Slime",
        size=Vector2(32.0, 32.0),
        hp=2,
        dmg=1,
        speed=60.0,
        radius=16.0,
        width=32.0,
        height=32.0,
        detection_radius=200.0,
        attack_radius=50.0,
        attack_cooldown=1.2,
        animation_frames=2,
        behavior_flags=(
            BehaviorFlags.WANDER_NOISE
            | BehaviorFlags.BASIC_CHASE
            | BehaviorFlags.MELEE_ATTACK
            | BehaviorFlags.AVOID_OBSTACLES
        ),
        drops=[
            DropChance(DropType.HEART, 30),
            DropChance(DropType.COIN, 70),
        ],
    )


@dataclass
class EnemyManager:
    """Holds every enemy instance and advances them frame by frame."""

    env: Environment
    spec: EnemyStats = field(default_factory=forest_slime_spec)
    rng: random.Random = field(default_factory=lambda: random.Random(STATE_SEED))
    enemies: list[EnemyRuntime] = field(default_factory=list)

    def _update_enemy(self, enemy: EnemyRuntime, player_pos: Vector2, dt: float) -> None:
        original = Vector2(enemy.position.x, enemy.position.y)
        enemy.reset_weights()
        flags = enemy.spec.behavior_flags

        if flags & BehaviorFlags.MELEE_ATTACK:
            if enemy.position.distance_to(player_pos) <= enemy.spec.attack_radius:
                if attack_player_with_adapter(enemy, self.env, player_pos, dt):
                    enemy.is_moving = enemy.position != original
                    return

        if flags & BehaviorFlags.BASIC_CHASE:
            if enemy.position.distance_to(player_pos) <= enemy.spec.detection_radius:
                apply_seek_weights(enemy, player_pos, 1.0)
        elif flags & BehaviorFlags.ADVANCED_CHASE:
            dist = enemy.position.distance_to(player_pos)
            if dist <= enemy.spec.detection_radius:
                if dist > enemy.spec.attack_radius * 1.5:
                    apply_seek_weights(enemy, player_pos, 1.0)
                else:
                    apply_strafe_weights(
                        enemy,
                        player_pos,
                        enemy.strafe_target.direction,
                        enemy.strafe_target.orbit_gain,
                    )

        if flags & BehaviorFlags.WANDER_NOISE:
            if enemy.position.distance_to(player_pos) > enemy.spec.detection_radius:
                wander_noise(enemy, dt)

        if flags & BehaviorFlags.AVOID_OBSTACLES:
            apply_obstacle_avoidance_weights(
                enemy,
                self.env,
                enemy.avoid_obstacle.lookahead_px,
                enemy.avoid_obstacle.avoidance_gain,
            )

        if flags & BehaviorFlags.SEPARATE_ALLIES:
            apply_separation_weights(
                enemy,
                self.enemies,
                enemy.separate_allies.desired_spacing,
                enemy.separate_allies.separation_gain,
            )

        apply_context_steering(enemy, dt)

        enemy.color = ATTACK_TINT if enemy.attack.attacking else WHITE

        min_x, min_y, max_x, max_y = self.env.bounds()
        half_w = enemy.spec.size.x / 2
        half_h = enemy.spec.size.y / 2
        if enemy.position.x - half_w < min_x:
            enemy.position.x = min_x + half_w
        elif enemy.position.x + half_w > max_x:
            enemy.position.x = max_x - half_w
        if enemy.position.y - half_h < min_y:
            enemy.position.y = min_y + half_h
        elif enemy.position.y + half_h > max_y:
            enemy.position.y = max_y - half_h

        enemy.collision_rect = Rectangle(
            enemy.position.x - half_w,
            enemy.position.y - half_h,
            enemy.spec.size.x,
            enemy.spec.size.y,
        )

        enemy.is_moving = enemy.position != original

        enemy.anim_timer += dt
        if enemy.anim_timer >= ANIMATION_FRAME_TIME:
            enemy.anim_timer = 0.0
            enemy.anim_frame = (enemy.anim_frame + 1) % enemy.spec.animation_frames

    def update(self, dt: float) -> None:
        """Advance every active enemy by ``dt`` seconds."""
        player_pos = self.env.player_position()
        for enemy in self.enemies:
            if enemy.active:
                self._update_enemy(enemy, player_pos, dt)

    def add(self, enemy: EnemyRuntime) -> None:
        self.enemies.append(enemy)

    def remove_inactive(self) -> None:
        """Drop enemies that are inactive or out of hit points."""
        self.enemies = [e for e in self.enemies if e.active and e.hp > 0]

    def count(self) -> int:
        """Number of stored enemies."""
        return len(self.enemies)

    def apply_damage_at(self, hit_rect: Rectangle, hit: Hit) -> bool:
        """Hit every enemy overlapping ``hit_rect``; True if any overlapped."""
        any_hit = False
        for enemy in self.enemies:
            if enemy.collision_rect.collides(hit_rect):
                enemy.on_hit(hit)
                any_hit = True
        return any_hit

    def clear(self) -> None:
        self.enemies.clear()