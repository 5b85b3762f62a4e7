"""Slime specifications and spawning of new enemies around the player."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field

from phantomlite.environment import Environment
from phantomlite.types import (
    BehaviorFlags,
    EnemyID,
    EnemyRuntime,
    EnemyStats,
    EnemyType,
    Vector2,
)

logger = logging.getLogger(__name__)

MIN_SPAWN_DISTANCE = 300.0
MAX_SPAWN_DISTANCE = 800.0
SPAWN_ATTEMPTS = 10


def default_slime_specs() -> list[EnemyStats]:
    """The small, medium and large slime specifications."""
    return [
        EnemyStats(
            id=EnemyID.FOR_SLIME,
            type=EnemyType.SLIME_SMALL,
            name="Small Slime",
            size=Vector2(32.0, 32.0),
            hp=20,
            dmg=5,
            speed=100.0,
            detection_radius=300.0,
            attack_radius=50.0,
            attack_cooldown=2.0,
            behavior_flags=(
                BehaviorFlags.WANDER_NOISE
                | BehaviorFlags.BASIC_CHASE
                | BehaviorFlags.MELEE_ATTACK
            ),
        ),
        EnemyStats(
            id=EnemyID.FOR_SLIME,
            type=EnemyType.SLIME_MEDIUM,
            name="Medium Slime",
            size=Vector2(48.0, 48.0),
            hp=40,
            dmg=10,
            speed=80.0,
            detection_radius=350.0,
            attack_radius=60.0,
            attack_cooldown=1.8,
            behavior_flags=(
                BehaviorFlags.WANDER_NOISE
                | BehaviorFlags.ADVANCED_CHASE
                | BehaviorFlags.MELEE_ATTACK
                | BehaviorFlags.STRAFE_TARGET
            ),
        ),
        EnemyStats(
            id=EnemyID.FOR_SLIME,
            type=EnemyType.SLIME_LARGE,
            name="Large Slime",
            size=Vector2(64.0, 64.0),
            hp=80,
            dmg=15,
            speed=60.0,
            detection_radius=400.0,
            attack_radius=70.0,
            attack_cooldown=2.5,
            behavior_flags=(
                BehaviorFlags.WANDER_NOISE
                | BehaviorFlags.ADVANCED_CHASE
                | BehaviorFlags.CHARGE_DASH
                | BehaviorFlags.MELEE_ATTACK
            ),
        ),
    ]


@dataclass
class Spawner:
    """Creates enemies from cached specifications."""

    world: Environment
    rng: random.Random = field(default_factory=random.Random)
    specs: list[EnemyStats] = field(default_factory=default_slime_specs)

    def _find_spec(self, enemy_type: EnemyType) -> EnemyStats | None:
        return next((spec for spec in self.specs if spec.type == enemy_type), None)

    def spawn_enemy(self, position: Vector2, enemy_type: EnemyType) -> EnemyRuntime:
        """A new enemy of ``enemy_type``; unknown types fall back to the small slime."""
        spec = self._find_spec(enemy_type)
        if spec is None:
            logger.warning("Enemy type not found, defaulting to small slime")
            spec = self._find_spec(EnemyType.SLIME_SMALL)
            if spec is None:
                raise LookupError("no small slime specification is available")

        enemy = EnemyRuntime(spec, position, rng=self.rng)
        flags = spec.behavior_flags

        if flags & BehaviorFlags.WANDER_NOISE:
            enemy.wander_noise.radius = 200.0
            enemy.wander_noise.sway_speed = 0.5

        if flags & BehaviorFlags.STRAFE_TARGET:
            enemy.strafe_target.orbit_radius = 100.0
            enemy.strafe_target.orbit_gain = 0.7
            enemy.strafe_target.direction = 1 if self.rng.randint(0, 1) else -1

        if flags & BehaviorFlags.CHARGE_DASH:
            enemy.charge_dash.charge_duration = 1.0
            enemy.charge_dash.dash_speed = 3.0
            enemy.charge_dash.dash_duration = 0.5

        if flags & BehaviorFlags.AVOID_OBSTACLES:
            enemy.avoid_obstacle.lookahead_px = 100.0
            enemy.avoid_obstacle.avoidance_gain = 1.0

        logger.info(
            "Spawned %s at position: (%.2f, %.2f)", spec.name, position.x, position.y
        )
        return enemy

    def _choose_type(self, difficulty: float) -> EnemyType:
        roll = self.rng.randint(1, 100)
        if roll <= 10 + int(difficulty / 5.0):
            return EnemyType.SLIME_LARGE
        if roll <= 40 + int(difficulty / 2.0):
            return EnemyType.SLIME_MEDIUM
        return EnemyType.SLIME_SMALL

    def spawn_around_player(
        self,
        player_position: Vector2,
        difficulty: float,
        enemies: list[EnemyRuntime],
        max_enemies: int,
    ) -> list[EnemyRuntime]:
        """Append new enemies on walkable ground around the player; return those added."""
        spawned: list[EnemyRuntime] = []
        if len(enemies) >= max_enemies:
            return spawned

        to_spawn = min(int(difficulty / 10.0) + 1, max_enemies - len(enemies))
        for _ in range(to_spawn):
            for _attempt in range(SPAWN_ATTEMPTS):
                angle = math.radians(self.rng.randint(0, 360))
                distance = float(
                    self.rng.randint(int(MIN_SPAWN_DISTANCE), int(MAX_SPAWN_DISTANCE))
                )
                spawn_pos = Vector2(
                    player_position.x + math.cos(angle) * distance,
                    player_position.y + math.sin(angle) * distance,
                )
                enemy_type = self._choose_type(difficulty)
                if self.world.is_walkable(spawn_pos.x, spawn_pos.y):
                    enemy = self.spawn_enemy(spawn_pos, enemy_type)
                    enemies.append(enemy)
                    spawned.append(enemy)
                    break
        return spawned

    def clear(self) -> None:
        """Forget the cached specifications."""
        self.specs.clear()