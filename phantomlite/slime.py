"""The Forest Slime enemy system: spawning, updating, hitting and debug toggles."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from phantomlite.environment import Environment
from phantomlite.slime_behaviors import DebugSettings
from phantomlite.spawning import Spawner
from phantomlite.state import EnemyManager
from phantomlite.types import (
    EnemyRuntime,
    EnemyStats,
    EnemyType,
    Facing,
    Hit,
    HitType,
    Rectangle,
    Vector2,
)

DEMO_DIFFICULTY = 10.0


@dataclass
class LegacyEnemy:
    """Older flat enemy record kept for compatibility."""

    position: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)
    health: float = 0.0
    max_health: float = 0.0
    damage: float = 0.0
    move_speed: float = 0.0
    hit_timer: float = 0.0
    is_active: bool = True
    is_visible: bool = True
    is_hit: bool = False
    facing: Facing = Facing.DOWN
    type: EnemyType = EnemyType.SLIME_SMALL


class SlimeSystem:
    """Owns the enemy list, the spawner and the debug flags."""

    def __init__(
        self, env: Environment | None = None, rng: random.Random | None = None
    ) -> None:
        self.env = env if env is not None else Environment()
        self.rng = rng if rng is not None else random.Random()
        self.debug = DebugSettings()
        self.manager = EnemyManager(self.env)
        self.spawner = Spawner(self.env, rng=self.rng)

    @property
    def enemies(self) -> list[EnemyRuntime]:
        return self.manager.enemies

    def update(self, dt: float) -> None:
        self.manager.update(dt)

    def spawn_slime(self, position: Vector2) -> EnemyRuntime:
        """Add a small slime at ``position`` and return it."""
        slime = self.spawner.spawn_enemy(position, EnemyType.SLIME_SMALL)
        self.manager.add(slime)
        return slime

    def spawn_demo_slimes(self, count: int) -> None:
        """Fill up to ``count`` enemies with slimes placed around the player."""
        enemies = list(self.manager.enemies)
        self.spawner.spawn_around_player(
            self.env.player_position(), DEMO_DIFFICULTY, enemies, count
        )
        self.manager.clear()
        for enemy in enemies:
            self.manager.add(enemy)

    def hit_enemy_at(self, hit_rect: Rectangle, hit: Hit) -> bool:
        return self.manager.apply_damage_at(hit_rect, hit)

    def check_player_collision(self, position: Vector2, radius: float) -> int | None:
        """Index of the first active enemy touching the circle, or None."""
        for index, enemy in enumerate(self.manager.enemies):
            if not enemy.active:
                continue
            if position.distance_to(enemy.position) < radius + enemy.spec.radius:
                return index
        return None

    def take_damage(self, enemy_id: int, damage: int) -> None:
        """Damage the enemy at ``enemy_id``; unknown ids are ignored."""
        if not 0 <= enemy_id < len(self.manager.enemies):
            return
        self.manager.enemies[enemy_id].on_hit(Hit(dmg=damage, type=HitType.MELEE))

    def toggle_debug_info(self) -> bool:
        return self.debug.toggle_debug()

    def toggle_steering_debug(self) -> bool:
        return self.debug.toggle_steering()

    def set_debug(self, enabled: bool) -> None:
        self.debug.show_debug = enabled

    def is_debug_enabled(self) -> bool:
        return self.debug.show_debug

    def is_steering_debug_enabled(self) -> bool:
        return self.debug.show_steering

    def enemy_count(self) -> int:
        return self.manager.count()

    def slime_spec(self) -> EnemyStats:
        return self.manager.spec

    def cleanup(self) -> None:
        """Drop all enemies and the cached spawn specifications."""
        self.manager.clear()
        self.spawner.clear()