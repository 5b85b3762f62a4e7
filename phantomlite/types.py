"""Shared enemy data: geometry, enemy specs, behaviour state and live enemy instances."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
GREEN: Color = (0, 228, 48, 255)
RED: Color = (230, 41, 55, 255)


@dataclass(slots=True)
class Vector2:
    """A 2D point or direction."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __abs__(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Vector2) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction, or the zero vector."""
        length = abs(self)
        if length > 0:
            return Vector2(self.x / length, self.y / length)
        return Vector2(0.0, 0.0)


@dataclass(slots=True)
class Rectangle:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def collides(self, other: Rectangle) -> bool:
        """True when the two rectangles overlap (touching edges do not count)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


class EnemyID(Enum):
    """Enemy kinds grouped by region."""

    FOR_SLIME = auto()
    FOR_BOAR = auto()
    CAV_BAT = auto()
    DES_SCARAB = auto()
    SNW_WOLF = auto()
    RUN_DRONE = auto()


class DropType(Enum):
    HEART = auto()
    COIN = auto()
    SHARD = auto()


@dataclass(frozen=True)
class DropChance:
    """Chance, in percent, that an enemy drops an item."""

    type: DropType
    chance: int


class EnemyType(Enum):
    SLIME_SMALL = auto()
    SLIME_MEDIUM = auto()
    SLIME_LARGE = auto()
    BOAR = auto()
    BAT = auto()
    SCARAB = auto()
    WOLF = auto()
    DRONE = auto()


class BehaviorAtom(Enum):
    """Composable behaviour building blocks."""

    WANDER_RANDOM = auto()
    CHASE_PLAYER = auto()
    ATTACK_PLAYER = auto()
    WANDER_NOISE = auto()
    SEEK_TARGET = auto()
    STRAFE_TARGET = auto()
    SEPARATE_ALLIES = auto()
    AVOID_OBSTACLE = auto()
    CONTEXT_STEER = auto()
    CHARGE_DASH = auto()
    RANGED_SHOOT = auto()
    ATTACK_MELEE = auto()
    ARMOR_GATE = auto()
    DEAD_POOF = auto()


class Facing(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @classmethod
    def from_direction(cls, direction: Vector2) -> Facing:
        """Facing for a movement direction; vertical wins ties."""
        if abs(direction.x) > abs(direction.y):
            return cls.RIGHT if direction.x > 0 else cls.LEFT
        return cls.DOWN if direction.y > 0 else cls.UP


class BehaviorFlags(IntFlag):
    NONE = 0
    WANDER_NOISE = 1 << 0
    BASIC_CHASE = 1 << 1
    ADVANCED_CHASE = 1 << 2
    STRAFE_TARGET = 1 << 3
    SEPARATE_ALLIES = 1 << 4
    AVOID_OBSTACLES = 1 << 5
    CHARGE_DASH = 1 << 6
    RANGED_ATTACK = 1 << 7
    MELEE_ATTACK = 1 << 8
    ARMOR_GATE = 1 << 9


@dataclass
class EnemyStats:
    """Static description of an enemy type."""

    id: EnemyID = EnemyID.FOR_SLIME
    type: EnemyType = EnemyType.SLIME_SMALL
    name: str = ""
    size: Vector2 = field(default_factory=Vector2)
    hp: int = 0
    dmg: int = 0
    speed: float = 0.0
    behaviors: list[BehaviorAtom] = field(default_factory=list)
    drops: list[DropChance] = field(default_factory=list)
    animation_frames: int = 1
    radius: float = 0.0
    width: float = 0.0
    height: float = 0.0
    detection_radius: float = 0.0
    attack_radius: float = 0.0
    attack_cooldown: float = 0.0
    behavior_flags: BehaviorFlags = BehaviorFlags.NONE


class HitType(Enum):
    MELEE = auto()
    ARROW = auto()
    FIRE = auto()
    ICE = auto()
    PIERCE = auto()
    MAGIC = auto()


@dataclass
class Hit:
    """A single application of damage."""

    dmg: int
    knockback: Vector2 = field(default_factory=Vector2)
    type: HitType = HitType.MELEE


@dataclass
class WanderRandom:
    radius: float = 100.0
    target: Vector2 = field(default_factory=Vector2)
    has_target: bool = False
    idle_time: float = 1.0
    current_timer: float = 0.0


@dataclass
class ChasePlayer:
    detection_radius: float = 200.0
    chasing: bool = False


@dataclass
class AttackPlayer:
    attack_radius: float = 50.0
    cooldown: float = 1.2
    timer: float = 0.0
    can_attack: bool = True
    attacking: bool = False


@dataclass
class WanderNoise:
    radius: float = 100.0
    sway_speed: float = 0.5
    spawn_point: Vector2 = field(default_factory=Vector2)
    noise_offset_x: float = 0.0
    noise_offset_y: float = 0.0


@dataclass
class SeekTarget:
    preferred_dist: float = 0.0
    active: bool = False
    seek_gain: float = 1.0


@dataclass
class StrafeTarget:
    orbit_radius: float = 100.0
    direction: int = 1
    active: bool = False
    orbit_gain: float = 1.0


@dataclass
class SeparateAllies:
    desired_spacing: float = 50.0
    separation_gain: float = 1.0


@dataclass
class AvoidObstacle:
    lookahead_px: float = 100.0
    avoidance_gain: float = 2.0


class DashState(Enum):
    IDLE = auto()
    CHARGING = auto()
    DASHING = auto()
    COOLDOWN = auto()


@dataclass
class ChargeDash:
    state: DashState = DashState.IDLE
    charge_timer: float = 0.0
    charge_duration: float = 0.5
    dash_timer: float = 0.0
    dash_duration: float = 0.3
    cooldown_timer: float = 0.0
    cooldown_duration: float = 2.0
    dash_speed: float = 300.0
    dash_direction: Vector2 = field(default_factory=Vector2)


@dataclass
class RangedShoot:
    cooldown: float = 2.0
    timer: float = 0.0
    can_fire: bool = True
    projectile_speed: float = 200.0
    projectile_damage: int = 1


@dataclass
class AttackMelee:
    reach: float = 40.0
    cooldown: float = 1.0
    timer: float = 0.0
    can_attack: bool = True
    attacking: bool = False
    attack_duration: float = 0.3
    attack_timer: float = 0.0
    damage_applied: bool = False


class BehaviorResult(Enum):
    RUNNING = auto()
    COMPLETED = auto()
    FAILED = auto()


class EnemyRuntime:
    """A live enemy with a 16-ray context-steering grid."""

    NUM_RAYS = 16

    def __init__(
        self,
        spec: EnemyStats,
        position: Vector2,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.spec = spec
        self.position = Vector2(position.x, position.y)
        self.hp = spec.hp
        self.collision_rect = Rectangle(
            position.x - spec.size.x / 2,
            position.y - spec.size.y / 2,
            spec.size.x,
            spec.size.y,
        )
        self.color: Color = GREEN
        self.facing = Facing.DOWN
        self.active = True
        self.anim_timer = 0.0
        self.anim_frame = 0
        self.is_moving = False
        self.weights = [0.0] * self.NUM_RAYS

        self.wander = WanderRandom()
        self.chase = ChasePlayer(detection_radius=spec.detection_radius)
        self.attack = AttackPlayer(
            attack_radius=spec.attack_radius, cooldown=spec.attack_cooldown
        )
        self.wander_noise = WanderNoise(
            spawn_point=Vector2(position.x, position.y),
            noise_offset_x=rng.random() * 1000.0,
            noise_offset_y=rng.random() * 1000.0,
        )
        self.seek_target = SeekTarget()
        self.strafe_target = StrafeTarget()
        self.separate_allies = SeparateAllies()
        self.avoid_obstacle = AvoidObstacle()
        self.charge_dash = ChargeDash()
        self.ranged_shoot = RangedShoot()
        self.attack_melee = AttackMelee(
            reach=spec.attack_radius, cooldown=spec.attack_cooldown
        )

    def __repr__(self) -> str:
        return (
            f"EnemyRuntime(name={self.spec.name!r}, position={self.position!r}, "
            f"hp={self.hp}, active={self.active})"
        )

    def is_alive(self) -> bool:
        return self.hp > 0 and self.active

    def sync_collision_rect(self) -> None:
        """Re-centre the collision rectangle on the current position."""
        self.collision_rect.x = self.position.x - self.spec.size.x / 2
        self.collision_rect.y = self.position.y - self.spec.size.y / 2

    def on_hit(self, hit: Hit) -> None:
        """Apply damage, knockback and hit flash; deactivate when hp runs out."""
        if not self.is_alive():
            return
        self.hp -= hit.dmg
        if hit.knockback.x != 0 or hit.knockback.y != 0:
            self.position.x += hit.knockback.x * 10.0
            self.position.y += hit.knockback.y * 10.0
            self.sync_collision_rect()
        self.color = RED
        if self.hp <= 0:
            self.active = False

    def reset_weights(self) -> None:
        self.weights = [0.0] * self.NUM_RAYS

    def ray_direction(self, index: int) -> Vector2:
        """Unit vector of steering ray ``index`` (rays are 22.5 degrees apart)."""
        angle = index * (2.0 * math.pi / self.NUM_RAYS)
        return Vector2(math.cos(angle), math.sin(angle))

    def apply_steering_movement(self, speed: float, dt: float) -> None:
        """Move along the highest-weighted ray unless every weight is negative."""
        best_ray = 0
        best_weight = -999.0
        for index, weight in enumerate(self.weights):
            if weight > best_weight:
                best_weight = weight
                best_ray = index
        if best_weight < 0.0:
            self.is_moving = False
            return
        move_dir = self.ray_direction(best_ray)
        step = speed * dt
        self.position.x += move_dir.x * step
        self.position.y += move_dir.y * step
        self.sync_collision_rect()
        self.facing = Facing.from_direction(move_dir)
        self.is_moving = True


@dataclass
class EnemySpawnRequest:
    """A request from the level loader to place an enemy."""

    id: EnemyID
    position: Vector2
    respawnable: bool = False