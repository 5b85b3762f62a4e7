"""The world and player as seen by enemies: bounds, walkability, camera and damage."""

from __future__ import annotations

from dataclasses import dataclass, field

from phantomlite.types import Rectangle, Vector2

_RAY_STEP = 1.0


def _contains(rect: Rectangle, x: float, y: float) -> bool:
    return rect.x <= x < rect.x + rect.width and rect.y <= y < rect.y + rect.height


@dataclass
class Environment:
    """A rectangular world with blocking obstacles, a 2D camera and one player."""

    world_bounds: Rectangle = field(
        default_factory=lambda: Rectangle(0.0, 0.0, 1280.0, 720.0)
    )
    obstacles: list[Rectangle] = field(default_factory=list)
    screen_width: int = 1280
    screen_height: int = 720
    camera_target: Vector2 = field(default_factory=lambda: Vector2(640.0, 360.0))
    player_location: Vector2 = field(default_factory=lambda: Vector2(640.0, 360.0))
    player_health: int = 6
    player_max_health: int = 6
    last_knockback: Vector2 = field(default_factory=Vector2)
    enemy_positions: list[Vector2] = field(default_factory=list)

    def bounds(self) -> tuple[float, float, float, float]:
        """World limits as (min_x, min_y, max_x, max_y)."""
        b = self.world_bounds
        return (b.x, b.y, b.x + b.width, b.y + b.height)

    def is_walkable(self, x: float, y: float) -> bool:
        if not _contains(self.world_bounds, x, y):
            return False
        return not any(_contains(obstacle, x, y) for obstacle in self.obstacles)

    def raycast(self, origin: Vector2, direction: Vector2, max_distance: float) -> float:
        """Distance along ``direction`` to the first blocked point, capped at ``max_distance``."""
        if max_distance < 0:
            raise ValueError("max_distance must not be negative")
        unit = direction.normalized()
        if unit.x == 0 and unit.y == 0:
            return max_distance
        if not self.is_walkable(origin.x, origin.y):
            return 0.0
        distance = 0.0
        while distance < max_distance:
            distance = min(distance + _RAY_STEP, max_distance)
            if not self.is_walkable(origin.x + unit.x * distance, origin.y + unit.y * distance):
                return distance
        return max_distance

    def _screen_offset(self) -> Vector2:
        return Vector2(self.screen_width / 2, self.screen_height / 2)

    def world_to_screen(self, position: Vector2) -> Vector2:
        return position - self.camera_target + self._screen_offset()

    def screen_to_world(self, position: Vector2) -> Vector2:
        return position - self._screen_offset() + self.camera_target

    def set_camera_target(self, target: Vector2) -> None:
        self.camera_target = Vector2(target.x, target.y)

    def player_position(self) -> Vector2:
        return Vector2(self.player_location.x, self.player_location.y)

    def player_alive(self) -> bool:
        return self.player_health > 0

    def damage_player(self, amount: int, knockback: Vector2) -> bool:
        """Damage the player; returns False when the player is already dead."""
        if not self.player_alive():
            return False
        self.player_health = max(0, self.player_health - amount)
        self.last_knockback = Vector2(knockback.x, knockback.y)
        return True

    def is_enemy_at_position(self, x: float, y: float, radius: float) -> bool:
        point = Vector2(x, y)
        return any(point.distance_to(p) <= radius for p in self.enemy_positions)