# phantomlite

The enemy logic of a small top-down action RPG, as plain Python with no
graphics attached. It has enemy data types, a 16-ray context-steering system,
slime behaviours, spawning, and an enemy manager that runs the per-frame
update. There are no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `phantomlite.types` holds the core data types:
  - `Vector2` has `distance_to` and `normalized`. `Rectangle` has `collides`, which counts only a true overlap, not touching edges.
  - The enums are `EnemyID`, `DropType`, `EnemyType`, `BehaviorAtom`, `Facing`, `HitType`, `DashState` and `BehaviorResult`, plus the `BehaviorFlags` bit flags.
  - `EnemyStats` is an enemy spec, `Hit` is one hit, and `EnemySpawnRequest` asks for an enemy to be spawned.
  - Each behaviour keeps its state in its own record: `WanderNoise`, `SeekTarget`, `StrafeTarget`, `ChargeDash`, `AttackMelee` and others.
  - `EnemyRuntime` is a live enemy. It has `on_hit`, `is_alive`, `reset_weights`, `ray_direction` and `apply_steering_movement`.
- `phantomlite.environment` provides `Environment`. This is a rectangular world with obstacle rectangles, a camera, and a simple stand-in for the player.
  - World queries: `bounds`, `is_walkable` and `raycast`.
  - Camera: `world_to_screen`, `screen_to_world` and `set_camera_target`.
  - Player: `player_position`, `damage_player` and `is_enemy_at_position`.
- `phantomlite.steering` holds the shared behaviour atoms.
  - The atoms are `wander_noise`, `seek_target`, `strafe_target`, `separate_allies`, `avoid_obstacles`, `charge_dash`, `ranged_shoot` and `attack_melee`.
  - The weight helpers are `apply_seek_weights`, `apply_strafe_weights`, `apply_separation_weights` and `apply_obstacle_avoidance_weights`. Their results are acted on by `apply_context_steering`.
  - `steering_rays` returns the data needed to draw the weights for debugging.
- `phantomlite.slime_behaviors` holds behaviours specific to slimes: `wander_random`, `chase_player`, `chase_player_smart`, `enhanced_obstacle_avoidance`, `attack_player` and `attack_player_with_adapter`. `DebugSettings` holds the debug flags, and each of its toggles returns the new state.
- `phantomlite.spawning` holds spawning.
  - `default_slime_specs()` returns the small, medium and large slime specs.
  - `Spawner.spawn_enemy` creates one enemy. An unknown type gives a small slime.
  - `Spawner.spawn_around_player` places enemies 300 to 800 px from the player, only on walkable ground.
- `phantomlite.state` holds `EnemyManager`, which keeps the enemy list and applies hits. `forest_slime_spec()` returns the Forest Slime spec: 2 hp and 1 damage.
  - Each frame, `EnemyManager.update` runs melee attacks, chasing, wandering, obstacle avoidance and separation for every enemy, as its behaviour flags allow.
  - It then clamps the enemy to the world bounds and advances its animation.
- `phantomlite.slime` holds `SlimeSystem`, the high-level entry point. `LegacyEnemy` is a flat enemy record.

## Example

```python
from phantomlite.environment import Environment
from phantomlite.slime import SlimeSystem
from phantomlite.types import Hit, HitType, Rectangle, Vector2

env = Environment()
slimes = SlimeSystem(env)

slimes.spawn_slime(Vector2(100.0, 100.0))
slimes.update(1 / 60)

hit = Hit(dmg=1, knockback=Vector2(10.0, 0.0), type=HitType.MELEE)
if slimes.hit_enemy_at(Rectangle(84.0, 84.0, 32.0, 32.0), hit):
    print("hit!", slimes.enemy_count())
```

### Notes on `SlimeSystem`

- **Specs.** `spawn_slime` creates a "Small Slime" from the spawner's specs. `slime_spec()` returns the Forest Slime spec held by the manager.
- **Enemy count.** `enemy_count()` counts every stored enemy, dead ones included. Call `manager.remove_inactive()` to drop dead enemies.
- **Player collision.** `check_player_collision` returns the index of the first active enemy that touches the given circle, or `None` if there is none.
- **Damage by index.** `take_damage` ignores indices that are out of range.

## What it does not do

- **No game loop.** There is no window, rendering, input handling or executable command. The caller drives everything by calling `update` and the other functions.
- **No drawing.** For debug drawing, `steering_rays` returns line segments and colours, and the caller draws them.
- **No real player.** There is no player movement or control. `Environment` only stores a player position and health for the enemies to act on.
- **No projectiles.** `ranged_shoot` only manages its cooldown and logs the shot.
- **No drops.** Drop chances are stored in the specs, but nothing is ever dropped.