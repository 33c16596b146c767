# platformecs

A compact entity-component-system (ECS) engine for 2D platformer games, together
with the pieces a platformer builds on it: rectangle collisions, a text map
format, ground collision callbacks and escape-key screen switching. It has no
runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Core pieces

- `platformecs.vector.Vector2`: a mutable 2D vector with `length()`,
  `normalize()` (raises `ZeroDivisionError` for the zero vector),
  `dot_product()` and the `+`, `-`, `*` and `/` operators.
- `platformecs.rect.Rect`: an axis-aligned rectangle placed relative to a
  position, with `is_colliding()` and `handle_collision_from_rect()`.
  `replace_on_top(pos1, rect1, pos2, rect2)` moves `pos1` in place so that the
  boxes no longer overlap, correcting the axis with the smaller overlap, and
  returns a `Side`: `NONE` (no overlap), `VERTICAL` or `HORIZONTAL`.
- `platformecs.sparse_array.SparseArray`: a growable list of optional
  components indexed by `Entity` (an `int`). Empty slots, and reads past the
  end, give `None`. It offers `insert_at`, `emplace_at`, `erase`, `index_of`,
  `resize` and `copy`.
- `platformecs.registry.Registry`: spawns and kills entities (freed ids are
  reused first), keeps one `SparseArray` per registered component type, and
  runs systems in the order they were added.
- `platformecs.event.EventManager` and `EventHandler`: publish/subscribe by
  `Event` type. Every publish is appended to `EventManager.event_log`;
  `event_name()` gives the display name of the built-in event types.
- `platformecs.safe_queue.SafeQueue`: a thread-safe FIFO queue with `push`,
  `try_pop` (returns `None` when empty) and a blocking `pop`.
- `platformecs.scene_manager.SceneManager` and the abstract `Scene`: register
  scenes by name, load, unload and update the current one.
- `platformecs.errors`: the exceptions raised by the engine, all derived from
  `EngineError`.

## A small example

```python
from platformecs.registry import Registry
from platformecs.components import TransformComponent
from platformecs.vector import Vector2

registry = Registry(1024)
registry.register_component(TransformComponent)

player = registry.spawn_entity()
registry.add_component(player, TransformComponent(Vector2(0.0, 0.0), Vector2(1.0, 0.0)))

def move(transforms):
    for transform in transforms:
        if transform is not None:
            transform.position = transform.position + transform.velocity

registry.add_system(move, TransformComponent)
registry.run_systems()
print(registry.get_component(TransformComponent)[player].position)
```

## Components and prefab data

`platformecs.components` holds the component dataclasses: `TransformComponent`,
`CollisionComponent` (with `add_action` and `run_actions`), `GravityComponent`,
`HealthComponent`, `DamageComponent`, `ControllableComponent`,
`InputComponent`, `TextureComponent`, `TextComponent`, `CameraComponent` with
its `View`, `PressableComponent`, `ScoreComponent` and `NetworkIdComponent`.

`platformecs.json_conversion` turns decoded JSON objects into these components,
using the prefab field names and defaults: `transform_from_json`,
`collision_from_json`, `gravity_from_json`, `health_from_json` (health 5 when
absent), `damage_from_json`, `controllable_from_json`, `texture_from_json`,
`camera_from_json`, `text_from_json`, `rect_from_json` and `vector_from_json`.
Missing required keys raise `KeyError`. Key names such as `"Space"`, `"Left"` or
`"No_Key"` map to `platformecs.keyboard.Key` through `key_from_name`.

## Maps

`platformecs.map_loader` reads the text map format. A map starts with one
`symbol prefab` pair per line, then a line holding only `-`, then a grid of
equal-length rows. In the grid `#` is an empty cell and every other character
must be a declared symbol:

```
b box
e enemy
-
####e###
bbbbbbbb
```

`read_map(path, is_prefab_loaded, position, block_size)` and
`parse_map(text, is_prefab_loaded, position, block_size)` return `Placement`
records (prefab name, world position, row and column), row by row and left to
right. `is_prefab_loaded` is a callable that tells whether a prefab name is
known. Malformed or missing maps raise `MapError`.

## Platformer helpers

`platformecs.collision_callbacks` has `standard_gravity_collision_callback`,
which pushes an entity out of active ground colliders (layer 30) and stops its
fall when it stands on one, and `change_dir_gravity_collision_callback`, which
also reverses the entity's horizontal velocity and flips its texture rows when
it hits a wall.

`platformecs.game_state` defines `GameState` and `ScreenController`. Each frame,
`handle(state, escape_pressed, escape_released)` switches to the `"WinLose"`
scene on a win or loss, and on an Escape press moves between the main menu,
game and pause scenes; a held Escape switches only once until it is released.

## What it does not do

The package has no window, rendering, audio or keyboard polling: key states are
passed in by the caller. It does not read prefab files or create entities from
prefabs; map loading returns placements for the caller to instantiate. There is
no game loop and no command to run.