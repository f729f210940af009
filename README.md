# siegeengine

Building blocks for a siege-style tower defense game: you place armies around
a walled fortress and break through its walls to reach the cannons inside.
The package gives you a small scene toolkit (objects, controls, groups,
scenes), a caching resource loader on top of pygame, and the rules of the
board: map parsing, placement checks, broken walls, a cheat code and army
counts.

Install with `pip install .` (add `.[test]` for the test suite).

## Geometry — `siegeengine.point`

`Point` is a dataclass holding `x` and `y` (both `0.0` by default). It adds
and subtracts with other points, multiplies and divides by a number (on either
side for multiplication), unpacks as `x, y`, and compares by value.

```python
from siegeengine.point import Point

v = Point(3, 4)
v.magnitude()          # 5.0
v.magnitude_squared()  # 25
v.normalize()          # Point(x=0.6, y=0.8)
v.dot(Point(1, 0))     # 3
```

Normalizing a zero vector gives `Point(0, 0)`.

## Logging — `siegeengine.log`

`Logger` writes lines such as `[INFO] Loaded map 1` to a stream (standard
output unless one is passed to the constructor) and appends them to a log
file. It is off until configured. `LogType` has the members `VERBOSE`,
`DEBUGGING`, `INFO`, `WARN` and `ERROR`; verbose lines are written only when
verbose logging is on.

```python
from siegeengine.log import Logger, LogType

log = Logger()
log.configure(True, False, "log.txt")   # switches on and empties the file
log.log(LogType.INFO, "Loaded map ", 1) # arguments are joined without spaces
log.can_log(LogType.VERBOSE)            # False
```

The module also provides a shared instance, `siegeengine.log.logger`.

## Scenes, objects and controls — `siegeengine.objects`

- `GameObject(x, y, w, h, anchor_x, anchor_y)` has `visible`, `position`,
  `size` and `anchor`, and `draw(surface)` / `update(delta_time)` methods that
  do nothing by default.
- `Control` has `on_key_down`, `on_key_up`, `on_mouse_down`, `on_mouse_up`,
  `on_mouse_move` and `on_mouse_scroll`, all no-ops by default.
- `Group` is both. It passes `update` and `draw` on to its visible objects and
  every event on to all its controls, in the order they were added. Children
  may remove themselves from the group while being called.
  - `add_object`, `insert_object(obj, before)`, `add_control`,
    `add_control_object` (raises `TypeError` if the control is not also a
    `GameObject`).
  - `remove_object`, `remove_control`, `remove_control_object` (raise
    `ValueError` for something not in the group), and `clear`.
  - `objects()` and `controls()` return copies of the lists.
- `Scene` is an abstract group for one screen: subclasses implement
  `initialize`; `terminate` clears the scene; `draw` fills the surface with
  black before drawing the children.

## Resources — `siegeengine.resources`

`Resources(root="resources")` loads images from `<root>/images`, fonts from
`<root>/fonts` and sounds from `<root>/audios` with pygame, and caches them:

- `get_bitmap(name)` or `get_bitmap(name, width, height)` for a scaled copy,
  cached separately per size;
- `get_font(name, font_size)`, cached per size;
- `get_sample(name)`.

A file that cannot be loaded raises `ResourceError`. `release_unused()` drops
cached entries that nothing outside the cache still references (entries that
cannot be weakly referenced are kept). The loaders can be replaced through the
keyword arguments `bitmap_loader`, `bitmap_scaler`, `font_loader` and
`sample_loader`, and log output goes through a `Logger` passed as `log`. A
shared instance is available as `siegeengine.resources.resources`.

## Board rules — `siegeengine.playmap`

- `parse_map(text, width=24, height=12)` reads digits `0` (floor), `1` (wall),
  `2` (cannon), `3` (second cannon type) and `4` (trap); whitespace is ignored.
  Any other character or a wrong number of tiles raises `MapError`
  ("Map data is corrupted."), and so does a fortress wall without exactly four
  corners ("Corner size is wrong."). It returns a `TileMap`.
- `TileMap` holds `tiles` (indexable as `tile_map[x, y]`, giving a `TileType`),
  `corners` and `broken_walls` (lists of points per `Side`).
  - `is_occupied(x, y)`: true off the board, on walls, cannons and traps, and
    anywhere inside the fortress rectangle.
  - `wall_side(x, y)`: the `Side` (`LEFT`, `UP`, `RIGHT`, `DOWN`) a tile lies
    on, corners excluded, or `None`.
  - `break_wall(x, y)`: records the tile under its side, turns it into floor
    and returns the side. `clear_tile(x, y)` only turns it into floor.
- `CheatCode` watches key codes; `press(key)` returns `True` when the sequence
  up, up, down, down, left, right, enter (pygame key codes) has just been
  completed. Another sequence can be passed to the constructor.
- `ArmyStock(amounts, total)` counts up to six army kinds: `reduce(id)`,
  `amount(id)`, `set_amount(id, n)`, and `is_exhausted(deployed)`, which is
  true when nothing is deployed and no kind among the first `total` other than
  the ice army (id 3) has any left. Ids out of range raise `IndexError`.

## Effects and widgets — `siegeengine.mechanics`

- `shockwave_scale(time, light_span, shockwave_span, min_scale, max_scale)`
  interpolates the scale geometrically from `min_scale` at time 0 to
  `max_scale` at the end of both spans.
- `light_phase(time, light_span, frame_count)` gives the index of the light
  frame shown at a time.
- `SliderModel(x, width, on_value_changed)` is the value logic of a horizontal
  slider: `set_value` moves the knob and calls the callback; `drag_to(mx)`
  follows the mouse while `down` is set and the mouse is between the ends.

## What this package does not do

There is no game to run: the package has no window, main loop or scene
switching, no command, and no sprites, armies, cannons, bullets or sounds
being played. It provides the pieces above for a game built with pygame to use.