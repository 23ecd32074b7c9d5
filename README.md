# finderbot

Building blocks for an EV3 robot that finds its way across a playing field.
The package is pure Python and has no dependencies.

## Modules

- `finderbot.config`: robot-wide settings, among them the `DevicePort` enum
  (`INPUT_1`–`INPUT_4`, `OUTPUT_A`–`OUTPUT_D`), the gearbox positions and the
  field size (`FIELD_WIDTH = 2000`, `FIELD_HEIGHT = 1000`).
- `finderbot.obstacles`: obstacles are line segments. `segments_intersect`
  tests two closed segments for a shared point. `ObstacleManager` holds
  obstacles (`add_obstacle`, `clear`, `len()`), and `is_colliding(origin,
  destination)` tells whether a move touches any of them.
- `finderbot.astar`: `Generator` runs an A* search on an integer grid bounded
  by the world size (by default the field size). Diagonal moves are on by
  default and can be switched off with `set_diagonal_movement`. The heuristic
  can be swapped for `manhattan` (the default), `euclidean` or `octagonal`.
  `find_path(source, target)` returns the path target first, ending at the
  source. `add_collision`, `remove_collision` and `clear_collisions` keep a
  list of points in `walls`; the search itself checks only the world bounds
  and the obstacle manager.
- `finderbot.smoothing`: `smooth_path(path, obstacles)` drops every waypoint
  that can be skipped without crossing an obstacle, and always keeps the first
  and last points. `SmoothPath` holds a path with its obstacles and returns
  the result from `smoothed()`.
- `finderbot.compute`: `PathComputer` combines the two steps.
  `astar_path(start, end)` searches, and `smooth_path(path)` runs the
  smoothing pass twice. `handle_message("x0,y0;x1,y1")` answers a text
  request with the smoothed path from start to end as
  `"x1,y1;...;xn,yn"` (six decimals), or `"invalid"` if the request cannot be
  parsed. `parse_request` and `format_response` are available on their own.
- `finderbot.bitmaps`: `ImageFormat`, a 1-bit image with `row_bits` and
  `is_set`, and `glyph_for(char)`, which returns the 16×16 glyph for a letter
  `a`–`z`.
- `finderbot.display`: `Screen(width, height)` is an in-memory grid of 32-bit
  pixels (`draw_pixel`, `pixel`, `clear`, `fill_screen`). A pixel drawn off
  the screen is ignored and a warning is logged. `Window` is an abstract,
  named screen area. Subclasses implement `update()`. It draws lines,
  rectangles, quads, circles, triangles, bitmaps and lower-case text, in
  `DisplayColor` colours. A line or rectangle whose start or end lies outside
  the window raises `OutOfBoundsError`. Text is always drawn black on white,
  and characters outside `a`–`z` are skipped.
- `finderbot.fakesys`: `FakeSys(base_path)` builds a fake sysfs tree in a
  directory, with four sensors and four motors (the `Device` enum) and their
  default attribute files. It can set sensor values and modes, write motor
  attributes, read any attribute, unplug devices, and play out a pending
  `run-to-abs-pos` command with `simulate_motor_movement`. It also works as a
  context manager: the tree is created on entry and removed on exit.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Example

```python
from finderbot.obstacles import ObstacleManager
from finderbot.compute import PathComputer

obstacles = ObstacleManager([])
obstacles.add_obstacle((0.5, 0.5), (1.5, 1.5))

computer = PathComputer(obstacles)
print(computer.handle_message("0,2;2,1"))
```

```python
from finderbot.fakesys import Device, FakeSys

with FakeSys("./fakesys") as fake:
    fake.set_sensor_value(Device.GYRO, 100, 0)
    print(fake.read_attribute(Device.GYRO, "value0"))   # 100
```

## What it does not do

- It does not talk to real hardware. There are no motor or sensor drivers, and
  the display draws only into memory, not to a framebuffer device.
- It runs no network service. Path requests are answered in-process through
  `PathComputer.handle_message`.
- It provides no command-line program.

## Tests

```
pytest
```