# gmconsole

A game-master console for a top-down 2D space map. It opens a 1000×1000
pygame window. The window shows a black map, a faint reference grid, and a
panel in the lower-left corner. In the panel the game master picks a template
and a command, then drags on the map to act.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Running the console

```
gmconsole [--assets DIR] [--frames N]
```

- `--assets DIR` sets the directory that holds the game assets. The default is
  `assets`.
- `--frames N` stops after `N` frames. Without it, the console runs until the
  window is closed.

On start-up the console does the following:

- It sets `LUA_PATH` to `<absolute assets dir>/lua/?.luau`.
- It records the core script assets, the static settings script and
  `lua/mainSettings.luau` as loaded.
- It registers every `.lua` and `.luau` file in `<assets>/lua/GMActions` as a
  static script. If that folder is missing, it logs an error and carries on.
- It builds the map grid from the current `GameSettings`.

### Controls

- **Arrow keys** move the camera.
- **Cursor near a window edge** scrolls the camera. The edge width is set by
  `camera_edge_percent_x` and `camera_edge_percent_y`.
- **Mouse wheel** zooms around the cursor. The zoom is clamped to
  `camera_min_zoom`..`camera_max_zoom`.
- **Left-drag on the map** draws a circle and a line from the drag start. On
  release it queues an `on_gm_action` callback if both a template and a
  command are selected. The callback carries `(command, template name, x, y,
  angle, length)`.
- **Left-click in the panel** does one of the following:
  - On a tab, it selects that template library.
  - On a template or command button, it makes that the current choice.

The panel shows up to six templates of the selected library and up to six
registered commands, each laid out in a 2×3 grid.

## Library use

`gmconsole.scripting.ScriptHost` holds the global functions that scripts may
call. The functions are reached with `call(name, *args)`. The host also queues
`CallbackEvent`s, which `drain_events()` returns. `print` is always
registered.

```python
from gmconsole.scripting import ScriptHost
from gmconsole.database import GameDatabase, register_database_functions
from gmconsole.gm_actions import GMActions, register_gm_functions

host = ScriptHost()
database = GameDatabase()
actions = GMActions()
register_database_functions(host, database)
register_gm_functions(host, actions)

host.call("add_template_to_database", "ships", {"name": "frigate"})
host.call("register_gm_function", "spawn")
```

Other modules:

- `gmconsole.game_settings` — `GameSettings`. Its `update(**kwargs)` method
  rejects unknown names and bumps `revision` so changes can be detected.
- `gmconsole.map_grid` — `build_grid(settings)`, which returns a `GridShape`
  of vertical and horizontal segments plus a centring offset.
- `gmconsole.camera` — provides the following:
  - `RtsCamera` and its `viewport_to_world`.
  - `keyboard_direction`, `edge_scroll_direction`, `move_camera` and
    `zoom_camera`.
- `gmconsole.gm_actions` — provides the following:
  - `DragState` and `track_drag`, which advances a drag one frame at a time.
  - `drag_gizmo`.
  - `send_on_gm_action`.
  - `discover_gm_scripts`.
- `gmconsole.map_icons` — provides the following:
  - A small entity store, `World`.
  - `IconRegistry`, with the corvette, cruiser, destroyer, frigate and mine
    icons.
  - `add_sprite_to_entity`, which attaches a child map icon scaled by
    `map_icon_base_scale`.
  - `update_icon_scale`.
- `gmconsole.gm_ui` — `GmPanel`, the panel's tabs, grids and click handling.
- `gmconsole.app` — `GameApp`, which wires everything together. It has
  `startup()` and `update(dt)`. `update(dt)` returns the callbacks produced
  that frame.

## What it does not do

- **Scripts are not executed.** `ScriptHost` only records script paths and
  dispatches calls to the Python functions registered with it. No Lua
  interpreter is included. The callbacks `on_gm_action` and `print` reach no
  script unless you drain and handle them yourself.
- **Settings are not filled in.** Because no settings script runs, every
  `GameSettings` value starts at zero. With zero values the grid is a single
  point, the camera does not move and the edges do not scroll. Set values
  with `GameSettings.update` to get a working map.
- **Map icons are not drawn.** `add_sprite_to_entity` records the sprite in
  the `World`, but the window does not render icon images.
- **Nothing is saved.** Templates, commands and settings live only in memory.