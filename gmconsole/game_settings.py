"""Tunable game settings shared by the map, camera and icons."""

from dataclasses import dataclass, field, fields
from typing import Any

from gmconsole.scripting import ScriptHost

MAIN_SETTINGS_SCRIPT = "lua/mainSettings.luau"


@dataclass
class GameSettings:
    """Settings for the grid, map icons and camera.

    ``revision`` grows on every update so that consumers can tell when the
    settings changed since they last looked.
    """

    grid_cell_size: float = 0.0
    grid_width: int = 0
    grid_height: int = 0
    map_icon_base_scale: float = 0.0
    camera_move_speed: float = 0.0
    camera_zoom_speed: float = 0.0
    camera_min_zoom: float = 0.0
    camera_max_zoom: float = 0.0
    camera_edge_percent_x: float = 0.0
    camera_edge_percent_y: float = 0.0
    revision: int = field(default=0, compare=False)

    def update(self, **kwargs: Any) -> None:
        """Set the given settings and mark the settings as changed."""
        types = {f.name: f.type for f in fields(self) if f.name != "revision"}
        unknown = sorted(set(kwargs) - set(types))
        if unknown:
            raise TypeError(f"unknown game settings: {', '.join(unknown)}")
        for name, value in kwargs.items():
            setattr(self, name, types[name](value))
        self.revision += 1


def load_settings_script(host: ScriptHost) -> str:
    """Load the script that fills in the game settings."""
    return host.load(MAIN_SETTINGS_SCRIPT)