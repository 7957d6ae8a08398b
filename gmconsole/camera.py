"""A top-down strategy camera: keyboard and edge scrolling, and zoom around the cursor."""

import math
from dataclasses import dataclass

from gmconsole.game_settings import GameSettings

Vec2 = tuple[float, float]


@dataclass
class RtsCamera:
    """An orthographic camera centred on ``(x, y)`` showing ``scale`` world units per pixel.

    Viewport coordinates start at the top-left corner with y growing downwards.
    """

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    viewport_width: float = 1000.0
    viewport_height: float = 1000.0

    def viewport_to_world(self, cursor: Vec2) -> Vec2:
        """Convert a viewport position to world coordinates."""
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ValueError("camera viewport has no area")
        cx, cy = cursor
        return (
            self.x + (cx - self.viewport_width / 2.0) * self.scale,
            self.y + (self.viewport_height / 2.0 - cy) * self.scale,
        )


def _normalize_or_zero(direction: Vec2) -> Vec2:
    length = math.hypot(*direction)
    if length == 0.0 or not math.isfinite(length):
        return (0.0, 0.0)
    return (direction[0] / length, direction[1] / length)


def keyboard_direction(left: bool, right: bool, up: bool, down: bool) -> Vec2:
    """Direction requested by the arrow keys held down."""
    return (float(right) - float(left), float(up) - float(down))


def edge_scroll_direction(
    cursor: Vec2 | None, width: float, height: float, settings: GameSettings
) -> Vec2:
    """Direction to scroll when the cursor is near a window edge."""
    if cursor is None:
        return (0.0, 0.0)
    cx, cy = cursor
    edge_x, edge_y = settings.camera_edge_percent_x, settings.camera_edge_percent_y
    dx = dy = 0.0
    if cx < width * edge_x:
        dx -= 1.0
    if cx > width * (1.0 - edge_x):
        dx += 1.0
    if cy < height * edge_y:
        dy += 1.0
    if cy > height * (1.0 - edge_y):
        dy -= 1.0
    return (dx, dy)


def move_camera(camera: RtsCamera, direction: Vec2, settings: GameSettings, dt: float) -> None:
    """Move the camera along a direction, faster when zoomed out."""
    nx, ny = _normalize_or_zero(direction)
    step = settings.camera_move_speed * camera.scale * dt
    camera.x += nx * step
    camera.y += ny * step


def zoom_camera(
    camera: RtsCamera, scroll_y: float, cursor: Vec2 | None, settings: GameSettings
) -> None:
    """Zoom by a wheel step, keeping the world point under the cursor fixed."""
    if cursor is None:
        return
    low, high = settings.camera_min_zoom, settings.camera_max_zoom
    if low > high:
        raise ValueError(f"camera_min_zoom {low} is greater than camera_max_zoom {high}")
    try:
        before = camera.viewport_to_world(cursor)
    except ValueError:
        before = (0.0, 0.0)
    camera.scale = min(max(camera.scale - scroll_y * settings.camera_zoom_speed, low), high)
    try:
        after = camera.viewport_to_world(cursor)
    except ValueError:
        after = before
    camera.x += before[0] - after[0]
    camera.y += before[1] - after[1]