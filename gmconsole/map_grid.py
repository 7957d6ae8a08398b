"""Geometry of the background map grid."""

from dataclasses import dataclass

from gmconsole.game_settings import GameSettings

Point = tuple[float, float]
Segment = tuple[Point, Point]

GRID_STROKE_COLOR = (1.0, 1.0, 1.0, 0.2)
GRID_STROKE_WIDTH = 1.0


@dataclass(frozen=True)
class GridShape:
    """Line segments of the grid in local space, and the offset that centres it."""

    segments: tuple[Segment, ...]
    offset: tuple[float, float, float]
    color: tuple[float, float, float, float] = GRID_STROKE_COLOR
    stroke_width: float = GRID_STROKE_WIDTH

    def world_segments(self) -> list[Segment]:
        """Segments translated by the grid offset."""
        dx, dy, _ = self.offset
        return [((x0 + dx, y0 + dy), (x1 + dx, y1 + dy)) for (x0, y0), (x1, y1) in self.segments]


def build_grid(settings: GameSettings) -> GridShape:
    """Build vertical then horizontal grid lines for the given settings."""
    cell = settings.grid_cell_size
    width = settings.grid_width * cell
    height = settings.grid_height * cell

    vertical = [((x * cell, 0.0), (x * cell, height)) for x in range(settings.grid_width + 1)]
    horizontal = [((0.0, y * cell), (width, y * cell)) for y in range(settings.grid_height + 1)]

    return GridShape(
        segments=tuple(vertical + horizontal),
        offset=(-width / 2.0, -height / 2.0, 0.0),
    )