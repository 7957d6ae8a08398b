"""The game-master console application: wiring, frame update and the window loop."""

import argparse
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

import pygame

from gmconsole.camera import (
    RtsCamera,
    edge_scroll_direction,
    keyboard_direction,
    move_camera,
    zoom_camera,
)
from gmconsole.components import SensorTrace, SubsystemSensor
from gmconsole.database import GameDatabase, register_database_functions
from gmconsole.game_settings import GameSettings, load_settings_script
from gmconsole.gm_actions import (
    DragState,
    GMActions,
    GMCurrentAction,
    discover_gm_scripts,
    drag_gizmo,
    register_gm_functions,
    track_drag,
)
from gmconsole.gm_ui import GmPanel
from gmconsole.map_grid import GridShape, build_grid
from gmconsole.map_icons import IconRegistry, MapIcon, World, add_sprite_to_entity, update_icon_scale
from gmconsole.scripting import (
    CallbackEvent,
    ScriptHost,
    load_script_assets,
    spawn_loaded_scripts,
)

log = logging.getLogger(__name__)

WINDOW_SIZE = (1000, 1000)
REFLECTED_TYPES = (SensorTrace, SubsystemSensor, MapIcon)

Vec2 = tuple[float, float]


def lua_path(assets_dir: str | Path) -> str:
    """The module search path for scripts under ``assets_dir``, with forward slashes."""
    return f"{Path(assets_dir).absolute().as_posix()}/lua/?.luau"


@dataclass
class FrameInput:
    """Input seen during one frame; the ``just_*`` flags and scroll reset after each update."""

    cursor: Vec2 | None = None
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    scroll: list[float] = field(default_factory=list)
    mouse_just_pressed: bool = False
    mouse_pressed: bool = False
    mouse_just_released: bool = False
    ui_wants_pointer: bool = False

    def end_frame(self) -> None:
        """Forget the events that only last one frame."""
        self.scroll.clear()
        self.mouse_just_pressed = False
        self.mouse_just_released = False


class GameApp:
    """All game state, the script functions it exposes and its per-frame update."""

    def __init__(self, assets_dir: str | Path = "assets") -> None:
        self.assets_dir = Path(assets_dir)
        self.host = ScriptHost()
        self.settings = GameSettings()
        self.database = GameDatabase()
        self.actions = GMActions()
        self.current_action = GMCurrentAction()
        self.drag_state = DragState()
        self.camera = RtsCamera(viewport_width=WINDOW_SIZE[0], viewport_height=WINDOW_SIZE[1])
        self.world = World()
        self.icons = IconRegistry()
        self.panel = GmPanel(self.database, self.actions, self.current_action)
        self.input = FrameInput()
        self.grid: GridShape | None = None
        self._settings_revision: int | None = None

        register_database_functions(self.host, self.database)
        register_gm_functions(self.host, self.actions)
        self.host.register("add_sprite_to_entity", self._add_sprite)

    def _add_sprite(self, entity: int, icon: str) -> int:
        return add_sprite_to_entity(self.world, self.icons, self.settings, entity, icon)

    def startup(self) -> None:
        """Load icons and scripts and build the map grid."""
        self.icons.load_defaults()
        load_script_assets(self.host)
        spawn_loaded_scripts(self.host)
        load_settings_script(self.host)
        try:
            discover_gm_scripts(self.host, self.assets_dir)
        except OSError:
            pass  # already logged; the console runs without GM action scripts
        self.grid = build_grid(self.settings)
        self._settings_revision = self.settings.revision

    def update(self, dt: float) -> list[CallbackEvent]:
        """Run one frame and return the script callbacks it produced."""
        inp = self.input
        self.panel.select_default_tab()

        move_camera(
            self.camera,
            keyboard_direction(inp.left, inp.right, inp.up, inp.down),
            self.settings,
            dt,
        )
        for step in inp.scroll:
            zoom_camera(self.camera, step, inp.cursor, self.settings)
        edge = edge_scroll_direction(
            inp.cursor, self.camera.viewport_width, self.camera.viewport_height, self.settings
        )
        move_camera(self.camera, edge, self.settings, dt)

        cursor_world = None if inp.cursor is None else self.camera.viewport_to_world(inp.cursor)
        track_drag(
            self.drag_state,
            self.current_action,
            self.host,
            cursor_world,
            inp.mouse_just_pressed,
            inp.mouse_pressed,
            inp.mouse_just_released,
            inp.ui_wants_pointer,
        )

        if self.settings.revision != self._settings_revision:
            self.grid = build_grid(self.settings)
            update_icon_scale(self.world, self.settings)
            self._settings_revision = self.settings.revision

        events = self.host.drain_events()
        inp.end_frame()
        return events


_BUTTON = 60
_SPACING = 4
_MARGIN = 10
_TAB_HEIGHT = 22

_Button = tuple[pygame.Rect, str, bool, Callable[[], object]]


def _rgba(color: tuple[float, float, float, float]) -> tuple[int, int, int, int]:
    return tuple(round(channel * 255) for channel in color)  # type: ignore[return-value]


def _to_screen(camera: RtsCamera, point: Vec2) -> tuple[int, int]:
    x, y = point
    return (
        round((x - camera.x) / camera.scale + camera.viewport_width / 2.0),
        round(camera.viewport_height / 2.0 - (y - camera.y) / camera.scale),
    )


def _panel_layout(app: GameApp, height: int) -> tuple[pygame.Rect, list[_Button]]:
    panel = app.panel
    template_grid = panel.template_grid()
    command_grid = panel.command_grid()
    rows = len(template_grid) + len(command_grid)
    top = height - _MARGIN - rows * (_BUTTON + _SPACING) - _TAB_HEIGHT - _SPACING
    background = pygame.Rect(
        _MARGIN, top, 3 * (_BUTTON + _SPACING), height - _MARGIN - top
    )

    buttons: list[_Button] = []
    x = _MARGIN
    for name, selected in panel.tabs():
        rect = pygame.Rect(x, top, _BUTTON, _TAB_HEIGHT)
        buttons.append((rect, name, selected, partial(panel.click_tab, name)))
        x += _BUTTON + _SPACING

    current = app.current_action
    y = top + _TAB_HEIGHT + _SPACING
    sections = (
        (panel.click_template, template_grid, current.template_name),
        (panel.click_command, command_grid, current.command),
    )
    for click, grid, chosen in sections:
        for row, labels in enumerate(grid):
            for col, label in enumerate(labels):
                if label is not None:
                    rect = pygame.Rect(_MARGIN + col * (_BUTTON + _SPACING), y, _BUTTON, _BUTTON)
                    buttons.append((rect, label, label == chosen, partial(click, row, col)))
            y += _BUTTON + _SPACING
    return background, buttons


def _process_events(app: GameApp, background: pygame.Rect, buttons: list[_Button]) -> bool:
    inp = app.input
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEWHEEL:
            inp.scroll.append(float(event.y))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            inp.mouse_just_pressed = True
            for rect, _, _, click in buttons:
                if rect.collidepoint(event.pos):
                    click()
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            inp.mouse_just_released = True

    keys = pygame.key.get_pressed()
    inp.left, inp.right = bool(keys[pygame.K_LEFT]), bool(keys[pygame.K_RIGHT])
    inp.up, inp.down = bool(keys[pygame.K_UP]), bool(keys[pygame.K_DOWN])
    inp.mouse_pressed = bool(pygame.mouse.get_pressed()[0])
    inp.cursor = tuple(map(float, pygame.mouse.get_pos())) if pygame.mouse.get_focused() else None
    inp.ui_wants_pointer = inp.cursor is not None and background.collidepoint(inp.cursor)
    return True


def _render(
    app: GameApp,
    screen: pygame.Surface,
    font: pygame.font.Font,
    background: pygame.Rect,
    buttons: list[_Button],
) -> None:
    screen.fill((0, 0, 0))
    camera = app.camera
    if camera.scale > 0:
        if app.grid is not None:
            overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
            color = _rgba(app.grid.color)
            width = max(1, round(app.grid.stroke_width))
            for start, end in app.grid.world_segments():
                pygame.draw.line(
                    overlay, color, _to_screen(camera, start), _to_screen(camera, end), width
                )
            screen.blit(overlay, (0, 0))
        gizmo = drag_gizmo(app.drag_state)
        if gizmo is not None:
            color = _rgba(gizmo.color)
            center = _to_screen(camera, gizmo.center)
            radius = round(gizmo.radius / camera.scale)
            if radius > 0:
                pygame.draw.circle(screen, color, center, radius, 1)
            pygame.draw.line(
                screen, color, _to_screen(camera, gizmo.line[0]), _to_screen(camera, gizmo.line[1])
            )

    pygame.draw.rect(screen, (30, 30, 30), background)
    for rect, label, selected, _ in buttons:
        pygame.draw.rect(screen, (90, 90, 140) if selected else (60, 60, 60), rect)
        text = font.render(label, True, (255, 255, 255))
        screen.blit(text, text.get_rect(center=rect.center))


def main(argv: list[str] | None = None) -> int:
    """Open the console window and run until it is closed."""
    parser = argparse.ArgumentParser(description="Game-master map console.")
    parser.add_argument("--assets", default="assets", help="directory holding the game assets")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    os.environ["LUA_PATH"] = lua_path(args.assets)

    app = GameApp(args.assets)
    app.startup()

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("GM console")
        font = pygame.font.Font(None, 16)
        clock = pygame.time.Clock()
        frames = 0
        while args.frames is None or frames < args.frames:
            dt = clock.tick() / 1000.0
            background, buttons = _panel_layout(app, screen.get_height())
            if not _process_events(app, background, buttons):
                break
            app.update(dt)
            background, buttons = _panel_layout(app, screen.get_height())
            _render(app, screen, font, background, buttons)
            pygame.display.flip()
            frames += 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())