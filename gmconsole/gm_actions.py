"""Game-master actions: registered commands, mouse drags and the callback they fire."""

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from gmconsole.scripting import CallbackEvent, ScriptHost

log = logging.getLogger(__name__)

ON_GM_ACTION = "on_gm_action"
GM_SCRIPT_DIR = Path("lua") / "GMActions"
GM_SCRIPT_EXTENSIONS = frozenset({".lua", ".luau"})
GIZMO_COLOR = (1.0, 1.0, 1.0, 1.0)

Vec2 = tuple[float, float]


@dataclass
class GMCurrentAction:
    """The template and command the game master has currently selected."""

    template_category: str | None = None
    template_name: str | None = None
    command: str | None = None


@dataclass
class GMActions:
    """Names of the commands scripts have registered, in registration order."""

    command_list: list[str]

    def __init__(self, command_list: list[str] | None = None) -> None:
        self.command_list = list(command_list or [])

    def register(self, name: object) -> bool:
        """Register a command name; return False if it was already registered."""
        if not isinstance(name, str):
            raise TypeError(
                f"Gm function should be registered by string, received {type(name).__name__}"
            )
        if name in self.command_list:
            log.info('gm_action "%s" already registered', name)
            return False
        log.info('Registered gm_action "%s"', name)
        self.command_list.append(name)
        return True


@dataclass
class DragState:
    """Whether a drag is in progress and where it started and currently is, in world space."""

    dragging: bool = False
    start_pos: Vec2 | None = None
    current_pos: Vec2 | None = None

    def reset(self) -> None:
        """Forget any drag in progress."""
        self.dragging = False
        self.start_pos = None
        self.current_pos = None


@dataclass(frozen=True)
class DragGizmo:
    """A circle around the drag start through the cursor, and a line from start to cursor."""

    center: Vec2
    radius: float
    line: tuple[Vec2, Vec2]
    color: tuple[float, float, float, float] = GIZMO_COLOR


def send_on_gm_action(
    current_action: GMCurrentAction,
    host: ScriptHost,
    pos: Vec2,
    angle: float,
    size: float,
) -> CallbackEvent | None:
    """Send ``on_gm_action`` to all scripts if a command and a template are selected."""
    command = current_action.command
    if command is None:
        return None
    category, name = current_action.template_category, current_action.template_name
    if category is None or name is None:
        return None
    x, y = pos
    event = CallbackEvent(
        ON_GM_ACTION,
        (command, name, float(x), float(y), float(angle), float(size)),
    )
    host.send(event)
    return event


def track_drag(
    drag_state: DragState,
    current_action: GMCurrentAction,
    host: ScriptHost,
    cursor_world: Vec2 | None,
    just_pressed: bool,
    pressed: bool,
    just_released: bool,
    ui_wants_pointer: bool,
) -> CallbackEvent | None:
    """Advance the drag for one frame of left-button input.

    ``cursor_world`` is the cursor in world space, or None when the cursor is
    outside the window. Releasing a drag sends ``on_gm_action`` with the start
    position, the drag direction and the drag length; the event is returned.
    """
    if cursor_world is None:
        return None

    if just_pressed:
        if ui_wants_pointer:
            return None
        drag_state.dragging = True
        drag_state.start_pos = cursor_world
        drag_state.current_pos = cursor_world
        return None

    if pressed and drag_state.dragging:
        drag_state.current_pos = cursor_world
        return None

    if just_released:
        event = None
        start, stop = drag_state.start_pos, drag_state.current_pos
        if start is not None and stop is not None:
            dx, dy = start[0] - stop[0], start[1] - stop[1]
            angle = math.atan2(dy, dx) + math.pi / 2.0
            event = send_on_gm_action(current_action, host, start, angle, math.hypot(dx, dy))
        drag_state.reset()
        return event

    return None


def drag_gizmo(drag_state: DragState) -> DragGizmo | None:
    """Describe the gizmo to draw for the current drag, or None if nothing is dragged."""
    if not drag_state.dragging:
        return None
    start, current = drag_state.start_pos, drag_state.current_pos
    if start is None or current is None:
        return None
    return DragGizmo(center=start, radius=math.dist(start, current), line=(start, current))


def discover_gm_scripts(host: ScriptHost, assets_dir: str | Path) -> list[str]:
    """Load every ``.lua``/``.luau`` script in the GM action folder as a static script.

    Returns the script paths relative to ``assets_dir``. Raises OSError if the
    folder cannot be read.
    """
    assets = Path(assets_dir)
    script_dir = assets / GM_SCRIPT_DIR
    try:
        entries = sorted(script_dir.iterdir())
    except OSError:
        log.error("Could not read script directory: %s", script_dir)
        raise

    found = []
    for path in entries:
        if path.suffix not in GM_SCRIPT_EXTENSIONS:
            continue
        relative = path.relative_to(assets).as_posix()
        host.load(relative)
        host.add_static_script(relative)
        found.append(relative)
    return found


def register_gm_functions(host: ScriptHost, actions: GMActions) -> None:
    """Expose ``register_gm_function`` to scripts."""
    host.register("register_gm_function", actions.register)