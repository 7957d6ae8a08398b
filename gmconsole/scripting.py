"""A small script host: a global function namespace, script assets and callback events."""

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

log = logging.getLogger(__name__)

SCRIPT_ASSETS = (
    "lua/library/Template.luau",
    "lua/templates/FirstTemplates.luau",
    "lua/templates/TemplateManager.luau",
    "lua/scenarios/test.lua",
)
MAIN_SETTINGS_STATIC_SCRIPT = "lua/library/mainSettings.lua"


class ScriptError(Exception):
    """Raised when a script call cannot be dispatched."""


@dataclass(frozen=True)
class CallbackEvent:
    """A callback to be delivered to every loaded script."""

    label: str
    args: tuple[Any, ...] = ()


class ScriptHost:
    """Holds the functions scripts can call, the scripts loaded and pending events."""

    def __init__(self) -> None:
        self._functions: dict[str, Callable[..., Any]] = {}
        self._events: deque[CallbackEvent] = deque()
        self.loaded_scripts: list[str] = []
        self.static_scripts: list[str] = []
        self.register("print", script_print)

    @property
    def functions(self) -> frozenset[str]:
        """Names of all functions in the global namespace."""
        return frozenset(self._functions)

    def register(self, name: str, function: Callable[..., Any]) -> None:
        """Expose a function to scripts under the given global name."""
        if not callable(function):
            raise TypeError(f"function registered as {name!r} is not callable")
        self._functions[name] = function

    def call(self, name: str, *args: Any) -> Any:
        """Call a registered global function as a script would."""
        try:
            function = self._functions[name]
        except KeyError:
            raise ScriptError(f"no function named {name!r} is registered") from None
        return function(*args)

    def load(self, path: str) -> str:
        """Record a script asset as loaded and return its handle."""
        self.loaded_scripts.append(path)
        return path

    def add_static_script(self, path: str) -> None:
        """Mark a script as static so it runs without being attached to an entity."""
        if path not in self.static_scripts:
            self.static_scripts.append(path)

    def send(self, event: CallbackEvent) -> None:
        """Queue a callback event for all scripts."""
        self._events.append(event)

    def drain_events(self) -> list[CallbackEvent]:
        """Remove and return every queued event, oldest first."""
        events = list(self._events)
        self._events.clear()
        return events


def load_script_assets(host: ScriptHost) -> list[str]:
    """Load the core script library, templates and scenario."""
    return [host.load(path) for path in SCRIPT_ASSETS]


def spawn_loaded_scripts(host: ScriptHost) -> None:
    """Register the main settings script as a static script."""
    host.add_static_script(MAIN_SETTINGS_STATIC_SCRIPT)


def script_print(value: Any) -> str:
    """Log a value printed by a script and return the logged line."""
    message = f"lua: print: {value}"
    log.info(message)
    return message