"""The game-master panel: template tabs, a template grid and a command grid."""

import logging

from gmconsole.database import GameDatabase, Template
from gmconsole.gm_actions import GMActions, GMCurrentAction

log = logging.getLogger(__name__)

GRID_ROWS = 2
GRID_COLUMNS = 3

Grid = list[list[str | None]]


def _layout(labels: list[str]) -> Grid:
    cells: list[str | None] = list(labels[: GRID_ROWS * GRID_COLUMNS])
    cells += [None] * (GRID_ROWS * GRID_COLUMNS - len(cells))
    return [cells[row * GRID_COLUMNS : (row + 1) * GRID_COLUMNS] for row in range(GRID_ROWS)]


def _cell_index(row: int, col: int) -> int:
    if not (0 <= row < GRID_ROWS and 0 <= col < GRID_COLUMNS):
        raise IndexError(f"cell ({row}, {col}) is outside the {GRID_ROWS}x{GRID_COLUMNS} grid")
    return row * GRID_COLUMNS + col


class GmPanel:
    """State and layout of the game-master panel; clicks update the current action."""

    def __init__(
        self,
        database: GameDatabase,
        actions: GMActions,
        current_action: GMCurrentAction,
    ) -> None:
        self.database = database
        self.actions = actions
        self.current_action = current_action
        self.selected_tab: str | None = None

    def select_default_tab(self) -> str | None:
        """Select the first template library if no tab is selected yet."""
        if self.selected_tab is None:
            self.selected_tab = next(iter(self.database.templates), None)
        return self.selected_tab

    def tabs(self) -> list[tuple[str, bool]]:
        """Every template library with whether its tab is selected."""
        return [(name, name == self.selected_tab) for name in self.database.templates]

    def _templates(self) -> list[Template] | None:
        if self.selected_tab is None:
            return None
        library = self.database.templates.get(self.selected_tab)
        return None if library is None else list(library.values())

    def template_grid(self) -> Grid:
        """Template names of the selected tab laid out in rows; empty if no tab is shown."""
        templates = self._templates()
        if templates is None:
            return []
        return _layout([template.name for template in templates])

    def command_grid(self) -> Grid:
        """Registered command names laid out in rows."""
        return _layout(self.actions.command_list)

    def click_tab(self, name: str) -> None:
        """Select the tab of a template library."""
        if name not in self.database.templates:
            raise KeyError(f"no template library named {name!r}")
        self.selected_tab = name

    def click_template(self, row: int, col: int) -> Template | None:
        """Choose the template in a cell; an empty cell does nothing."""
        index = _cell_index(row, col)
        templates = self._templates()
        if templates is None or index >= len(templates):
            return None
        template = templates[index]
        self.current_action.template_category = self.selected_tab
        self.current_action.template_name = template.name
        log.info("%s %s", self.selected_tab, template.name)
        return template

    def click_command(self, row: int, col: int) -> str | None:
        """Choose the command in a cell; an empty cell does nothing."""
        index = _cell_index(row, col)
        commands = self.actions.command_list
        if index >= len(commands):
            return None
        self.current_action.command = commands[index]
        return commands[index]