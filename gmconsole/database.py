"""Template libraries that scripts fill in."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from gmconsole.scripting import ScriptHost

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Template:
    """A named template that can be placed on the map."""

    name: str


@dataclass
class GameDatabase:
    """Templates grouped by library name, then by template name."""

    templates: dict[str, dict[str, Template]] = field(default_factory=dict)

    def add_template(self, library: Any, template: Any) -> Template:
        """Add or replace a template described by a mapping with a ``name`` entry."""
        if not isinstance(library, str):
            raise TypeError(
                f"template_library should be a string, got {type(library).__name__}"
            )
        if not isinstance(template, Mapping):
            raise TypeError(f"template should be a mapping, got {type(template).__name__}")
        if "name" not in template:
            raise KeyError("template has no 'name'")
        name = template["name"]
        if not isinstance(name, str):
            raise TypeError(f"template.name should be a string, got {type(name).__name__}")

        entries = self.templates.setdefault(library, {})
        if name in entries:
            log.info('Overwriting "%s" in template library "%s"', name, library)
        else:
            log.info('Adding "%s" in template library "%s"', name, library)
        created = Template(name=name)
        entries[name] = created
        return created


def register_database_functions(host: ScriptHost, database: GameDatabase) -> None:
    """Expose ``add_template_to_database`` to scripts."""
    host.register("add_template_to_database", database.add_template)