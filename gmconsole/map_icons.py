"""Map icons: a small entity store and the sprites attached to map entities."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from gmconsole.game_settings import GameSettings

log = logging.getLogger(__name__)

DEFAULT_ICONS = {
    "corvette": "map_icons/corvette.png",
    "cruiser": "map_icons/cruiser.png",
    "destroyer": "map_icons/destroyer.png",
    "frigate": "map_icons/frigate.png",
    "mine": "map_icons/mine.png",
}


@dataclass
class Transform:
    """Position and scale of an entity relative to its parent."""

    translation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[float, float, float] = (1.0, 1.0, 1.0)


@dataclass(frozen=True)
class InheritedVisibility:
    """Marks an entity as taking part in visibility propagation to its children."""


@dataclass(frozen=True)
class MapIcon:
    """Marks an entity as a map icon whose size follows the game settings."""


@dataclass(frozen=True)
class Sprite:
    """An image drawn for an entity, named by its asset path."""

    image: str


class World:
    """Entities holding at most one component of each type, arranged in a hierarchy."""

    def __init__(self) -> None:
        self._next_entity = 0
        self._components: dict[int, dict[type, Any]] = {}
        self._children: dict[int, list[int]] = {}
        self._parents: dict[int, int] = {}

    def _require(self, entity: int) -> dict[type, Any]:
        try:
            return self._components[entity]
        except KeyError:
            raise KeyError(f"entity {entity} does not exist") from None

    def spawn(self) -> int:
        """Create an empty entity and return its id."""
        entity = self._next_entity
        self._next_entity += 1
        self._components[entity] = {}
        self._children[entity] = []
        return entity

    def insert(self, entity: int, component: Any) -> None:
        """Attach a component, replacing any component of the same type."""
        self._require(entity)[type(component)] = component

    def push_children(self, parent: int, children: list[int]) -> None:
        """Make the given entities children of ``parent``, in order."""
        self._require(parent)
        for child in children:
            self._require(child)
            if child == parent:
                raise ValueError(f"entity {child} cannot be its own child")
        for child in children:
            previous = self._parents.get(child)
            if previous is not None:
                self._children[previous].remove(child)
            self._parents[child] = parent
            self._children[parent].append(child)

    def children(self, entity: int) -> list[int]:
        """The children of an entity, in the order they were added."""
        self._require(entity)
        return list(self._children[entity])

    def components(self, entity: int) -> dict[type, Any]:
        """The components of an entity, keyed by type."""
        return dict(self._require(entity))

    def _with(self, component_type: type) -> Iterator[tuple[int, dict[type, Any]]]:
        for entity, components in self._components.items():
            if component_type in components:
                yield entity, components


class IconRegistry:
    """Icon names mapped to the image assets that show them."""

    def __init__(self, icons: dict[str, str] | None = None) -> None:
        self.icons: dict[str, str] = dict(icons or {})

    def load_defaults(self) -> None:
        """Add the built-in ship and mine icons."""
        self.icons.update(DEFAULT_ICONS)

    def get(self, name: str) -> str:
        """The image asset for an icon name."""
        try:
            return self.icons[name]
        except KeyError:
            raise KeyError(f"no map icon named {name!r}") from None


def add_sprite_to_entity(
    world: World,
    registry: IconRegistry,
    settings: GameSettings,
    entity: int,
    icon: str,
) -> int:
    """Give an entity a child map icon showing ``icon``; return the child."""
    image = registry.get(icon)
    world.components(entity)

    scale = settings.map_icon_base_scale
    child = world.spawn()
    world.insert(child, Sprite(image))
    world.insert(child, MapIcon())
    world.insert(child, Transform(scale=(scale, scale, scale)))
    # The parent needs visibility of its own for the icon to be shown.
    world.insert(entity, InheritedVisibility())
    world.push_children(entity, [child])
    return child


def update_icon_scale(world: World, settings: GameSettings) -> int:
    """Scale every map icon to the base icon scale; return how many were updated."""
    scale = settings.map_icon_base_scale
    updated = 0
    for _, components in world._with(MapIcon):
        transform = components.get(Transform)
        if transform is not None:
            transform.scale = (scale, scale, scale)
            updated += 1
    return updated