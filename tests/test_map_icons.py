import pytest

from gmconsole.game_settings import GameSettings
from gmconsole.map_icons import (
    IconRegistry,
    InheritedVisibility,
    MapIcon,
    Sprite,
    Transform,
    World,
    add_sprite_to_entity,
    update_icon_scale,
)


@pytest.fixture
def registry():
    icons = IconRegistry()
    icons.load_defaults()
    return icons


def test_default_icons(registry):
    assert set(registry.icons) == {"corvette", "cruiser", "destroyer", "frigate", "mine"}
    assert registry.get("corvette") == "map_icons/corvette.png"


def test_unknown_icon_raises(registry):
    with pytest.raises(KeyError):
        registry.get("battleship")


def test_spawn_gives_distinct_empty_entities():
    world = World()
    first, second = world.spawn(), world.spawn()
    assert first != second
    assert world.components(first) == {}
    assert world.children(second) == []


def test_insert_replaces_component_of_same_type():
    world = World()
    entity = world.spawn()
    world.insert(entity, Sprite("a.png"))
    world.insert(entity, Sprite("b.png"))
    assert world.components(entity) == {Sprite: Sprite("b.png")}


def test_insert_into_missing_entity_raises():
    with pytest.raises(KeyError):
        World().insert(42, MapIcon())


def test_push_children_moves_child_between_parents():
    world = World()
    a, b, child = world.spawn(), world.spawn(), world.spawn()
    world.push_children(a, [child])
    world.push_children(b, [child])
    assert world.children(a) == []
    assert world.children(b) == [child]


def test_entity_cannot_be_its_own_child():
    world = World()
    entity = world.spawn()
    with pytest.raises(ValueError):
        world.push_children(entity, [entity])


def test_add_sprite_attaches_icon_child(registry):
    world = World()
    settings = GameSettings(map_icon_base_scale=0.25)
    ship = world.spawn()

    child = add_sprite_to_entity(world, registry, settings, ship, "frigate")

    assert world.children(ship) == [child]
    components = world.components(child)
    assert components[Sprite] == Sprite("map_icons/frigate.png")
    assert components[MapIcon] == MapIcon()
    assert components[Transform].scale == (0.25, 0.25, 0.25)
    assert InheritedVisibility in world.components(ship)


def test_add_sprite_with_unknown_icon_changes_nothing(registry):
    world = World()
    ship = world.spawn()
    with pytest.raises(KeyError):
        add_sprite_to_entity(world, registry, GameSettings(), ship, "nothing")
    assert world.children(ship) == []
    assert world.components(ship) == {}


def test_add_sprite_to_missing_entity_raises(registry):
    with pytest.raises(KeyError):
        add_sprite_to_entity(World(), registry, GameSettings(), 7, "mine")


def test_update_icon_scale_only_touches_icons(registry):
    world = World()
    settings = GameSettings(map_icon_base_scale=1.0)
    ships = [world.spawn(), world.spawn()]
    icons = [add_sprite_to_entity(world, registry, settings, ship, "mine") for ship in ships]
    other = world.spawn()
    world.insert(other, Transform())

    settings.update(map_icon_base_scale=3.0)
    assert update_icon_scale(world, settings) == len(icons)
    assert all(world.components(icon)[Transform].scale == (3.0, 3.0, 3.0) for icon in icons)
    assert world.components(other)[Transform].scale == (1.0, 1.0, 1.0)