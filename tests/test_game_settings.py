import pytest

from gmconsole.game_settings import GameSettings, load_settings_script
from gmconsole.scripting import ScriptHost


def test_defaults_are_zero():
    settings = GameSettings()
    assert settings.grid_width == 0
    assert settings.camera_max_zoom == 0.0
    assert settings.revision == 0


def test_update_sets_values_and_bumps_revision():
    settings = GameSettings()
    settings.update(grid_width=10, grid_cell_size=2.5)
    assert settings.grid_width == 10
    assert settings.grid_cell_size == 2.5
    assert settings.revision == 1
    settings.update(camera_move_speed=3.0)
    assert settings.revision == 2


def test_update_coerces_field_types():
    settings = GameSettings()
    settings.update(grid_height=4.0, map_icon_base_scale=1)
    assert settings.grid_height == 4
    assert type(settings.grid_height) is int
    assert settings.map_icon_base_scale == 1.0
    assert type(settings.map_icon_base_scale) is float
    assert settings.revision == 1


def test_update_unknown_setting_raises_and_keeps_revision():
    settings = GameSettings()
    with pytest.raises(TypeError):
        settings.update(not_a_setting=1)
    assert settings.revision == 0


def test_revision_cannot_be_updated_directly():
    settings = GameSettings()
    with pytest.raises(TypeError):
        settings.update(revision=5)


def test_equality_ignores_revision():
    a = GameSettings()
    b = GameSettings()
    b.update()
    assert a == b


def test_load_settings_script_loads_main_settings():
    host = ScriptHost()
    assert load_settings_script(host) == "lua/mainSettings.luau"
    assert host.loaded_scripts == ["lua/mainSettings.luau"]