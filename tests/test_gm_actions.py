import math

import pytest

from gmconsole.gm_actions import (
    ON_GM_ACTION,
    DragState,
    GMActions,
    GMCurrentAction,
    discover_gm_scripts,
    drag_gizmo,
    register_gm_functions,
    send_on_gm_action,
    track_drag,
)
from gmconsole.scripting import ScriptHost


@pytest.fixture
def host():
    return ScriptHost()


@pytest.fixture
def action():
    return GMCurrentAction(template_category="ships", template_name="frigate", command="spawn")


def _frame(state, action, host, cursor, *, just_pressed=False, pressed=False,
           just_released=False, ui=False):
    return track_drag(state, action, host, cursor, just_pressed, pressed, just_released, ui)


def test_register_adds_once():
    actions = GMActions()
    assert actions.register("spawn") is True
    assert actions.register("spawn") is False
    assert actions.command_list == ["spawn"]


def test_register_keeps_order():
    actions = GMActions()
    for name in ("spawn", "delete", "move"):
        actions.register(name)
    assert actions.command_list == ["spawn", "delete", "move"]


def test_register_rejects_non_string():
    actions = GMActions()
    with pytest.raises(TypeError):
        actions.register(3)
    assert actions.command_list == []


def test_register_through_script_host(host):
    actions = GMActions()
    register_gm_functions(host, actions)
    host.call("register_gm_function", "spawn")
    host.call("register_gm_function", "spawn")
    assert actions.command_list == ["spawn"]
    with pytest.raises(TypeError):
        host.call("register_gm_function", 1.5)


def test_send_without_command_sends_nothing(host):
    current = GMCurrentAction(template_category="ships", template_name="frigate")
    assert send_on_gm_action(current, host, (1.0, 2.0), 0.5, 3.0) is None
    assert host.drain_events() == []


def test_send_without_template_sends_nothing(host):
    current = GMCurrentAction(command="spawn", template_category="ships")
    assert send_on_gm_action(current, host, (1.0, 2.0), 0.5, 3.0) is None
    assert host.drain_events() == []


def test_send_with_full_selection(host, action):
    event = send_on_gm_action(action, host, (1.0, 2.0), 0.5, 3.0)
    assert event.label == ON_GM_ACTION
    assert event.args == ("spawn", "frigate", 1.0, 2.0, 0.5, 3.0)
    assert host.drain_events() == [event]


def test_full_drag_sends_event_from_start(host, action):
    state = DragState()
    _frame(state, action, host, (1.0, 1.0), just_pressed=True)
    assert state.dragging and state.start_pos == (1.0, 1.0)
    _frame(state, action, host, (4.0, 5.0), pressed=True)
    assert state.current_pos == (4.0, 5.0)
    event = _frame(state, action, host, (4.0, 5.0), just_released=True)
    assert event.args[:4] == ("spawn", "frigate", 1.0, 1.0)
    assert math.isclose(event.args[5], math.dist((1.0, 1.0), (4.0, 5.0)))
    assert state == DragState()
    assert host.drain_events() == [event]


def test_drag_downward_points_half_turn(host, action):
    state = DragState()
    _frame(state, action, host, (0.0, 0.0), just_pressed=True)
    _frame(state, action, host, (0.0, -10.0), pressed=True)
    event = _frame(state, action, host, (0.0, -10.0), just_released=True)
    assert math.isclose(event.args[4], math.pi)


def test_ui_capturing_pointer_blocks_drag(host, action):
    state = DragState()
    _frame(state, action, host, (1.0, 1.0), just_pressed=True, ui=True)
    assert state == DragState()
    assert _frame(state, action, host, (2.0, 2.0), just_released=True) is None
    assert host.drain_events() == []


def test_no_cursor_ignores_input(host, action):
    state = DragState(dragging=True, start_pos=(0.0, 0.0), current_pos=(1.0, 0.0))
    assert _frame(state, action, host, None, just_released=True) is None
    assert state.dragging is True
    assert host.drain_events() == []


def test_pressed_without_drag_does_not_move(host, action):
    state = DragState()
    _frame(state, action, host, (3.0, 3.0), pressed=True)
    assert state.current_pos is None


def test_release_without_command_resets_without_event(host):
    state = DragState()
    current = GMCurrentAction(template_category="ships", template_name="frigate")
    _frame(state, current, host, (0.0, 0.0), just_pressed=True)
    assert _frame(state, current, host, (2.0, 0.0), just_released=True) is None
    assert state == DragState()
    assert host.drain_events() == []


def test_gizmo_absent_when_not_dragging():
    assert drag_gizmo(DragState()) is None
    assert drag_gizmo(DragState(dragging=True, start_pos=(0.0, 0.0))) is None


def test_gizmo_radius_is_drag_distance():
    state = DragState(dragging=True, start_pos=(1.0, 2.0), current_pos=(4.0, 6.0))
    gizmo = drag_gizmo(state)
    assert gizmo.center == (1.0, 2.0)
    assert math.isclose(gizmo.radius, math.dist((1.0, 2.0), (4.0, 6.0)))
    assert gizmo.line == ((1.0, 2.0), (4.0, 6.0))


def test_discover_loads_lua_scripts_only(tmp_path, host):
    script_dir = tmp_path / "lua" / "GMActions"
    script_dir.mkdir(parents=True)
    for name in ("spawn.lua", "move.luau", "notes.txt", "README"):
        (script_dir / name).write_text("-- script\n")
    found = discover_gm_scripts(host, tmp_path)
    assert found == ["lua/GMActions/move.luau", "lua/GMActions/spawn.lua"]
    assert host.loaded_scripts == found
    assert host.static_scripts == found


def test_discover_missing_directory_raises(tmp_path, host):
    with pytest.raises(FileNotFoundError):
        discover_gm_scripts(host, tmp_path)
    assert host.loaded_scripts == []