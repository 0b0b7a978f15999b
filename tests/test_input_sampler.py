"""Tests for InputSampler and InputManager"""

import math
from types import SimpleNamespace

import pytest

from src.motionlib.input.frame_input import FrameInput, LookSource
from src.motionlib.input.input_commands import InputCommand
from src.motionlib.input.input_manager import InputManager
from src.motionlib.input.input_sampler import InputSampler
from src.motionlib.input.input_source import InputSource
from src.motionlib.input.key_bindings import KeyBindings


KEYS = SimpleNamespace(
    W=87, A=65, S=83, D=68, SPACE=32,
    LEFT=263, RIGHT=262, UP=265, DOWN=264,
    EQUAL=61, MINUS=45, ESCAPE=256,
)


@pytest.fixture
def manager(tmp_path):
    return InputManager(KeyBindings(KEYS, config_path=tmp_path / "keybindings.json"))


def test_manager_is_an_input_source(manager):
    """InputManager satisfies the polling interface"""
    assert isinstance(manager, InputSource)


def test_idle_input():
    """Nothing held produces a neutral frame"""
    frame = InputSampler().sample(InputManager())
    assert frame == FrameInput.idle()


def test_digital_movement_axes(manager):
    """Right and back are positive x and y"""
    manager.on_key_press(KEYS.D)
    manager.on_key_press(KEYS.S)
    frame = InputSampler().sample(manager)
    x, y = frame.movement_intent
    assert x > 0.0 and y > 0.0


def test_forward_is_negative_y(manager):
    """Forward input maps to -y"""
    manager.on_key_press(KEYS.W)
    frame = InputSampler().sample(manager)
    assert frame.movement_intent == (0.0, -1.0)


def test_diagonal_movement_capped_at_unit_length(manager):
    """Two full axes combine to exactly unit length"""
    manager.on_key_press(KEYS.W)
    manager.on_key_press(KEYS.D)
    x, y = InputSampler().sample(manager).movement_intent
    assert math.hypot(x, y) == pytest.approx(1.0)


def test_analog_movement_not_rescaled_up():
    """Partial stick deflection keeps its magnitude"""
    manager = InputManager()
    manager.set_axis_strength(InputCommand.MOVE_RIGHT, 0.4)
    frame = InputSampler().sample(manager)
    assert frame.movement_intent == pytest.approx((0.4, 0.0))


def test_opposite_keys_cancel(manager):
    """Left and right together produce no strafe"""
    manager.on_key_press(KEYS.A)
    manager.on_key_press(KEYS.D)
    assert InputSampler().sample(manager).movement_intent == (0.0, 0.0)


def test_mouse_look_used_when_stick_centred():
    """Mouse deltas accumulated during the tick become the look intent"""
    manager = InputManager()
    manager.on_mouse_move(3.0, -1.0)
    manager.on_mouse_move(2.0, 0.5)
    frame = InputSampler().sample(manager)
    assert frame.look_source is LookSource.MOUSE
    assert frame.look_intent == pytest.approx((5.0, -0.5))


def test_controller_look_takes_priority_over_mouse():
    """A non-zero stick wins over simultaneous mouse motion"""
    manager = InputManager()
    manager.on_mouse_move(40.0, 40.0)
    manager.set_axis_strength(InputCommand.LOOK_LEFT, 0.5)
    frame = InputSampler().sample(manager)
    assert frame.look_source is LookSource.CONTROLLER
    assert frame.look_intent == pytest.approx((-0.5, 0.0))


def test_mouse_buffer_drained_when_stick_wins():
    """Mouse motion ignored in favour of the stick does not leak into the next tick"""
    manager = InputManager()
    sampler = InputSampler()
    manager.on_mouse_move(40.0, 40.0)
    manager.set_axis_strength(InputCommand.LOOK_UP, 1.0)
    sampler.sample(manager)

    manager.set_axis_strength(InputCommand.LOOK_UP, 0.0)
    frame = sampler.sample(manager)
    assert frame.look_source is LookSource.NONE
    assert frame.look_intent == (0.0, 0.0)


def test_controller_look_capped_at_unit_length():
    """Diagonal stick look is limited to unit length"""
    manager = InputManager()
    manager.set_axis_strength(InputCommand.LOOK_RIGHT, 1.0)
    manager.set_axis_strength(InputCommand.LOOK_DOWN, 1.0)
    x, y = InputSampler().sample(manager).look_intent
    assert math.hypot(x, y) == pytest.approx(1.0)
    assert x > 0.0 and y > 0.0


def test_jump_only_on_press_edge(manager):
    """Holding jump requests it once; releasing and pressing again re-arms it"""
    sampler = InputSampler()
    manager.on_key_press(KEYS.SPACE)
    assert sampler.sample(manager).jump_requested is True
    assert sampler.sample(manager).jump_requested is False
    assert sampler.sample(manager).jump_requested is False

    manager.on_key_release(KEYS.SPACE)
    assert sampler.sample(manager).jump_requested is False
    manager.on_key_press(KEYS.SPACE)
    assert sampler.sample(manager).jump_requested is True


def test_gamepad_jump_button():
    """Gamepad buttons feed the same edge detection"""
    manager = InputManager()
    sampler = InputSampler()
    manager.set_button(InputCommand.JUMP, True)
    assert sampler.sample(manager).jump_requested is True
    assert sampler.sample(manager).jump_requested is False


def test_sampler_reset_rearms_jump():
    """After reset a still-held button counts as a fresh press"""
    manager = InputManager()
    sampler = InputSampler()
    manager.set_button(InputCommand.JUMP, True)
    sampler.sample(manager)
    sampler.reset()
    assert sampler.sample(manager).jump_requested is True


def test_mouse_ignored_when_not_captured():
    """Released mouse motion is not accumulated"""
    manager = InputManager()
    manager.set_mouse_capture(False)
    manager.on_mouse_move(10.0, 10.0)
    assert manager.drain_mouse_delta() == (0.0, 0.0)


def test_toggle_mouse_handler_runs_on_press(manager):
    """INSTANT commands dispatch to their handler on key press"""
    manager.register_handler(InputCommand.SYSTEM_TOGGLE_MOUSE, manager.toggle_mouse_capture)
    manager.on_key_press(KEYS.ESCAPE)
    assert manager.mouse_captured is False


def test_axis_strength_clamped():
    """Axis strengths are clamped to [0, 1]"""
    manager = InputManager()
    manager.set_axis_strength(InputCommand.MOVE_FORWARD, 3.0)
    assert manager.get_action_strength(InputCommand.MOVE_FORWARD) == 1.0


def test_axis_strength_rejects_button_command():
    """Only AXIS commands accept analog strengths"""
    with pytest.raises(ValueError):
        InputManager().set_axis_strength(InputCommand.JUMP, 1.0)


def test_clear_all_input(manager):
    """Clearing drops keys, axes, buttons and mouse motion"""
    manager.on_key_press(KEYS.W)
    manager.set_axis_strength(InputCommand.LOOK_LEFT, 1.0)
    manager.set_button(InputCommand.JUMP, True)
    manager.on_mouse_move(1.0, 1.0)
    manager.clear_all_input()
    assert InputSampler().sample(manager) == FrameInput.idle()


def test_frame_input_is_immutable():
    """FrameInput cannot be modified once built"""
    frame = FrameInput()
    with pytest.raises(AttributeError):
        frame.jump_requested = True
