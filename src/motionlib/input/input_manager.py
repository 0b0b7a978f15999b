"""
Input Manager

Collects raw host input events (keys, mouse motion, gamepad axes) and
exposes them as a polled InputSource for the sampler.
"""

import logging
from typing import Callable, Dict, Optional, Set, Tuple

from ..core.math_utils import clamp
from .input_commands import InputCommand, InputType, get_command_type
from .key_bindings import KeyBindings

logger = logging.getLogger(__name__)


class InputManager:
    """
    Event-fed input source.

    Responsibilities:
    - Track held keys and translate them to commands via KeyBindings
    - Track analog axis strengths reported by a gamepad
    - Accumulate mouse motion while the mouse is captured
    - Dispatch INSTANT commands to registered handlers on press

    Usage:
        manager = InputManager(KeyBindings(window.keys))
        manager.on_key_press(window.keys.W)
        manager.get_action_strength(InputCommand.MOVE_FORWARD)  # 1.0
    """

    def __init__(self, key_bindings: Optional[KeyBindings] = None):
        """
        Initialize input manager.

        Args:
            key_bindings: Key → command mapping (None: only analog/mouse input)
        """
        self.key_bindings = key_bindings

        # Command → Handler callbacks (INSTANT commands only)
        self.handlers: Dict[InputCommand, Callable[[], None]] = {}

        # Currently pressed keys
        self.pressed_keys: Set[int] = set()

        # Analog strengths reported by a gamepad, per command
        self.axis_strengths: Dict[InputCommand, float] = {}

        # Gamepad buttons currently held
        self.held_buttons: Set[InputCommand] = set()

        self.mouse_captured = True

        # Mouse delta accumulator, drained once per tick
        self.mouse_delta_x = 0.0
        self.mouse_delta_y = 0.0

    def register_handler(self, command: InputCommand, handler: Callable[[], None]):
        """
        Register a handler for an INSTANT command.

        Example:
            manager.register_handler(InputCommand.SYSTEM_TOGGLE_MOUSE, manager.toggle_mouse_capture)
        """
        self.handlers[command] = handler

    def unregister_handler(self, command: InputCommand):
        self.handlers.pop(command, None)

    # ------------------------------------------------------------------
    # Raw events
    # ------------------------------------------------------------------
    def on_key_press(self, key: int):
        """
        Handle key press event.

        Args:
            key: Host key code
        """
        self.pressed_keys.add(key)

        command = self._command_for_key(key)
        if command is None:
            return

        if get_command_type(command) == InputType.INSTANT:
            handler = self.handlers.get(command)
            if handler is not None:
                handler()

    def on_key_release(self, key: int):
        self.pressed_keys.discard(key)

    def on_mouse_move(self, dx: float, dy: float):
        """
        Handle relative mouse motion.

        Args:
            dx: Delta X (positive = right)
            dy: Delta Y (positive = down)
        """
        if not self.mouse_captured:
            return

        self.mouse_delta_x += dx
        self.mouse_delta_y += dy

    def set_axis_strength(self, command: InputCommand, strength: float):
        """
        Report an analog axis value, e.g. one half of a gamepad stick.

        Args:
            command: AXIS command the stick direction drives
            strength: Deflection, clamped to [0, 1]
        """
        if get_command_type(command) != InputType.AXIS:
            raise ValueError(f"{command.name} is not an axis command")
        self.axis_strengths[command] = clamp(float(strength), 0.0, 1.0)

    def set_button(self, command: InputCommand, pressed: bool):
        """
        Report a gamepad button state.

        Args:
            command: BUTTON command the button drives
            pressed: True while held
        """
        if get_command_type(command) != InputType.BUTTON:
            raise ValueError(f"{command.name} is not a button command")
        if pressed:
            self.held_buttons.add(command)
        else:
            self.held_buttons.discard(command)

    # ------------------------------------------------------------------
    # InputSource
    # ------------------------------------------------------------------
    def get_action_strength(self, command: InputCommand) -> float:
        digital = 1.0 if self._is_bound_key_held(command) else 0.0
        return max(digital, self.axis_strengths.get(command, 0.0))

    def is_action_pressed(self, command: InputCommand) -> bool:
        if command in self.held_buttons:
            return True
        return self.get_action_strength(command) > 0.0

    def drain_mouse_delta(self) -> Tuple[float, float]:
        delta = (self.mouse_delta_x, self.mouse_delta_y)
        self.mouse_delta_x = 0.0
        self.mouse_delta_y = 0.0
        return delta

    # ------------------------------------------------------------------
    # Mouse capture
    # ------------------------------------------------------------------
    def toggle_mouse_capture(self) -> bool:
        """
        Toggle mouse capture state.

        Returns:
            New mouse capture state (True if captured)
        """
        self.set_mouse_capture(not self.mouse_captured)
        return self.mouse_captured

    def set_mouse_capture(self, captured: bool):
        self.mouse_captured = captured
        self.mouse_delta_x = 0.0
        self.mouse_delta_y = 0.0
        logger.debug("Mouse capture %s", "enabled" if captured else "released")

    def clear_all_input(self):
        """
        Clear all input state (pressed keys, axes, buttons, mouse deltas).

        Useful when changing contexts to prevent stuck keys.
        """
        self.pressed_keys.clear()
        self.axis_strengths.clear()
        self.held_buttons.clear()
        self.mouse_delta_x = 0.0
        self.mouse_delta_y = 0.0

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _command_for_key(self, key: int) -> Optional[InputCommand]:
        if self.key_bindings is None:
            return None
        return self.key_bindings.get_command(key)

    def _is_bound_key_held(self, command: InputCommand) -> bool:
        if self.key_bindings is None:
            return False
        return any(key in self.pressed_keys for key in self.key_bindings.get_keys_for_command(command))
