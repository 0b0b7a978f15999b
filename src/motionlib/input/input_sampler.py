"""Turns polled device state into one FrameInput per tick."""

from __future__ import annotations

from ..core.math_utils import limit_length
from .frame_input import FrameInput, LookSource
from .input_commands import InputCommand
from .input_source import InputSource


class InputSampler:
    """
    Samples an InputSource once per tick.

    Controller-stick look takes priority over mouse look: the mouse delta is
    only used on ticks where the stick is exactly centred, so the two never
    fight over the camera.
    """

    def __init__(self) -> None:
        self._jump_was_pressed = False

    def sample(self, source: InputSource) -> FrameInput:
        """
        Build the FrameInput for the current tick.

        Always drains the source's buffered mouse motion.
        """
        movement = self._sample_movement(source)
        look, look_source = self._sample_look(source)

        jump_pressed = source.is_action_pressed(InputCommand.JUMP)
        jump_requested = jump_pressed and not self._jump_was_pressed
        self._jump_was_pressed = jump_pressed

        return FrameInput(
            movement_intent=movement,
            look_intent=look,
            look_source=look_source,
            jump_requested=jump_requested,
        )

    def reset(self) -> None:
        """Forget the previous jump state, e.g. after un-pausing."""

        self._jump_was_pressed = False

    def _sample_movement(self, source: InputSource):
        x = (source.get_action_strength(InputCommand.MOVE_RIGHT)
             - source.get_action_strength(InputCommand.MOVE_LEFT))
        y = (source.get_action_strength(InputCommand.MOVE_BACK)
             - source.get_action_strength(InputCommand.MOVE_FORWARD))
        # Only cap; sub-maximal analog input stays as-is for walking
        return limit_length(x, y)

    def _sample_look(self, source: InputSource):
        mouse_x, mouse_y = source.drain_mouse_delta()

        stick_x = (source.get_action_strength(InputCommand.LOOK_RIGHT)
                   - source.get_action_strength(InputCommand.LOOK_LEFT))
        stick_y = (source.get_action_strength(InputCommand.LOOK_DOWN)
                   - source.get_action_strength(InputCommand.LOOK_UP))
        stick_x, stick_y = limit_length(stick_x, stick_y)

        if stick_x != 0.0 or stick_y != 0.0:
            return (stick_x, stick_y), LookSource.CONTROLLER
        if mouse_x != 0.0 or mouse_y != 0.0:
            return (float(mouse_x), float(mouse_y)), LookSource.MOUSE
        return (0.0, 0.0), LookSource.NONE
