"""
Input Commands

Abstract actions the character controller reacts to, independent of the
device that produced them.
"""

from enum import Enum, auto


class InputCommand(Enum):
    """
    All input commands the controller understands.

    Commands represent actions, not keys. A keyboard key, a gamepad stick
    direction or a replay can all drive the same command.
    """

    # ========================================================================
    # Movement (polled axis strengths)
    # ========================================================================
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_FORWARD = auto()
    MOVE_BACK = auto()

    # ========================================================================
    # Controller Look (polled axis strengths)
    # ========================================================================
    LOOK_LEFT = auto()
    LOOK_RIGHT = auto()
    LOOK_UP = auto()
    LOOK_DOWN = auto()

    # ========================================================================
    # Actions
    # ========================================================================
    JUMP = auto()

    # Camera arm
    CAMERA_ZOOM_IN = auto()
    CAMERA_ZOOM_OUT = auto()

    # ========================================================================
    # System
    # ========================================================================
    SYSTEM_TOGGLE_MOUSE = auto()


class InputType(Enum):
    """How a command is consumed."""

    AXIS = auto()     # Strength in [0, 1], polled every tick
    BUTTON = auto()   # Held state, polled every tick (edges derived by the sampler)
    INSTANT = auto()  # Handled once on press


COMMAND_TYPES = {
    InputCommand.MOVE_LEFT: InputType.AXIS,
    InputCommand.MOVE_RIGHT: InputType.AXIS,
    InputCommand.MOVE_FORWARD: InputType.AXIS,
    InputCommand.MOVE_BACK: InputType.AXIS,
    InputCommand.LOOK_LEFT: InputType.AXIS,
    InputCommand.LOOK_RIGHT: InputType.AXIS,
    InputCommand.LOOK_UP: InputType.AXIS,
    InputCommand.LOOK_DOWN: InputType.AXIS,
    InputCommand.JUMP: InputType.BUTTON,
    InputCommand.CAMERA_ZOOM_IN: InputType.INSTANT,
    InputCommand.CAMERA_ZOOM_OUT: InputType.INSTANT,
    InputCommand.SYSTEM_TOGGLE_MOUSE: InputType.INSTANT,
}


def get_command_type(command: InputCommand) -> InputType:
    """
    Get the input type for a command.

    Args:
        command: The input command

    Returns:
        InputType for this command, defaults to INSTANT if not defined
    """
    return COMMAND_TYPES.get(command, InputType.INSTANT)
