"""
Input System

Turns raw device events into one FrameInput per tick.
"""

from .frame_input import FrameInput, LookSource
from .input_commands import InputCommand, InputType
from .input_manager import InputManager
from .input_sampler import InputSampler
from .input_source import InputSource
from .key_bindings import KeyBindings

__all__ = [
    "FrameInput",
    "LookSource",
    "InputCommand",
    "InputType",
    "InputManager",
    "InputSampler",
    "InputSource",
    "KeyBindings",
]
