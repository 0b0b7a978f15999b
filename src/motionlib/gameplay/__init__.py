"""Gameplay controllers"""
from .motion_controller import MotionController, TickResult, step
from .replay import ReplayRecorder, ReplayRecording, replay

__all__ = [
    "MotionController",
    "TickResult",
    "step",
    "ReplayRecorder",
    "ReplayRecording",
    "replay",
]
