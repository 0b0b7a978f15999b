"""
MotionLib - Character and Camera Controller

Per-tick kinematic character controller with camera-relative movement,
a pitch-clamped spring-arm camera rig and combined mouse/gamepad look.
"""

# Configuration
from .config.settings import *
from .config import ControllerConfig, ControllerConfigError, load_controller_config

# Core
from .core import CameraRig, SpringArmRig, MotionState, MissingNodeError, NodeRef, SceneNode

# Input
from .input import (
    FrameInput,
    LookSource,
    InputCommand,
    InputType,
    InputManager,
    InputSampler,
    InputSource,
    KeyBindings,
)

# Physics boundary
from .physics import FloorPlaneResolver, GroundContact, GroundQuery, MotionResolver, PassthroughResolver

# Gameplay
from .gameplay import MotionController, TickResult, step, ReplayRecorder, ReplayRecording, replay

__version__ = "0.1.0"
__all__ = [
    # Config (constants exported via *)
    "ControllerConfig",
    "ControllerConfigError",
    "load_controller_config",
    # Core
    "CameraRig",
    "SpringArmRig",
    "MotionState",
    "MissingNodeError",
    "NodeRef",
    "SceneNode",
    # Input
    "FrameInput",
    "LookSource",
    "InputCommand",
    "InputType",
    "InputManager",
    "InputSampler",
    "InputSource",
    "KeyBindings",
    # Physics
    "FloorPlaneResolver",
    "GroundContact",
    "GroundQuery",
    "MotionResolver",
    "PassthroughResolver",
    # Gameplay
    "MotionController",
    "TickResult",
    "step",
    "ReplayRecorder",
    "ReplayRecording",
    "replay",
]
