"""Core controller components"""
from .camera_rig import CameraRig, SpringArmRig
from .motion_state import MotionState
from .node_ref import MissingNodeError, NodeRef
from .scene_node import SceneNode

__all__ = [
    "CameraRig",
    "SpringArmRig",
    "MotionState",
    "MissingNodeError",
    "NodeRef",
    "SceneNode",
]
