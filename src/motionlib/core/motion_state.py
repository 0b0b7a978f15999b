"""Mutable per-character motion state threaded through each tick."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from pyrr import Vector3

from .math_utils import clamp, copy_vector
from .node_ref import NodeRef
from .scene_node import SceneNode


@dataclass(slots=True)
class MotionState:
    """
    Everything the controller carries from one tick to the next.

    ``camera_pitch`` is only written through ``set_camera_pitch`` so it can
    never leave the configured limits. A state built directly is not
    clamped; ``from_rig`` and ``replay`` clamp the starting pitch.
    """

    velocity: Vector3 = field(default_factory=lambda: Vector3([0.0, 0.0, 0.0]))
    camera_pitch: float = 0.0
    body_yaw: float = 0.0
    camera_yaw: float = 0.0

    def set_camera_pitch(self, pitch: float, pitch_min: float, pitch_max: float) -> None:
        self.camera_pitch = clamp(pitch, pitch_min, pitch_max)

    def copy(self) -> "MotionState":
        return MotionState(
            velocity=copy_vector(self.velocity),
            camera_pitch=self.camera_pitch,
            body_yaw=self.body_yaw,
            camera_yaw=self.camera_yaw,
        )

    def snapshot(self) -> Tuple[float, ...]:
        """Plain-float view used for logging and replay comparison."""

        return (
            float(self.velocity.x),
            float(self.velocity.y),
            float(self.velocity.z),
            self.camera_pitch,
            self.body_yaw,
            self.camera_yaw,
        )

    @classmethod
    def from_rig(
        cls,
        camera_pivot: NodeRef[SceneNode],
        camera_arm: NodeRef[SceneNode],
        body_pivot: NodeRef[SceneNode],
        pitch_min: float,
        pitch_max: float,
    ) -> "MotionState":
        """
        Build the initial state from the scene's starting pose.

        Velocity starts at zero. The arm's pitch rotation is the negated
        camera pitch, so it is negated back here.
        """
        state = cls()
        state.camera_yaw = camera_pivot.if_present(lambda node: float(node.rotation.y)) or 0.0
        pitch_node = camera_arm if camera_arm.is_present else camera_pivot
        pitch = pitch_node.if_present(lambda node: -float(node.rotation.x)) or 0.0
        state.set_camera_pitch(pitch, pitch_min, pitch_max)
        state.body_yaw = body_pivot.if_present(lambda node: float(node.rotation.y)) or 0.0
        return state
