"""Camera rig implementations driven by the motion controller."""

from __future__ import annotations

from abc import ABC, abstractmethod
import math
from typing import Optional

from pyrr import Vector3

from ..config.settings import (
    CAMERA_ARM_LENGTH,
    CAMERA_ARM_MAX_LENGTH,
    CAMERA_ARM_MIN_LENGTH,
    CAMERA_ARM_SPRING_STIFFNESS,
)
from .math_utils import clamp, rotate_y
from .node_ref import NodeRef
from .scene_node import SceneNode


class CameraRig(ABC):
    """Abstract base class for camera control rigs."""

    def __init__(self) -> None:
        self.enabled = True

    def enable(self) -> None:
        """Enable the rig."""

        self.enabled = True

    def disable(self) -> None:
        """Disable the rig."""

        self.enabled = False

    @property
    @abstractmethod
    def is_attached(self) -> bool:
        """Whether the rig has a scene node to drive."""

    @abstractmethod
    def apply_orientation(self, yaw: float, pitch: float) -> None:
        """Write the controller's camera yaw/pitch to the scene."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Update the rig state."""


class SpringArmRig(CameraRig):
    """
    Yaw pivot with a pitched spring arm, orbiting the character.

    The pivot turns about the world up axis; the arm pitches with the
    negated camera pitch. When only the pivot exists it takes both
    rotations. Arm length eases toward the desired length each tick.
    The eased length is written to the camera node along the arm's +Z axis.
    """

    def __init__(
        self,
        pivot: NodeRef[SceneNode],
        arm: NodeRef[SceneNode],
        length: float = CAMERA_ARM_LENGTH,
        spring: float = CAMERA_ARM_SPRING_STIFFNESS,
        min_length: float = CAMERA_ARM_MIN_LENGTH,
        max_length: float = CAMERA_ARM_MAX_LENGTH,
        camera: Optional[NodeRef[SceneNode]] = None,
    ) -> None:
        super().__init__()
        self.pivot = pivot
        self.arm = arm if arm.is_present else pivot
        self.camera = camera if camera is not None else NodeRef.none()
        self.min_length = min_length
        self.max_length = max_length
        self.desired_length = clamp(length, min_length, max_length)
        self.current_length = self.desired_length
        self.spring = spring
        self.yaw = 0.0
        self.pitch = 0.0

    @property
    def is_attached(self) -> bool:
        return self.pivot.is_present or self.arm.is_present

    def apply_orientation(self, yaw: float, pitch: float) -> None:
        if not self.enabled:
            return

        self.yaw = yaw
        self.pitch = pitch

        def _set_yaw(node: SceneNode) -> None:
            node.rotation.y = yaw

        def _set_pitch(node: SceneNode) -> None:
            node.rotation.x = -pitch

        self.pivot.if_present(_set_yaw)
        self.arm.if_present(_set_pitch)

    def update(self, delta_time: float) -> None:
        if not self.enabled:
            return

        self.current_length += (self.desired_length - self.current_length) * self.spring
        self.current_length = clamp(self.current_length, self.min_length, self.max_length)

        length = self.current_length

        def _place_camera(node: SceneNode) -> None:
            node.position.z = length

        self.camera.if_present(_place_camera)

    def zoom(self, delta: float) -> None:
        self.desired_length = clamp(self.desired_length + delta, self.min_length, self.max_length)

    def get_camera_offset(self) -> Vector3:
        """Camera position relative to the pivot, at the current arm length."""

        # Positive pitch looks down, so the camera rises behind the pivot.
        local = Vector3([
            0.0,
            math.sin(self.pitch) * self.current_length,
            math.cos(self.pitch) * self.current_length,
        ])
        return rotate_y(local, self.yaw)


__all__ = [
    "CameraRig",
    "SpringArmRig",
]
