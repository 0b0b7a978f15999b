"""Kinematic character controller with a camera-relative spring-arm rig."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from pyrr import Vector3

from ..config.controller_config import ControllerConfig
from ..config.settings import (
    BODY_PIVOT_PATH,
    CAMERA_ARM_PATH,
    CAMERA_PATH,
    CAMERA_PIVOT_PATH,
    CAMERA_ZOOM_STEP,
    PLAYER_HEADING_EPSILON,
    WORLD_UP,
)
from ..core.camera_rig import SpringArmRig
from ..core.math_utils import (
    copy_vector,
    heading_of,
    horizontal_length,
    lerp_angle,
    move_toward,
    rotate_y,
    wrap_angle,
)
from ..core.motion_state import MotionState
from ..core.node_ref import NodeRef
from ..core.scene_node import SceneNode
from ..input.frame_input import FrameInput, LookSource
from ..input.input_commands import InputCommand
from ..input.input_manager import InputManager
from ..physics.resolver import GroundContact, GroundQuery, MotionResolver

logger = logging.getLogger(__name__)

UP = copy_vector(WORLD_UP)


@dataclass(slots=True)
class TickResult:
    """Outcome of one tick: the next state and what was asked of the resolver."""

    state: MotionState
    desired_velocity: Vector3


# ----------------------------------------------------------------------
# Pure tick
# ----------------------------------------------------------------------
def scaled_look(frame: FrameInput, config: ControllerConfig):
    """Apply the sensitivity that matches the look intent's device."""

    if frame.look_source is LookSource.MOUSE:
        scale = config.mouse_look_sensitivity
    elif frame.look_source is LookSource.CONTROLLER:
        scale = config.controller_look_sensitivity
    else:
        return 0.0, 0.0
    return frame.look_intent[0] * scale, frame.look_intent[1] * scale


def update_camera(state: MotionState, frame: FrameInput, config: ControllerConfig) -> None:
    look_x, look_y = scaled_look(frame, config)
    if look_x != 0.0:
        # Dragging right turns the view right
        state.camera_yaw = wrap_angle(state.camera_yaw - look_x)
    state.set_camera_pitch(state.camera_pitch + look_y, config.pitch_min, config.pitch_max)


def movement_direction(frame: FrameInput, camera_yaw: float) -> Vector3:
    """
    Horizontal movement direction relative to the camera's yaw.

    Input x strafes and input y moves back, so the local vector is
    (x, 0, y) with forward along -Z. Longer than unit is normalized; shorter
    passes through so analog input can feather speed.
    """
    local = Vector3([frame.movement_intent[0], 0.0, frame.movement_intent[1]])
    direction = rotate_y(local, camera_yaw)
    if direction.length > 1.0:
        direction = copy_vector(direction.normalized)
    return direction


def integrate_velocity(
    state: MotionState,
    direction: Vector3,
    contact: GroundContact,
    jump_requested: bool,
    dt: float,
    config: ControllerConfig,
) -> Vector3:
    """Return the velocity to request from the resolver this tick."""

    velocity = copy_vector(state.velocity)

    if direction.length > 0.0:
        velocity.x = direction.x * config.speed
        velocity.z = direction.z * config.speed
    else:
        # Constant per-tick decay, deliberately not scaled by dt
        velocity.x = move_toward(velocity.x, 0.0, config.speed)
        velocity.z = move_toward(velocity.z, 0.0, config.speed)

    velocity.y -= config.fall_acceleration * dt

    if contact.on_floor and jump_requested:
        # Additive so a jump while already rising stacks
        velocity.y += config.jump_impulse

    return velocity


def update_body_yaw(state: MotionState, direction: Vector3, velocity: Vector3, config: ControllerConfig) -> None:
    if horizontal_length(direction) <= PLAYER_HEADING_EPSILON:
        return
    target = heading_of(velocity.x, velocity.z)
    # Fixed per-tick factor, independent of dt
    state.body_yaw = wrap_angle(lerp_angle(state.body_yaw, target, config.orientation_smoothing))


def step(
    state: MotionState,
    frame: FrameInput,
    contact: GroundContact,
    dt: float,
    config: ControllerConfig,
    resolver: MotionResolver,
    camera_attached: bool = True,
) -> TickResult:
    """
    Advance one tick without touching ``state`` or any scene node.

    Args:
        state: State after the previous tick
        frame: This tick's sampled input
        contact: Ground contact reported before this tick
        dt: Elapsed time in seconds
        config: Controller tuning
        resolver: Collision resolver called exactly once
        camera_attached: False skips the camera update entirely

    Returns:
        TickResult with the next state and the requested velocity
    """
    next_state = state.copy()

    if camera_attached:
        update_camera(next_state, frame, config)

    direction = movement_direction(frame, next_state.camera_yaw)
    desired = integrate_velocity(next_state, direction, contact, frame.jump_requested, dt, config)

    actual = resolver.resolve(copy_vector(desired), copy_vector(UP), config.max_slope_angle, config.floor_snap)
    next_state.velocity = copy_vector(actual)

    update_body_yaw(next_state, direction, desired, config)

    return TickResult(state=next_state, desired_velocity=desired)


# ----------------------------------------------------------------------
# Stateful wrapper
# ----------------------------------------------------------------------
class MotionController:
    """
    Owns one character's MotionState and drives its scene nodes.

    Usage:
        controller = MotionController(config, body, root=character_node)
        controller.physics_process(sampler.sample(input_manager), dt)
    """

    def __init__(
        self,
        config: ControllerConfig,
        body: MotionResolver,
        root: Optional[SceneNode] = None,
        ground: Optional[GroundQuery] = None,
        camera_pivot_path: str = CAMERA_PIVOT_PATH,
        camera_arm_path: str = CAMERA_ARM_PATH,
        camera_path: str = CAMERA_PATH,
        body_pivot_path: str = BODY_PIVOT_PATH,
    ) -> None:
        """
        Initialize the controller.

        Args:
            config: Validated controller tuning
            body: Collision resolver for the character body
            root: Character root node; None runs without any scene nodes
            ground: Floor query (default: ``body`` when it implements one)
        """
        self.config = config
        self.body = body
        self.ground = ground if ground is not None else (body if isinstance(body, GroundQuery) else None)
        if self.ground is None:
            raise TypeError("MotionController needs a ground query (is_on_floor)")

        self.camera_pivot = NodeRef.resolve(root, camera_pivot_path)
        camera_arm = NodeRef.resolve(root, camera_arm_path) if self.camera_pivot.is_present else NodeRef.none(camera_arm_path)
        self.body_pivot = NodeRef.resolve(root, body_pivot_path)
        camera = NodeRef.resolve(root, camera_path) if camera_arm.is_present else NodeRef.none(camera_path)
        self.rig = SpringArmRig(self.camera_pivot, camera_arm, camera=camera)

        self.state = MotionState.from_rig(
            self.camera_pivot,
            camera_arm,
            self.body_pivot,
            config.pitch_min,
            config.pitch_max,
        )
        self.last_desired_velocity = Vector3([0.0, 0.0, 0.0])

    @property
    def velocity(self) -> Vector3:
        return copy_vector(self.state.velocity)

    def physics_process(self, frame: FrameInput, delta_time: float) -> MotionState:
        """
        Run one tick and apply the result to the scene.

        Args:
            frame: Sampled input for this tick
            delta_time: Elapsed time in seconds

        Returns:
            The new state (also stored on the controller)
        """
        contact = GroundContact(on_floor=bool(self.ground.is_on_floor()))
        result = step(
            self.state,
            frame,
            contact,
            delta_time,
            self.config,
            self.body,
            camera_attached=self.rig.is_attached,
        )
        self.state = result.state
        self.last_desired_velocity = result.desired_velocity

        self._apply_to_scene(delta_time)
        logger.debug("tick state=%s floor=%s", self.state.snapshot(), contact.on_floor)
        return self.state

    def zoom(self, delta: float) -> None:
        self.rig.zoom(delta)

    def bind_input(self, input_manager: InputManager, zoom_step: float = CAMERA_ZOOM_STEP) -> None:
        """
        Register the camera zoom handlers with an input manager.

        Zooming in shortens the spring arm by ``zoom_step``, zooming out lengthens it.
        """
        input_manager.register_handler(InputCommand.CAMERA_ZOOM_IN, lambda: self.zoom(-zoom_step))
        input_manager.register_handler(InputCommand.CAMERA_ZOOM_OUT, lambda: self.zoom(zoom_step))

    def _apply_to_scene(self, delta_time: float) -> None:
        if self.rig.is_attached:
            self.rig.apply_orientation(self.state.camera_yaw, self.state.camera_pitch)
            self.rig.update(delta_time)

        body_yaw = self.state.body_yaw

        def _face(node: SceneNode) -> None:
            node.rotation.y = body_yaw

        self.body_pivot.if_present(_face)
