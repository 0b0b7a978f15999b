"""Collision resolver boundary and simple reference resolvers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Tuple, runtime_checkable

import numpy as np
from pyrr import Vector3, vector

from ..config.settings import FIXED_TIME_STEP
from ..core.math_utils import copy_vector


def _vec3(value: Iterable[float]) -> Tuple[float, float, float]:
    """Convert an iterable to a tuple of three floats."""

    data = tuple(float(v) for v in value)
    if len(data) != 3:
        raise ValueError(f"Expected 3 components, got {data}")
    return data


@dataclass(frozen=True, slots=True)
class GroundContact:
    """Ground state reported by the host for a single tick."""

    on_floor: bool = False


@runtime_checkable
class MotionResolver(Protocol):
    """Collision-aware integrator that moves the body ("move and slide")."""

    def resolve(
        self,
        desired_velocity: Vector3,
        up_vector: Vector3,
        max_slope_angle: float,
        floor_snap: bool,
    ) -> Vector3:
        """Move the body and return the velocity that was actually achieved."""


@runtime_checkable
class GroundQuery(Protocol):
    def is_on_floor(self) -> bool:
        """Whether the last resolve left the body standing on a floor."""


class PassthroughResolver:
    """Honours every request unchanged; the floor flag is set by the caller."""

    def __init__(self, on_floor: bool = True) -> None:
        self.on_floor = on_floor
        self.calls = 0

    def resolve(self, desired_velocity, up_vector, max_slope_angle, floor_snap) -> Vector3:
        self.calls += 1
        return copy_vector(desired_velocity)

    def is_on_floor(self) -> bool:
        return self.on_floor


class FloorPlaneResolver:
    """
    Kinematic body over an infinite plane.

    Integrates position with a fixed time step, stops downward motion at the
    plane and reports floor contact when the plane is walkable for the
    requested slope limit. A plane steeper than the limit still blocks the
    body but is treated as a wall.
    """

    def __init__(
        self,
        position: Optional[Iterable[float]] = None,
        plane_normal: Iterable[float] = (0.0, 1.0, 0.0),
        plane_constant: float = 0.0,
        time_step: float = FIXED_TIME_STEP,
    ) -> None:
        self.position = copy_vector(_vec3(position)) if position is not None else Vector3([0.0, 0.0, 0.0])
        self.plane_normal = copy_vector(vector.normalise(copy_vector(_vec3(plane_normal))))
        self.plane_constant = float(plane_constant)
        self.time_step = time_step
        self._on_floor = False

    def distance_to_plane(self, point: Vector3) -> float:
        return float(np.dot(point, self.plane_normal)) - self.plane_constant

    def resolve(self, desired_velocity, up_vector, max_slope_angle, floor_snap) -> Vector3:
        velocity = copy_vector(desired_velocity)
        target = self.position + velocity * self.time_step

        penetration = self.distance_to_plane(target)
        was_on_floor = self._on_floor
        touching = penetration <= 0.0

        # Snap down onto the plane when walking off a tiny gap while grounded
        approaching = float(np.dot(velocity, self.plane_normal)) <= 0.0
        if floor_snap and was_on_floor and approaching and not touching:
            touching = True

        if touching:
            target = target - self.plane_normal * penetration
            into_plane = float(np.dot(velocity, self.plane_normal))
            if into_plane < 0.0:
                # Slide: drop the component pushing into the surface
                velocity = velocity - self.plane_normal * into_plane

        self.position = copy_vector(target)
        self._on_floor = touching and self._is_walkable(up_vector, max_slope_angle)
        return velocity

    def is_on_floor(self) -> bool:
        return self._on_floor

    def _is_walkable(self, up_vector, max_slope_angle: float) -> bool:
        up = vector.normalise(copy_vector(_vec3(up_vector)))
        cos_angle = max(-1.0, min(1.0, float(np.dot(up, self.plane_normal))))
        return math.acos(cos_angle) <= max_slope_angle + 1e-6
