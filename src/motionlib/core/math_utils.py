"""Scalar and vector helpers shared by the input sampler and controller."""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from pyrr import Vector3

TAU = 2.0 * math.pi


def copy_vector(value) -> Vector3:
    """
    Fresh float Vector3 holding the components of ``value``.

    ``Vector3(array)`` views the array it is given, so copies go through here.
    """
    return Vector3(np.array(value, dtype=float))


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Hard floor/ceiling clamp."""

    return max(minimum, min(maximum, value))


def move_toward(current: float, target: float, max_delta: float) -> float:
    """
    Step ``current`` toward ``target`` by at most ``max_delta``.

    Never overshoots: once the remaining distance fits inside ``max_delta``
    the target itself is returned.
    """
    remaining = target - current
    if abs(remaining) <= max_delta:
        return target
    return current + math.copysign(max_delta, remaining)


def wrap_angle(angle: float) -> float:
    """Wrap an angle in radians into [-pi, pi)."""

    return (angle + math.pi) % TAU - math.pi


def lerp_angle(start: float, end: float, weight: float) -> float:
    """Interpolate between two angles along the shortest arc."""

    difference = math.fmod(end - start, TAU)
    shortest = math.fmod(2.0 * difference, TAU) - difference
    return start + shortest * weight


def limit_length(x: float, y: float, max_length: float = 1.0) -> Tuple[float, float]:
    """Scale a 2D vector down to ``max_length``; shorter vectors pass through."""

    length = math.hypot(x, y)
    if length > max_length:
        scale = max_length / length
        return x * scale, y * scale
    return x, y


def horizontal_length(vector: Vector3) -> float:
    return math.hypot(vector.x, vector.z)


def rotate_y(vector: Vector3, angle: float) -> Vector3:
    """
    Rotate a vector about the world up axis.

    Args:
        vector: Vector to rotate
        angle: Rotation in radians (counter-clockwise seen from above)

    Returns:
        New rotated Vector3
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Vector3([
        vector.x * cos_a + vector.z * sin_a,
        vector.y,
        -vector.x * sin_a + vector.z * cos_a,
    ])


def heading_of(x: float, z: float) -> float:
    """Yaw that faces a body's forward (-Z) axis along ``(x, z)``."""

    return math.atan2(-x, -z)
