"""Collision resolver boundary and reference resolvers."""

from .resolver import (
    FloorPlaneResolver,
    GroundContact,
    GroundQuery,
    MotionResolver,
    PassthroughResolver,
)

__all__ = [
    "FloorPlaneResolver",
    "GroundContact",
    "GroundQuery",
    "MotionResolver",
    "PassthroughResolver",
]
