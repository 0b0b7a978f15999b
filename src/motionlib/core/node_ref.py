"""Optional references to scene nodes resolved once at setup."""

from __future__ import annotations

import logging
from typing import Callable, Generic, Optional, TypeVar

from .scene_node import SceneNode

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class MissingNodeError(LookupError):
    """Raised when an absent reference is accessed directly."""


class NodeRef(Generic[T]):
    """
    A reference that may or may not point at a node.

    Callers branch on presence (``is_present`` or ``if_present``) instead of
    passing None around.

    Usage:
        pivot = NodeRef.resolve(root, "CameraPivot")
        pivot.if_present(lambda node: node.rotation)
    """

    __slots__ = ("_target", "path")

    def __init__(self, target: Optional[T] = None, path: str = "") -> None:
        self._target = target
        self.path = path

    @classmethod
    def none(cls, path: str = "") -> "NodeRef[T]":
        return cls(None, path)

    @classmethod
    def resolve(cls, root: Optional[SceneNode], path: str) -> "NodeRef[SceneNode]":
        """
        Resolve ``path`` below ``root``.

        A missing node is reported once here and yields an absent reference;
        it is never an error.
        """
        target = root.get_node(path) if root is not None else None
        if target is None:
            logger.warning("Scene node '%s' not found, continuing without it", path)
        return cls(target, path)

    @property
    def is_present(self) -> bool:
        return self._target is not None

    def get(self) -> T:
        if self._target is None:
            raise MissingNodeError(f"Scene node '{self.path}' is not available")
        return self._target

    def get_or(self, default: Optional[T] = None) -> Optional[T]:
        return self._target if self._target is not None else default

    def if_present(self, action: Callable[[T], R]) -> Optional[R]:
        """Run ``action`` on the target when present; otherwise do nothing."""

        if self._target is None:
            return None
        return action(self._target)

    def __bool__(self) -> bool:
        return self.is_present

    def __repr__(self) -> str:
        state = "present" if self.is_present else "absent"
        return f"NodeRef({self.path!r}, {state})"
