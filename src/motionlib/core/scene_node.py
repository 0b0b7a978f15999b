"""
Scene Node

Minimal named node with a transform, used as the host scene-graph boundary.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from pyrr import Vector3

from .math_utils import copy_vector


class SceneNode:
    """
    A node in a host scene hierarchy.

    Each node has:
    - A name unique among its siblings
    - Position in parent space
    - Rotation as Euler angles in radians (x = pitch, y = yaw, z = roll)
    - Child nodes addressable by a slash-separated path
    """

    def __init__(self, name: str, position: Vector3 = None, rotation: Vector3 = None):
        self.name = name
        self.position = copy_vector(position) if position is not None else Vector3([0.0, 0.0, 0.0])
        self.rotation = copy_vector(rotation) if rotation is not None else Vector3([0.0, 0.0, 0.0])
        self.parent: Optional[SceneNode] = None
        self.children: Dict[str, SceneNode] = {}

    def add_child(self, child: "SceneNode") -> "SceneNode":
        """
        Attach a child node.

        Args:
            child: Node to attach (detached from any previous parent)

        Returns:
            The attached child, for chaining
        """
        if child.name in self.children:
            raise ValueError(f"Node '{self.name}' already has a child named '{child.name}'")
        if child.parent is not None:
            child.parent.children.pop(child.name, None)
        child.parent = self
        self.children[child.name] = child
        return child

    def get_node(self, path: str) -> Optional["SceneNode"]:
        """
        Look up a descendant by path such as ``"CameraPivot/SpringArm"``.

        ``".."`` walks to the parent. Returns None when any segment is missing.
        """
        node: Optional[SceneNode] = self
        for segment in path.split("/"):
            if not segment or segment == ".":
                continue
            if segment == "..":
                node = node.parent
            else:
                node = node.children.get(segment)
            if node is None:
                return None
        return node

    def iter_tree(self) -> Iterator["SceneNode"]:
        yield self
        for child in self.children.values():
            yield from child.iter_tree()

    def get_path(self) -> str:
        names = []
        node: Optional[SceneNode] = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return "/".join(reversed(names))

    def __repr__(self) -> str:
        return f"SceneNode({self.get_path()!r})"
