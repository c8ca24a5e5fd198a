"""Scene graph with hierarchical transforms, mirroring Three.js Object3D."""

from enum import Enum, auto
from typing import Callable, Optional

from rigforge.core.math_utils import (
    Mat4, Vec3, Quat,
    axis_index, mat4_identity, mat4_compose, mat4_inverse,
    quat_from_euler, transform_point, vec3,
)
from rigforge.core.mesh import MeshInstance


class NodeKind(Enum):
    """Closed set of node variants produced by the loaders."""
    GROUP = auto()
    MESH = auto()
    OTHER = auto()


class SceneNode:
    """A node in the scene graph hierarchy.

    position, rotation (Euler radians, XYZ order) and scale compose the
    local matrix.  World matrix = parent.world_matrix @ local_matrix.
    """

    def __init__(self, name: str = "", kind: NodeKind = NodeKind.GROUP):
        self.name = name
        self.kind = kind
        self.parent: Optional["SceneNode"] = None
        self.children: list["SceneNode"] = []

        # Transform
        self.position: Vec3 = vec3()
        self.rotation: Vec3 = vec3()
        self.scale: Vec3 = vec3(1, 1, 1)

        # Matrices
        self.local_matrix: Mat4 = mat4_identity()
        self.world_matrix: Mat4 = mat4_identity()

        self.mesh: Optional[MeshInstance] = None

        self._matrix_dirty: bool = True

    def __repr__(self) -> str:
        return f"SceneNode({self.name!r}, {self.kind.name})"

    def add(self, child: "SceneNode") -> "SceneNode":
        """Add a child node. Removes from previous parent if any."""
        if child.parent is not None:
            child.parent.remove(child)
        child.parent = self
        self.children.append(child)
        child.mark_dirty()
        return self

    def remove(self, child: "SceneNode") -> "SceneNode":
        """Remove a child node."""
        if child in self.children:
            self.children.remove(child)
            child.parent = None
            child.mark_dirty()
        return self

    def attach_mesh(self, mesh: MeshInstance) -> "SceneNode":
        self.mesh = mesh
        self.kind = NodeKind.MESH
        return self

    # ── Transform setters ──

    def set_position(self, x: float, y: float, z: float) -> "SceneNode":
        self.position = vec3(x, y, z)
        self.mark_dirty()
        return self

    def set_rotation(self, x: float, y: float, z: float) -> "SceneNode":
        """Set Euler rotation in radians."""
        self.rotation = vec3(x, y, z)
        self.mark_dirty()
        return self

    def set_scale(self, x: float, y: float, z: float) -> "SceneNode":
        self.scale = vec3(x, y, z)
        self.mark_dirty()
        return self

    def set_scale_axis(self, axis: str, value: float) -> "SceneNode":
        """Set one scale component, leaving the other two untouched."""
        self.scale[axis_index(axis)] = value
        self.mark_dirty()
        return self

    def set_rotation_axis(self, axis: str, radians: float) -> "SceneNode":
        """Set one Euler component, leaving the other two untouched."""
        self.rotation[axis_index(axis)] = radians
        self.mark_dirty()
        return self

    @property
    def quaternion(self) -> Quat:
        return quat_from_euler(*self.rotation)

    # ── Matrices ──

    def update_local_matrix(self) -> None:
        """Recompute local matrix from position, rotation, scale."""
        self.local_matrix = mat4_compose(self.position, self.quaternion, self.scale)
        self._matrix_dirty = False

    def update_world_matrix(self, force: bool = False) -> None:
        """Recursively update world matrices for this node and all descendants."""
        if self._matrix_dirty or force:
            self.update_local_matrix()

        if self.parent is not None:
            self.world_matrix = self.parent.world_matrix @ self.local_matrix
        else:
            self.world_matrix = self.local_matrix.copy()

        for child in self.children:
            child.update_world_matrix(force=force)

    def update_ancestors(self) -> None:
        """Refresh world matrices along the chain root → self only.

        Local matrices are always recomputed because transform arrays may
        have been edited in place.
        """
        chain = []
        node: Optional[SceneNode] = self
        while node is not None:
            chain.append(node)
            node = node.parent

        parent_world = mat4_identity()
        for node in reversed(chain):
            node.update_local_matrix()
            node.world_matrix = parent_world @ node.local_matrix
            parent_world = node.world_matrix

    def get_world_position(self) -> Vec3:
        """World position after composing every ancestor transform."""
        self.update_ancestors()
        return self.world_matrix[:3, 3].copy()

    def world_to_local(self, point: Vec3) -> Vec3:
        """Convert a world-space point into this node's local space."""
        self.update_ancestors()
        return transform_point(mat4_inverse(self.world_matrix), point)

    def mark_dirty(self) -> None:
        """Mark this node and all descendants as needing matrix update."""
        self._matrix_dirty = True
        for child in self.children:
            child.mark_dirty()

    # ── Traversal ──

    def traverse(self, callback: Callable[["SceneNode"], None]) -> None:
        """Visit this node and all descendants depth-first (pre-order)."""
        callback(self)
        for child in self.children:
            child.traverse(callback)

    def accept(self, visitor: "NodeVisitor") -> None:
        """Dispatch *visitor* over this node and all descendants."""
        self.traverse(visitor.visit)

    def find(self, name: str) -> Optional["SceneNode"]:
        """Find first descendant with given name."""
        if self.name == name:
            return self
        for child in self.children:
            found = child.find(name)
            if found is not None:
                return found
        return None


class NodeVisitor:
    """Typed visitor over the closed set of node kinds.

    Subclasses override ``visit_group``, ``visit_mesh`` and ``visit_other``;
    ``visit`` dispatches on ``node.kind``.
    """

    def visit(self, node: SceneNode) -> None:
        if node.kind is NodeKind.GROUP:
            self.visit_group(node)
        elif node.kind is NodeKind.MESH:
            self.visit_mesh(node)
        else:
            self.visit_other(node)

    def visit_group(self, node: SceneNode) -> None:
        pass

    def visit_mesh(self, node: SceneNode) -> None:
        pass

    def visit_other(self, node: SceneNode) -> None:
        pass


class MeshDisposer(NodeVisitor):
    """Releases geometry held by every mesh node in a subtree."""

    def __init__(self):
        self.disposed = 0

    def visit_mesh(self, node: SceneNode) -> None:
        if node.mesh is not None and not node.mesh.disposed:
            node.mesh.dispose()
            self.disposed += 1


class Scene(SceneNode):
    """Root scene node."""

    def __init__(self):
        super().__init__(name="scene")

    def update(self) -> None:
        """Update all world matrices in the scene."""
        self.update_world_matrix(force=False)


def dispose_tree(root: SceneNode) -> int:
    """Dispose all mesh geometry under *root*; returns the number released."""
    disposer = MeshDisposer()
    root.accept(disposer)
    return disposer.disposed


def node_count(root: SceneNode) -> int:
    count = 0

    def _count(_node: SceneNode):
        nonlocal count
        count += 1

    root.traverse(_count)
    return count

