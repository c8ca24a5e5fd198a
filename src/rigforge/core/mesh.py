"""Mesh data structures for geometry storage (no GL dependencies)."""

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray


@dataclass
class BufferGeometry:
    """Stores vertex attribute arrays for a mesh.

    positions: flat float32 array (x,y,z per vertex)
    indices: triangle index array (uint32), optional for non-indexed geometry
    """
    positions: NDArray[np.float32]
    indices: Optional[NDArray[np.uint32]] = None
    vertex_count: int = 0

    def __post_init__(self):
        if self.vertex_count == 0:
            self.vertex_count = len(self.positions) // 3


@dataclass
class MeshInstance:
    """Geometry attached to a MESH scene node."""
    name: str
    geometry: Optional[BufferGeometry]
    color: str = "#b0b4bc"

    @property
    def disposed(self) -> bool:
        return self.geometry is None

    def dispose(self) -> None:
        """Release geometry arrays once the owning model is unloaded."""
        self.geometry = None


def make_box(width: float, height: float, depth: float) -> BufferGeometry:
    """Create an indexed box centered at the origin (8 verts, 12 tris)."""
    hw, hh, hd = width / 2, height / 2, depth / 2
    corners = [
        (-hw, -hh, -hd), (hw, -hh, -hd), (hw, hh, -hd), (-hw, hh, -hd),
        (-hw, -hh, hd), (hw, -hh, hd), (hw, hh, hd), (-hw, hh, hd),
    ]
    # Two triangles per face: -Z, +Z, -Y, +Y, -X, +X
    indices = [
        0, 2, 1, 0, 3, 2,
        4, 5, 6, 4, 6, 7,
        0, 1, 5, 0, 5, 4,
        3, 7, 6, 3, 6, 2,
        0, 4, 7, 0, 7, 3,
        1, 2, 6, 1, 6, 5,
    ]
    pos = np.array(corners, dtype=np.float32).ravel()
    idx = np.array(indices, dtype=np.uint32)
    return BufferGeometry(positions=pos, indices=idx)
