"""JSON scene description → SceneNode tree.

Format::

    {
      "name": "Table",
      "type": "group",              # group | mesh | other
      "position": [0, 0, 0],
      "rotation": [0, 90, 0],       # degrees, XYZ order
      "scale": [1, 1, 1],
      "box": [1.0, 0.1, 1.0],       # mesh only: box dimensions
      "children": [ ... ]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any

from rigforge.core.math_utils import deg_to_rad
from rigforge.core.mesh import MeshInstance, make_box
from rigforge.core.scene_graph import NodeKind, SceneNode

logger = logging.getLogger(__name__)

_NODE_KINDS = {
    "group": NodeKind.GROUP,
    "mesh": NodeKind.MESH,
    "other": NodeKind.OTHER,
}


class SceneLoadError(ValueError):
    """Raised when a scene description cannot be turned into a node tree."""


def _vector(desc: dict[str, Any], key: str, default: tuple[float, float, float]) -> tuple[float, float, float]:
    value = desc.get(key, default)
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise SceneLoadError(f"{desc.get('name', '<unnamed>')}: '{key}' must have 3 components")
    try:
        return float(value[0]), float(value[1]), float(value[2])
    except (TypeError, ValueError) as e:
        raise SceneLoadError(f"{desc.get('name', '<unnamed>')}: bad '{key}': {e}") from e


def build_node(desc: dict[str, Any]) -> SceneNode:
    """Recursively build a node (and its children) from a description dict."""
    if not isinstance(desc, dict):
        raise SceneLoadError(f"Node description must be an object, got {type(desc).__name__}")

    type_name = desc.get("type", "group")
    kind = _NODE_KINDS.get(type_name) if isinstance(type_name, str) else None
    if kind is None:
        raise SceneLoadError(f"Unknown node type: {type_name!r}")

    name = desc.get("name") or ""
    if not isinstance(name, str):
        raise SceneLoadError(f"Node name must be a string, got {type(name).__name__}")
    node = SceneNode(name=name, kind=kind)
    node.set_position(*_vector(desc, "position", (0.0, 0.0, 0.0)))
    rx, ry, rz = _vector(desc, "rotation", (0.0, 0.0, 0.0))
    node.set_rotation(deg_to_rad(rx), deg_to_rad(ry), deg_to_rad(rz))
    node.set_scale(*_vector(desc, "scale", (1.0, 1.0, 1.0)))

    if kind is NodeKind.MESH:
        width, height, depth = _vector(desc, "box", (1.0, 1.0, 1.0))
        node.attach_mesh(MeshInstance(
            name=name,
            geometry=make_box(width, height, depth),
            color=desc.get("color", "#b0b4bc"),
        ))

    children = desc.get("children", [])
    if not isinstance(children, list):
        raise SceneLoadError(f"{name or '<unnamed>'}: 'children' must be a list")
    for child_desc in children:
        node.add(build_node(child_desc))
    return node


def load_scene_file(path: Path) -> SceneNode:
    """Load a JSON scene description file into a node tree."""
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SceneLoadError(f"Cannot read scene file {path}: {e}") from e

    root = build_node(data)
    root.update_world_matrix(force=True)
    logger.info("Loaded scene %s (root %r)", Path(path).name, root.name)
    return root
