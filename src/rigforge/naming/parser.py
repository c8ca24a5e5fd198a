"""Standard naming convention parser.

Node names authored in a DCC tool encode interactive behaviour:

- ``Feature_<AXES>_<Operation>_<ObjectName>``, e.g. ``Feature_XY_Scale_Box1``
- ``Attached_<name>`` / ``Pivot_<name>``, e.g. ``Attached_leg1``

Parsing is pure; names that do not match return ``None``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from rigforge.constants import (
    ATTACHED_PREFIX, FEATURE_PREFIX, NAME_DELIMITER, PIVOT_PREFIX, VALID_AXES,
)
from rigforge.core.scene_graph import SceneNode


class OperationKind(Enum):
    SCALE = "scale"
    ROTATION = "rotation"


class AttachmentKind(Enum):
    ATTACHED = "Attached"
    PIVOT = "Pivot"


_OPERATION_ALIASES = {
    "scale": OperationKind.SCALE,
    "rotation": OperationKind.ROTATION,
    "rotate": OperationKind.ROTATION,
}


@dataclass(frozen=True)
class FeatureDescriptor:
    """Parsed ``Feature_`` name."""
    axes: tuple[str, ...]
    operation: str
    object_name: str
    full_name: str
    node: Optional[SceneNode] = field(default=None, compare=False, repr=False)

    @property
    def kind(self) -> Optional[OperationKind]:
        """Operation recognised by the control binder, or None."""
        return _OPERATION_ALIASES.get(self.operation.lower())


@dataclass(frozen=True)
class AttachmentDescriptor:
    """Parsed ``Attached_`` or ``Pivot_`` name."""
    kind: AttachmentKind
    target_name: str
    full_name: str
    node: Optional[SceneNode] = field(default=None, compare=False, repr=False)


def parse_feature_name(name: str) -> Optional[FeatureDescriptor]:
    """Parse ``Feature_XY_Scale_Box1`` into axes, operation and object name.

    Returns None when the prefix is missing or fewer than three segments
    follow it.  Axis characters outside X/Y/Z are dropped.
    """
    if not name or not name.startswith(FEATURE_PREFIX):
        return None

    parts = name[len(FEATURE_PREFIX):].split(NAME_DELIMITER)
    if len(parts) < 3:
        return None

    axes: list[str] = []
    for ch in parts[0].upper():
        if ch in VALID_AXES and ch not in axes:
            axes.append(ch)

    return FeatureDescriptor(
        axes=tuple(axes),
        operation=parts[1],
        object_name=NAME_DELIMITER.join(parts[2:]),
        full_name=name,
    )


def parse_attachment_name(name: str) -> Optional[AttachmentDescriptor]:
    """Parse ``Attached_leg1`` / ``Pivot_leg1``."""
    if not name:
        return None
    if name.startswith(ATTACHED_PREFIX):
        return AttachmentDescriptor(
            AttachmentKind.ATTACHED, name[len(ATTACHED_PREFIX):], name,
        )
    if name.startswith(PIVOT_PREFIX):
        return AttachmentDescriptor(
            AttachmentKind.PIVOT, name[len(PIVOT_PREFIX):], name,
        )
    return None
