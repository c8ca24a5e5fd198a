"""Feature control binder: one bounded numeric control per feature axis."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from rigforge.constants import ROTATION_LIMIT_DEG, SCALE_MIN_FLOOR, SCALE_RANGE_FACTOR
from rigforge.core.math_utils import axis_index, clamp, deg_to_rad, rad_to_deg
from rigforge.core.scene_graph import SceneNode
from rigforge.naming.attachments import propagate_attachments
from rigforge.naming.parser import OperationKind
from rigforge.naming.scan import ScanResult

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class FeatureControl:
    """A live slider binding for one axis of one feature.

    ``set_value`` clamps into ``[min_val, max_val]`` before firing
    ``on_change``; the range itself is the only guard on user input.
    """
    label: str
    axis: str
    kind: OperationKind
    node: SceneNode = field(repr=False)
    value: float
    min_val: float
    max_val: float
    on_change: Optional[Callable[[float], None]] = field(default=None, repr=False)

    def set_value(self, value: float) -> float:
        self.value = clamp(float(value), self.min_val, self.max_val)
        if self.on_change is not None:
            self.on_change(self.value)
        return self.value


def scale_bounds(initial: float) -> tuple[float, float]:
    """Slider range proportional to the scale already baked into the asset."""
    return max(SCALE_MIN_FLOOR, initial / SCALE_RANGE_FACTOR), initial * SCALE_RANGE_FACTOR


def apply_feature_scale(node: SceneNode, axis: str, value: float) -> None:
    node.set_scale_axis(axis, value)


def apply_feature_rotation(node: SceneNode, axis: str, degrees: float) -> None:
    node.set_rotation_axis(axis, deg_to_rad(degrees))


def _initial_scale(node: SceneNode, axis: str) -> float:
    value = float(node.scale[axis_index(axis)])
    return value or 1.0


def _initial_rotation(node: SceneNode, axis: str) -> float:
    return rad_to_deg(float(node.rotation[axis_index(axis)]))


def bind_feature_controls(
    scan: ScanResult,
    on_applied: Optional[Callable[[FeatureControl, int], None]] = None,
) -> list[FeatureControl]:
    """Build controls for every scale/rotation feature in *scan*.

    Each control's change handler applies the transform to its own axis and
    then re-solves every attachment captured by the scan.  *on_applied*, if
    given, is called with the control and the number of attachments moved.
    """
    controls: list[FeatureControl] = []

    for feature in scan.features:
        kind = feature.kind
        node = feature.node
        if kind is None or node is None:
            continue

        for axis in feature.axes:
            label = f"{feature.object_name} {axis} {feature.operation}"
            if kind is OperationKind.SCALE:
                initial = _initial_scale(node, axis)
                lo, hi = scale_bounds(initial)
                apply = apply_feature_scale
            else:
                initial = _initial_rotation(node, axis)
                lo, hi = -ROTATION_LIMIT_DEG, ROTATION_LIMIT_DEG
                apply = apply_feature_rotation

            control = FeatureControl(
                label=label, axis=axis, kind=kind, node=node,
                value=initial, min_val=lo, max_val=hi,
            )
            control.on_change = _make_handler(control, apply, scan, on_applied)
            controls.append(control)

    logger.debug("Bound %d feature controls", len(controls))
    return controls


def _make_handler(control, apply, scan, on_applied):
    def _on_change(value: float) -> None:
        apply(control.node, control.axis, value)
        moved = propagate_attachments(scan.attachments, scan.index)
        if on_applied is not None:
            on_applied(control, moved)

    return _on_change
