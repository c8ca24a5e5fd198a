"""Tests for feature control generation."""

import numpy as np
import pytest

from rigforge.core.scene_graph import SceneNode
from rigforge.naming.controls import (
    apply_feature_rotation, apply_feature_scale, bind_feature_controls, scale_bounds,
)
from rigforge.naming.parser import OperationKind
from rigforge.naming.scan import scan_scene


def _single(name, **transform):
    root = SceneNode()
    node = SceneNode(name)
    if "scale" in transform:
        node.set_scale(*transform["scale"])
    if "rotation" in transform:
        node.set_rotation(*transform["rotation"])
    root.add(node)
    return root, node


def test_scale_bounds():
    assert scale_bounds(2.0) == pytest.approx((0.2, 20.0))
    assert scale_bounds(0.05) == pytest.approx((0.01, 0.5))
    assert scale_bounds(1.0) == pytest.approx((0.1, 10.0))


def test_one_control_per_axis():
    root, node = _single("Feature_XY_Scale_Box1", scale=(2, 3, 1))
    controls = bind_feature_controls(scan_scene(root))

    assert [c.label for c in controls] == ["Box1 X Scale", "Box1 Y Scale"]
    assert [c.axis for c in controls] == ["X", "Y"]
    assert all(c.kind is OperationKind.SCALE for c in controls)
    assert controls[0].value == pytest.approx(2.0)
    assert (controls[0].min_val, controls[0].max_val) == pytest.approx((0.2, 20.0))
    assert controls[1].value == pytest.approx(3.0)
    assert (controls[1].min_val, controls[1].max_val) == pytest.approx((0.3, 30.0))


def test_axis_controls_are_independent():
    root, node = _single("Feature_XY_Scale_Box1")
    x_ctrl, y_ctrl = bind_feature_controls(scan_scene(root))

    x_ctrl.set_value(4.0)
    assert x_ctrl.value == pytest.approx(4.0)
    assert y_ctrl.value == pytest.approx(1.0)
    np.testing.assert_array_almost_equal(node.scale, [4, 1, 1])

    y_ctrl.set_value(0.5)
    np.testing.assert_array_almost_equal(node.scale, [4, 0.5, 1])


def test_zero_scale_defaults_to_one():
    root, node = _single("Feature_Z_Scale_Flat", scale=(1, 1, 0))
    (ctrl,) = bind_feature_controls(scan_scene(root))
    assert ctrl.value == pytest.approx(1.0)


def test_scale_value_clamped_by_range():
    root, node = _single("Feature_X_Scale_Box", scale=(2, 1, 1))
    (ctrl,) = bind_feature_controls(scan_scene(root))

    assert ctrl.set_value(100.0) == pytest.approx(20.0)
    assert node.scale[0] == pytest.approx(20.0)
    assert ctrl.set_value(0.0) == pytest.approx(0.2)
    assert node.scale[0] == pytest.approx(0.2)


def test_rotation_control_uses_degrees():
    root, node = _single("Feature_Y_Rotate_Arm", rotation=(0, np.pi / 4, 0))
    (ctrl,) = bind_feature_controls(scan_scene(root))

    assert ctrl.label == "Arm Y Rotate"
    assert ctrl.kind is OperationKind.ROTATION
    assert ctrl.value == pytest.approx(45.0)
    assert (ctrl.min_val, ctrl.max_val) == (-180.0, 180.0)

    ctrl.set_value(90.0)
    np.testing.assert_array_almost_equal(node.rotation, [0, np.pi / 2, 0])

    ctrl.set_value(720.0)
    assert ctrl.value == pytest.approx(180.0)


def test_rotation_word_alias():
    root, _ = _single("Feature_Z_rotation_Arm")
    (ctrl,) = bind_feature_controls(scan_scene(root))
    assert ctrl.kind is OperationKind.ROTATION


def test_unsupported_operation_generates_nothing():
    root = SceneNode()
    root.add(SceneNode("Feature_X_Twist_Arm"))
    root.add(SceneNode("Feature_Y_Scale_Leg"))
    controls = bind_feature_controls(scan_scene(root))
    assert [c.label for c in controls] == ["Leg Y Scale"]


def test_change_repropagates_attachments(rigged_scene):
    scan = scan_scene(rigged_scene)
    (ctrl,) = bind_feature_controls(scan)

    ctrl.set_value(2.0)
    np.testing.assert_array_almost_equal(scan.index["Attached_hinge"].position, [2, 1, 0])


def test_on_applied_hook_reports_moved(rigged_scene):
    calls = []
    (ctrl,) = bind_feature_controls(
        scan_scene(rigged_scene), on_applied=lambda c, moved: calls.append((c.label, moved)),
    )
    ctrl.set_value(1.5)
    assert calls == [("Top X Scale", 1)]


def test_apply_helpers_touch_one_axis():
    node = SceneNode("n")
    node.set_scale(2, 3, 4)
    apply_feature_scale(node, "Z", 7)
    np.testing.assert_array_equal(node.scale, [2, 3, 7])

    apply_feature_rotation(node, "X", 180)
    np.testing.assert_array_almost_equal(node.rotation, [np.pi, 0, 0])
