"""Tests for attachment propagation."""

import numpy as np

from rigforge.core.scene_graph import SceneNode
from rigforge.naming.attachments import propagate_attachments, resolve_driver
from rigforge.naming.scan import scan_scene


def test_unparented_attachment_takes_pivot_world_position(rigged_scene):
    scan = scan_scene(rigged_scene)
    attached = scan.index["Attached_hinge"]
    attached.parent.remove(attached)

    moved = propagate_attachments(scan.attachments, scan.index)
    assert moved == 1
    np.testing.assert_array_almost_equal(attached.position, [1, 1, 0])


def test_attachment_position_in_parent_space():
    root = SceneNode()
    pivot_parent = SceneNode("Arm")
    pivot_parent.set_position(0, 2, 0)
    pivot_parent.set_rotation(0, 0, np.pi / 2)
    pivot = SceneNode("Pivot_tip")
    pivot.set_position(1, 0, 0)
    pivot_parent.add(pivot)

    holder = SceneNode("Holder")
    holder.set_position(5, 0, 0)
    holder.set_scale(2, 2, 2)
    attached = SceneNode("Attached_tip")
    holder.add(attached)

    root.add(pivot_parent)
    root.add(holder)

    scan = scan_scene(root)
    propagate_attachments(scan.attachments, scan.index)

    # Pivot world = (0, 3, 0); in holder space = ((0-5)/2, 3/2, 0)
    np.testing.assert_array_almost_equal(attached.position, [-2.5, 1.5, 0])
    np.testing.assert_array_almost_equal(
        attached.get_world_position(), pivot.get_world_position(),
    )


def test_pivot_preferred_over_attached_driver():
    root = SceneNode()
    pivot = SceneNode("Pivot_x")
    pivot.set_position(1, 0, 0)
    other = SceneNode("Attached_x")
    other.set_position(9, 9, 9)
    follower = SceneNode("Attached_x")
    root.add(pivot)
    root.add(other)
    root.add(follower)

    scan = scan_scene(root)
    assert resolve_driver(scan.attachments[0], scan.index) is pivot
    propagate_attachments(scan.attachments, scan.index)
    np.testing.assert_array_almost_equal(follower.position, [1, 0, 0])
    np.testing.assert_array_almost_equal(other.position, [1, 0, 0])


def test_falls_back_to_attached_driver():
    root = SceneNode()
    anchor = SceneNode("Attached_anchor")
    anchor.set_position(3, 0, 0)
    root.add(anchor)

    scan = scan_scene(root)
    assert resolve_driver(scan.attachments[0], scan.index) is anchor


def test_dangling_attachment_left_in_place():
    root = SceneNode()
    lonely = SceneNode("Attached_nowhere")
    lonely.set_position(4, 5, 6)
    glued = SceneNode("Attached_hinge")
    pivot = SceneNode("Pivot_hinge")
    pivot.set_position(1, 1, 1)
    root.add(lonely)
    root.add(glued)
    root.add(pivot)

    scan = scan_scene(root)
    moved = propagate_attachments(scan.attachments, scan.index)

    assert moved == 1
    np.testing.assert_array_equal(lonely.position, [4, 5, 6])
    np.testing.assert_array_almost_equal(glued.position, [1, 1, 1])


def test_follows_pivot_after_parent_moves(rigged_scene):
    scan = scan_scene(rigged_scene)
    propagate_attachments(scan.attachments, scan.index)

    top = scan.index["Feature_X_Scale_Top"]
    top.set_scale(3, 1, 1)
    propagate_attachments(scan.attachments, scan.index)

    np.testing.assert_array_almost_equal(scan.index["Attached_hinge"].position, [3, 1, 0])
