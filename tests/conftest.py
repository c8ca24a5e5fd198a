"""Shared fixtures: a recording GUI host and a small rigged scene."""

import os

import pytest

from rigforge.core.scene_graph import NodeKind, SceneNode

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class RecordingFolder:
    def __init__(self, title, expanded):
        self.title = title
        self.expanded = expanded
        self.sliders = []
        self.readouts = []
        self.destroyed = False

    def add_slider(self, label, min_val, max_val, value, on_change):
        entry = {"label": label, "min": min_val, "max": max_val,
                 "value": value, "on_change": on_change}
        self.sliders.append(entry)
        return entry

    def add_readout(self, label, value):
        self.readouts.append((label, value))
        return label

    def destroy(self):
        self.destroyed = True


class RecordingGui:
    """GuiHost that records folders instead of drawing them."""

    def __init__(self):
        self.folders = []

    def add_folder(self, title, expanded=True):
        folder = RecordingFolder(title, expanded)
        self.folders.append(folder)
        return folder

    @property
    def live_folders(self):
        return [f for f in self.folders if not f.destroyed]


@pytest.fixture
def gui():
    return RecordingGui()


@pytest.fixture
def rigged_scene():
    """Unnamed root holding a scalable top with a pivot and a glued leg.

    root
    ├── Feature_X_Scale_Top  (position 0,1,0)
    │   └── Pivot_hinge      (position 1,0,0)
    ├── Attached_hinge
    └── Plain
    """
    root = SceneNode()
    top = SceneNode("Feature_X_Scale_Top", kind=NodeKind.MESH)
    top.set_position(0, 1, 0)
    pivot = SceneNode("Pivot_hinge", kind=NodeKind.OTHER)
    pivot.set_position(1, 0, 0)
    top.add(pivot)
    attached = SceneNode("Attached_hinge")
    plain = SceneNode("")
    root.add(top)
    root.add(attached)
    root.add(plain)
    return root
