"""Tests for the Qt naming panel and control panel (offscreen platform)."""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtWidgets import QApplication

from rigforge.core.events import EventBus, EventType
from rigforge.core.models import ModelLibrary
from rigforge.naming.session import NamingSession
from rigforge.ui.control_panel import ControlPanel
from rigforge.ui.naming_panel import NamingPanel
from rigforge.ui.widgets.collapsible_folder import CollapsibleFolder
from rigforge.ui.widgets.readout_row import ReadoutRow
from rigforge.ui.widgets.slider_row import SliderRow


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def test_slider_row_clamps_and_emits(qapp):
    row = SliderRow("Top X Scale", 0.2, 20.0, 2.0)
    received = []
    row.value_changed.connect(received.append)

    assert row.value == pytest.approx(2.0)
    row.set_value(500.0)
    assert row.value == pytest.approx(20.0)
    assert received == []  # programmatic changes stay silent

    row._slider.setValue(0)
    assert received == [pytest.approx(0.2)]


def test_folder_expand_collapse(qapp):
    folder = CollapsibleFolder("Features", expanded=False)
    assert not folder.is_expanded
    folder.toggle()
    assert folder.is_expanded


def test_readout_row_is_disabled(qapp):
    row = ReadoutRow("Pivot Objects", 3)
    assert not row.isEnabled()
    assert row.text == "3"


def test_panel_folder_lifecycle(qapp):
    panel = NamingPanel()
    folder = panel.add_folder("Features", expanded=True)
    calls = []
    slider = folder.add_slider("Lid Y Rotate", -180.0, 180.0, 0.0, calls.append)
    folder.add_readout("Attached Objects", 2)

    assert len(folder.widget.rows) == 2
    slider._slider.setValue(1000)
    assert calls == [pytest.approx(180.0)]

    folder.destroy()
    folder.destroy()
    assert panel.folders == []
    assert not panel._empty_label.isHidden()


def test_session_on_qt_panel(qapp, rigged_scene):
    panel = NamingPanel()
    session = NamingSession(panel)
    session.begin(rigged_scene)

    titles = [f.widget.title for f in panel.folders]
    assert titles == ["Features", "Attachments Info"]
    assert panel.folders[0].widget.is_expanded
    assert not panel.folders[1].widget.is_expanded

    slider = panel.folders[0].widget.rows[0]
    slider._slider.setValue(1000)
    assert rigged_scene.find("Feature_X_Scale_Top").scale[0] == pytest.approx(10.0)

    session.end()
    assert panel.folders == []


def test_control_panel_publishes(qapp):
    bus = EventBus()
    events = []
    bus.subscribe(EventType.MODEL_SELECTED, lambda **kw: events.append(("model", kw["key"])))
    bus.subscribe(EventType.BACKGROUND_COLOR_CHANGED, lambda **kw: events.append(("bg", kw["color"])))

    library = ModelLibrary.from_config()
    panel = ControlPanel(bus, library)

    panel.select_model("house")
    assert events == []

    panel.model_combo.setCurrentIndex(panel.model_combo.findData("table"))
    panel.background_picker.set_color("#ff0000")
    assert events == [("model", "table"), ("bg", "#ff0000")]
