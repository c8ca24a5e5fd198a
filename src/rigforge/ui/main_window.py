"""Main window: outliner viewport beside the control panel."""

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QStatusBar, QLabel
from PySide6.QtGui import QFont

from rigforge.core.events import EventBus, EventType
from rigforge.core.models import ModelLibrary
from rigforge.core.scene_graph import node_count
from rigforge.ui.control_panel import ControlPanel
from rigforge.ui.outliner import OutlinerView
from rigforge.ui.style import DARK_THEME


class MainWindow(QMainWindow):
    """Main application window.

    Layout: [OutlinerView | ControlPanel] with a status bar showing the
    current model and the naming session summary.
    """

    def __init__(self, event_bus: EventBus, library: ModelLibrary, parent=None):
        super().__init__(parent)
        self.event_bus = event_bus

        self.setWindowTitle("RigForge - Model Viewer")
        self.resize(1200, 800)
        self.setStyleSheet(DARK_THEME)

        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.outliner = OutlinerView(event_bus)
        main_layout.addWidget(self.outliner, stretch=1)

        self.control_panel = ControlPanel(event_bus, library)
        main_layout.addWidget(self.control_panel)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        mono = QFont("monospace", 9)
        self.model_label = QLabel("Model: -")
        self.model_label.setFont(mono)
        self.naming_label = QLabel("Naming: off")
        self.naming_label.setFont(mono)
        self.status_bar.addPermanentWidget(self.model_label)
        self.status_bar.addPermanentWidget(self.naming_label)

        event_bus.subscribe(EventType.MODEL_LOADED, self._on_model_loaded)
        event_bus.subscribe(EventType.MODEL_LOAD_FAILED, self._on_model_failed)
        event_bus.subscribe(EventType.SESSION_STARTED, self._on_session_started)
        event_bus.subscribe(EventType.SESSION_ENDED, self._on_session_ended)

    @property
    def naming_panel(self):
        return self.control_panel.naming_panel

    def _on_model_loaded(self, key: str = "", model=None, **kw):
        nodes = node_count(model) if model is not None else 0
        self.model_label.setText(f"Model: {key} ({nodes} nodes)")
        self.control_panel.select_model(key)

    def _on_model_failed(self, key: str = "", error: str = "", **kw):
        self.model_label.setText(f"Model: {key} (failed)")
        self.status_bar.showMessage(f"Failed to load {key}: {error}", 5000)

    def _on_session_started(self, features: int = 0, attachments: int = 0,
                            pivots: int = 0, skipped: int = 0, **kw):
        text = f"Naming: {features} features, {attachments} attached, {pivots} pivots"
        if skipped:
            text += f", {skipped} skipped"
        self.naming_label.setText(text)

    def _on_session_ended(self, **kw):
        self.naming_label.setText("Naming: off")
