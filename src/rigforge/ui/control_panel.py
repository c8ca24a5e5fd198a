"""Right control panel: model selector, background colour, naming controls."""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QComboBox, QLabel, QScrollArea
from PySide6.QtCore import Qt

from rigforge.constants import DEFAULT_BACKGROUND
from rigforge.core.events import EventBus, EventType
from rigforge.core.models import ModelLibrary
from rigforge.ui.naming_panel import NamingPanel
from rigforge.ui.widgets.color_picker import ColorPicker


def _section_label(text: str) -> QLabel:
    label = QLabel(text.upper())
    label.setObjectName("sectionLabel")
    return label


class ControlPanel(QScrollArea):
    """Debug panel publishing ``MODEL_SELECTED`` and ``BACKGROUND_COLOR_CHANGED``.

    The embedded :class:`NamingPanel` is the GUI host for the naming session.
    """

    def __init__(
        self,
        event_bus: EventBus,
        library: ModelLibrary,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._bus = event_bus
        self._library = library

        self.setObjectName("controlPanel")
        self.setFixedWidth(340)
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(8, 4, 8, 8)
        layout.setSpacing(2)
        self.setWidget(container)

        # ── Model ──
        layout.addWidget(_section_label("Model"))
        self.model_combo = QComboBox()
        for key in library.keys():
            self.model_combo.addItem(library.get(key).label, key)
        self.model_combo.currentIndexChanged.connect(self._on_model_index)
        layout.addWidget(self.model_combo)

        # ── Display ──
        layout.addWidget(_section_label("Display"))
        self.background_picker = ColorPicker("Background", DEFAULT_BACKGROUND)
        self.background_picker.color_changed.connect(self._on_background)
        layout.addWidget(self.background_picker)

        # ── Standard naming ──
        layout.addWidget(_section_label("Standard Naming"))
        self.naming_panel = NamingPanel()
        layout.addWidget(self.naming_panel)

        layout.addStretch()

    def select_model(self, key: str) -> None:
        """Select *key* in the combo box without publishing."""
        index = self.model_combo.findData(key)
        if index < 0:
            return
        self.model_combo.blockSignals(True)
        self.model_combo.setCurrentIndex(index)
        self.model_combo.blockSignals(False)

    def _on_model_index(self, index: int) -> None:
        key = self.model_combo.itemData(index)
        if key is not None:
            self._bus.publish(EventType.MODEL_SELECTED, key=key)

    def _on_background(self, color: str) -> None:
        self._bus.publish(EventType.BACKGROUND_COLOR_CHANGED, color=color)
