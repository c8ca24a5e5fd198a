"""Color picker button + QColorDialog."""

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton, QColorDialog
from PySide6.QtGui import QColor
from PySide6.QtCore import Signal


class ColorPicker(QWidget):
    """A row with a label and a swatch button that opens a colour dialog.

    Emits ``color_changed`` with the ``#rrggbb`` name of the new colour.
    """

    color_changed = Signal(str)

    def __init__(self, label: str, initial_color: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._color = QColor(initial_color)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 1, 0, 1)
        layout.setSpacing(6)

        self._label = QLabel(label)
        self._label.setObjectName("sliderLabel")
        self._label.setFixedWidth(120)
        layout.addWidget(self._label)

        self._button = QPushButton()
        self._button.setObjectName("colorButton")
        self._button.setFixedSize(28, 22)
        self._button.clicked.connect(self._pick_color)
        layout.addWidget(self._button)
        layout.addStretch()

        self._apply_swatch()

    @property
    def color(self) -> str:
        return self._color.name()

    def set_color(self, color: str) -> None:
        """Set the colour programmatically and notify listeners."""
        new_color = QColor(color)
        if not new_color.isValid():
            return
        self._color = new_color
        self._apply_swatch()
        self.color_changed.emit(self._color.name())

    def _apply_swatch(self) -> None:
        self._button.setStyleSheet(
            f"background-color: {self._color.name()}; border: 1px solid #252830;"
        )

    def _pick_color(self) -> None:
        color = QColorDialog.getColor(self._color, self, "Background Color")
        if color.isValid():
            self.set_color(color.name())
