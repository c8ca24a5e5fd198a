"""Read-only label/value row."""

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PySide6.QtCore import Qt


class ReadoutRow(QWidget):
    """A disabled numeric display: fixed-width label and a value."""

    def __init__(self, label: str, value: float, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 1, 0, 1)
        layout.setSpacing(6)

        self._label = QLabel(label)
        self._label.setObjectName("sliderLabel")
        self._label.setFixedWidth(120)
        layout.addWidget(self._label)
        layout.addStretch()

        self._value_label = QLabel()
        self._value_label.setObjectName("readoutValue")
        self._value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        layout.addWidget(self._value_label)

        self.setEnabled(False)
        self.set_value(value)

    @property
    def label(self) -> str:
        return self._label.text()

    @property
    def text(self) -> str:
        return self._value_label.text()

    def set_value(self, value: float) -> None:
        if float(value).is_integer():
            self._value_label.setText(str(int(value)))
        else:
            self._value_label.setText(f"{value:.2f}")
