"""Label + QSlider + value display widget for bounded float controls."""

from PySide6.QtWidgets import QWidget, QHBoxLayout, QSlider, QLabel, QSizePolicy
from PySide6.QtCore import Qt, Signal


class SliderRow(QWidget):
    """Horizontal row: label, slider, and numeric value display.

    Maps an integer slider range (0-1000) onto ``[min_val, max_val]``.
    Values outside the range are clamped by the row itself.
    """

    value_changed = Signal(float)

    _SLIDER_STEPS = 1000

    def __init__(
        self,
        label: str,
        min_val: float,
        max_val: float,
        value: float,
        decimals: int = 2,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._min_val = min_val
        self._max_val = max_val
        self._decimals = decimals
        self._emitting = True

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 1, 0, 1)
        layout.setSpacing(6)

        self._label = QLabel(label)
        self._label.setObjectName("sliderLabel")
        self._label.setFixedWidth(120)
        self._label.setToolTip(label)
        layout.addWidget(self._label)

        self._slider = QSlider(Qt.Orientation.Horizontal)
        self._slider.setRange(0, self._SLIDER_STEPS)
        self._slider.setPageStep(50)
        self._slider.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self._slider.valueChanged.connect(self._on_slider_changed)
        layout.addWidget(self._slider)

        self._value_label = QLabel()
        self._value_label.setObjectName("valueLabel")
        self._value_label.setFixedWidth(48)
        self._value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        layout.addWidget(self._value_label)

        self._value = min_val
        self.set_value(value)

    # ── Properties ──

    @property
    def label(self) -> str:
        return self._label.text()

    @property
    def value(self) -> float:
        return self._value

    @property
    def range(self) -> tuple[float, float]:
        return self._min_val, self._max_val

    # ── Public API ──

    def set_value(self, val: float) -> None:
        """Set the value programmatically *without* emitting value_changed."""
        self._emitting = False
        self._value = max(self._min_val, min(self._max_val, val))
        self._slider.setValue(self._float_to_int(self._value))
        self._update_display(self._value)
        self._emitting = True

    # ── Internal ──

    def _float_to_int(self, val: float) -> int:
        span = self._max_val - self._min_val
        if span <= 0:
            return 0
        return round((val - self._min_val) / span * self._SLIDER_STEPS)

    def _int_to_float(self, ival: int) -> float:
        frac = ival / self._SLIDER_STEPS
        return self._min_val + frac * (self._max_val - self._min_val)

    def _update_display(self, val: float) -> None:
        self._value_label.setText(f"{val:.{self._decimals}f}")

    def _on_slider_changed(self, ival: int) -> None:
        if not self._emitting:
            return
        self._value = self._int_to_float(ival)
        self._update_display(self._value)
        self.value_changed.emit(self._value)
