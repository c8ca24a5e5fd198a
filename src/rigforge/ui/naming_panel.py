"""Qt host for the controls generated by a naming session."""

from typing import Callable

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel

from rigforge.ui.widgets.collapsible_folder import CollapsibleFolder
from rigforge.ui.widgets.readout_row import ReadoutRow
from rigforge.ui.widgets.slider_row import SliderRow


class QtFolder:
    """GuiFolder backed by a :class:`CollapsibleFolder` widget."""

    def __init__(self, panel: "NamingPanel", widget: CollapsibleFolder):
        self._panel = panel
        self.widget = widget
        self.destroyed = False

    def add_slider(
        self,
        label: str,
        min_val: float,
        max_val: float,
        value: float,
        on_change: Callable[[float], object],
    ) -> SliderRow:
        row = SliderRow(label, min_val, max_val, value)
        row.value_changed.connect(on_change)
        self.widget.add_row(row)
        return row

    def add_readout(self, label: str, value: float) -> ReadoutRow:
        row = ReadoutRow(label, value)
        self.widget.add_row(row)
        return row

    def destroy(self) -> None:
        if self.destroyed:
            return
        self.destroyed = True
        self._panel._remove_folder(self)


class NamingPanel(QWidget):
    """Column of generated folders; implements the session's GuiHost."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._folders: list[QtFolder] = []

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(2)

        self._empty_label = QLabel("No standard naming controls")
        self._empty_label.setProperty("dimmed", True)
        self._layout.addWidget(self._empty_label)

    @property
    def folders(self) -> list[QtFolder]:
        return list(self._folders)

    def add_folder(self, title: str, expanded: bool = True) -> QtFolder:
        widget = CollapsibleFolder(title, expanded=expanded)
        folder = QtFolder(self, widget)
        self._folders.append(folder)
        self._layout.addWidget(widget)
        self._empty_label.setVisible(False)
        return folder

    def _remove_folder(self, folder: QtFolder) -> None:
        if folder in self._folders:
            self._folders.remove(folder)
        self._layout.removeWidget(folder.widget)
        folder.widget.setParent(None)
        folder.widget.deleteLater()
        self._empty_label.setVisible(not self._folders)
