"""Collapsible folder: arrow header over a column of control rows."""

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel
from PySide6.QtCore import Signal


class CollapsibleFolder(QWidget):
    """A titled group of rows that can be expanded or collapsed.

    Layout::

        ▶ Title        (collapsed)
        ▼ Title        (expanded)
           row
           row
    """

    expanded_changed = Signal(bool)

    def __init__(self, title: str, expanded: bool = True, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._title = title
        self._rows: list[QWidget] = []

        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(0, 0, 0, 4)
        root_layout.setSpacing(0)

        header = QWidget()
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(0, 1, 0, 1)
        header_layout.setSpacing(4)

        self._arrow_btn = QPushButton("▶")
        self._arrow_btn.setFixedSize(16, 16)
        self._arrow_btn.setFlat(True)
        self._arrow_btn.setStyleSheet(
            "QPushButton { color: #8899aa; border: none; font-size: 10px; padding: 0; }"
        )
        self._arrow_btn.clicked.connect(self.toggle)
        header_layout.addWidget(self._arrow_btn)

        self._title_label = QLabel(title)
        self._title_label.setObjectName("folderTitle")
        header_layout.addWidget(self._title_label)
        header_layout.addStretch()
        root_layout.addWidget(header)

        self._content = QWidget()
        self._content_layout = QVBoxLayout(self._content)
        self._content_layout.setContentsMargins(20, 0, 0, 0)
        self._content_layout.setSpacing(1)
        root_layout.addWidget(self._content)

        self._expanded = True
        if expanded:
            self.expand()
        else:
            self.collapse()

    @property
    def title(self) -> str:
        return self._title

    @property
    def rows(self) -> list[QWidget]:
        return list(self._rows)

    @property
    def is_expanded(self) -> bool:
        # Tracked separately from isVisible(), which is False until shown.
        return self._expanded

    def add_row(self, row: QWidget) -> QWidget:
        self._rows.append(row)
        self._content_layout.addWidget(row)
        return row

    def expand(self) -> None:
        self._expanded = True
        self._content.setVisible(True)
        self._arrow_btn.setText("▼")
        self.expanded_changed.emit(True)

    def collapse(self) -> None:
        self._expanded = False
        self._content.setVisible(False)
        self._arrow_btn.setText("▶")
        self.expanded_changed.emit(False)

    def toggle(self) -> None:
        if self._expanded:
            self.collapse()
        else:
            self.expand()
