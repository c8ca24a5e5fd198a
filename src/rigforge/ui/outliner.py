"""Scene outliner: the viewer's node tree with live world positions."""

from typing import Optional

from PySide6.QtWidgets import QTreeWidget, QTreeWidgetItem, QWidget

from rigforge.constants import DEFAULT_BACKGROUND
from rigforge.core.events import EventBus, EventType
from rigforge.core.scene_graph import SceneNode


def _format_position(node: SceneNode) -> str:
    x, y, z = node.get_world_position()
    return f"{x:8.3f} {y:8.3f} {z:8.3f}"


class OutlinerView(QTreeWidget):
    """Tree of the current model's nodes (name, kind, world position).

    Rebuilt on ``MODEL_LOADED``; positions refresh on ``FEATURE_CHANGED``
    and ``SESSION_STARTED``.
    """

    def __init__(self, event_bus: EventBus, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._bus = event_bus
        self._root: Optional[SceneNode] = None
        self._items: list[tuple[SceneNode, QTreeWidgetItem]] = []
        self._background = DEFAULT_BACKGROUND

        self.setColumnCount(3)
        self.setHeaderLabels(["Node", "Kind", "World Position"])
        self.setColumnWidth(0, 260)
        self.setColumnWidth(1, 70)
        self.set_background(DEFAULT_BACKGROUND)

        event_bus.subscribe(EventType.MODEL_LOADED, self._on_model_loaded)
        event_bus.subscribe(EventType.MODEL_LOAD_FAILED, self._on_model_failed)
        event_bus.subscribe(EventType.FEATURE_CHANGED, self._on_positions_changed)
        event_bus.subscribe(EventType.SESSION_STARTED, self._on_positions_changed)
        event_bus.subscribe(EventType.BACKGROUND_COLOR_CHANGED, self._on_background)

    @property
    def background(self) -> str:
        return self._background

    def set_root(self, root: Optional[SceneNode]) -> None:
        """Rebuild the tree for *root* (or clear it)."""
        self.clear()
        self._items.clear()
        self._root = root
        if root is None:
            return
        self.addTopLevelItem(self._build_item(root))
        self.expandAll()

    def refresh_positions(self) -> None:
        for node, item in self._items:
            item.setText(2, _format_position(node))

    def set_background(self, color: str) -> None:
        self._background = color
        self.setStyleSheet(f"QTreeWidget {{ background-color: {color}; }}")

    def _build_item(self, node: SceneNode) -> QTreeWidgetItem:
        item = QTreeWidgetItem([
            node.name or "(unnamed)",
            node.kind.name.lower(),
            _format_position(node),
        ])
        self._items.append((node, item))
        for child in node.children:
            item.addChild(self._build_item(child))
        return item

    # ── Event handlers ──

    def _on_model_loaded(self, model: Optional[SceneNode] = None, **kw):
        self.set_root(model)

    def _on_model_failed(self, **kw):
        self.set_root(None)

    def _on_positions_changed(self, **kw):
        self.refresh_positions()

    def _on_background(self, color: str = DEFAULT_BACKGROUND, **kw):
        self.set_background(color)
