"""Naming session: owns the generated controls for one loaded model."""

import logging
from typing import Callable, Optional, Protocol

from rigforge.constants import ATTACHMENTS_FOLDER_TITLE, FEATURES_FOLDER_TITLE
from rigforge.core.events import EventBus, EventType
from rigforge.core.scene_graph import SceneNode
from rigforge.naming.attachments import propagate_attachments
from rigforge.naming.controls import FeatureControl, bind_feature_controls
from rigforge.naming.scan import ScanResult, scan_scene

logger = logging.getLogger(__name__)


class GuiFolder(Protocol):
    """A collapsible grouping of controls provided by the GUI host."""

    def add_slider(
        self,
        label: str,
        min_val: float,
        max_val: float,
        value: float,
        on_change: Callable[[float], object],
    ) -> object: ...

    def add_readout(self, label: str, value: float) -> object: ...

    def destroy(self) -> None: ...


class GuiHost(Protocol):
    def add_folder(self, title: str, expanded: bool = True) -> GuiFolder: ...


class NamingSession:
    """Scan-and-bind lifecycle for one model at a time.

    ``begin`` always tears down the previous session first, so controls from
    one model never survive into the next.
    """

    def __init__(self, gui: GuiHost, event_bus: Optional[EventBus] = None):
        self._gui = gui
        self._bus = event_bus
        self._folders: list[GuiFolder] = []
        self._controls: list[FeatureControl] = []
        self._scan: Optional[ScanResult] = None

    @property
    def controls(self) -> tuple[FeatureControl, ...]:
        return tuple(self._controls)

    @property
    def scan_result(self) -> Optional[ScanResult]:
        return self._scan

    @property
    def is_active(self) -> bool:
        return self._scan is not None

    def begin(self, root: SceneNode) -> ScanResult:
        """Scan *root*, generate controls and run the initial attachment pass."""
        self.end()

        scan = scan_scene(root)
        self._scan = scan
        self._controls = bind_feature_controls(scan, on_applied=self._on_applied)

        if self._controls:
            folder = self._gui.add_folder(FEATURES_FOLDER_TITLE, expanded=True)
            self._folders.append(folder)
            for control in self._controls:
                folder.add_slider(
                    control.label, control.min_val, control.max_val,
                    control.value, control.set_value,
                )

        if scan.attachments or scan.pivots:
            folder = self._gui.add_folder(ATTACHMENTS_FOLDER_TITLE, expanded=False)
            self._folders.append(folder)
            folder.add_readout("Attached Objects", len(scan.attachments))
            folder.add_readout("Pivot Objects", len(scan.pivots))

        propagate_attachments(scan.attachments, scan.index)

        logger.info("Standard naming setup complete: %s", scan.summary())
        if scan.skipped:
            logger.info("Standard naming skipped %d names", len(scan.skipped))
        if self._bus is not None:
            self._bus.publish(
                EventType.SESSION_STARTED,
                features=len(scan.features),
                attachments=len(scan.attachments),
                pivots=len(scan.pivots),
                skipped=len(scan.skipped),
            )
        return scan

    def end(self) -> None:
        """Destroy every generated folder and control; safe to repeat."""
        was_active = self.is_active
        for folder in self._folders:
            folder.destroy()
        self._folders.clear()
        self._controls.clear()
        self._scan = None
        if was_active and self._bus is not None:
            self._bus.publish(EventType.SESSION_ENDED)

    def _on_applied(self, control: FeatureControl, moved: int) -> None:
        if self._bus is not None:
            self._bus.publish(
                EventType.FEATURE_CHANGED,
                label=control.label, value=control.value, moved=moved,
            )
