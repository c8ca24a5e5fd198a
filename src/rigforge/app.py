"""RigForge application entry point.

Wires together the scene graph, model registry, naming session and UI.
"""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QTimer

from rigforge.constants import DEFAULT_MODEL
from rigforge.coordination.model_switcher import ModelSwitcher
from rigforge.core.events import EventBus, EventType
from rigforge.core.models import ModelLibrary
from rigforge.core.scene_graph import Scene
from rigforge.naming.session import NamingSession
from rigforge.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="rigforge", description="Standard naming model viewer")
    parser.add_argument("--model", default=DEFAULT_MODEL, help="model key to show first")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Launch the viewer."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(name)s: %(message)s")

    app = QApplication(sys.argv)

    event_bus = EventBus()
    library = ModelLibrary.from_config()
    scene = Scene()

    window = MainWindow(event_bus, library)
    session = NamingSession(window.naming_panel, event_bus)
    switcher = ModelSwitcher(scene, library, session, event_bus)

    def on_model_selected(key: str = "", **kw):
        switcher.switch_model(key)

    event_bus.subscribe(EventType.MODEL_SELECTED, on_model_selected)

    initial = args.model
    if initial not in library:
        logger.warning("Unknown model %r, falling back to %r", initial, DEFAULT_MODEL)
        initial = DEFAULT_MODEL

    window.show()
    # Load after the event loop starts so the window paints first.
    QTimer.singleShot(0, lambda: switcher.switch_model(initial))

    exit_code = app.exec()
    switcher.unload()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
