"""Model switching: unload, dispose, load, place and scan."""

import logging
from typing import Optional

from rigforge.core.config_loader import resolve_model_path
from rigforge.core.events import EventBus, EventType
from rigforge.core.models import ModelLibrary
from rigforge.core.scene_graph import Scene, SceneNode, dispose_tree
from rigforge.loaders.scene_loader import SceneLoadError, load_scene_file
from rigforge.naming.session import NamingSession

logger = logging.getLogger(__name__)


class ModelSwitcher:
    """Keeps exactly one model in the scene and one naming session alive."""

    def __init__(
        self,
        scene: Scene,
        library: ModelLibrary,
        session: NamingSession,
        event_bus: EventBus,
    ):
        self.scene = scene
        self.library = library
        self.session = session
        self._bus = event_bus
        self.current_key: Optional[str] = None
        self.current_model: Optional[SceneNode] = None

    def unload(self) -> None:
        """Remove and dispose the current model and end its naming session."""
        if self.current_model is not None:
            self.scene.remove(self.current_model)
            released = dispose_tree(self.current_model)
            logger.debug("Disposed %d meshes from %s", released, self.current_key)
            self.current_model = None
            self.current_key = None
        self.session.end()

    def load(self, key: str) -> SceneNode:
        """Load and place the model registered under *key*."""
        cfg = self.library.get(key)
        model = load_scene_file(resolve_model_path(cfg.path))
        model.set_position(*cfg.position)
        model.set_scale(*cfg.scale)
        self.scene.add(model)
        self.current_key = key
        self.current_model = model
        try:
            self.scene.update()
            if cfg.standard_naming:
                self.session.begin(model)
        except Exception:
            self.unload()
            raise
        return model

    def switch_model(self, key: str) -> bool:
        """Swap to *key*; returns False (and publishes the error) on failure."""
        self.unload()
        try:
            self.load(key)
        except (KeyError, SceneLoadError) as e:
            logger.exception("Failed to switch model to %s", key)
            self._bus.publish(EventType.MODEL_LOAD_FAILED, key=key, error=str(e))
            return False

        logger.info("Switched to: %s", key)
        self._bus.publish(EventType.MODEL_LOADED, key=key, model=self.current_model)
        return True
