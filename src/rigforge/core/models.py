"""Model registry: per-model asset path, placement and naming flag."""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from rigforge.constants import MODEL_REGISTRY_FILE
from rigforge.core.config_loader import load_config
from rigforge.core.math_utils import Vec3, vec3

logger = logging.getLogger(__name__)


@dataclass
class ModelConfig:
    """Registry entry for one selectable model."""
    key: str
    path: str
    position: Vec3 = field(default_factory=vec3)
    scale: Vec3 = field(default_factory=lambda: vec3(1, 1, 1))
    standard_naming: bool = False
    label: str = ""

    def __post_init__(self):
        if not self.label:
            self.label = self.key

    @classmethod
    def from_dict(cls, key: str, data: dict[str, Any]) -> "ModelConfig":
        position = data.get("position", (0.0, 0.0, 0.0))
        scale = data.get("scale", (1.0, 1.0, 1.0))
        return cls(
            key=key,
            path=data["path"],
            position=vec3(*position),
            scale=vec3(*scale),
            standard_naming=bool(data.get("standard_naming", False)),
            label=data.get("label", ""),
        )


class ModelLibrary:
    """Ordered collection of :class:`ModelConfig` keyed by model key."""

    def __init__(self, models: Optional[list[ModelConfig]] = None):
        self._models: dict[str, ModelConfig] = {}
        for cfg in models or []:
            self._models[cfg.key] = cfg

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModelLibrary":
        models = [ModelConfig.from_dict(key, entry) for key, entry in data.get("models", {}).items()]
        return cls(models)

    @classmethod
    def from_config(cls, name: str = MODEL_REGISTRY_FILE) -> "ModelLibrary":
        """Load the registry from assets/config/."""
        library = cls.from_dict(load_config(name))
        logger.info("Model registry loaded: %d models", len(library))
        return library

    def __len__(self) -> int:
        return len(self._models)

    def __contains__(self, key: str) -> bool:
        return key in self._models

    def keys(self) -> list[str]:
        return list(self._models)

    def get(self, key: str) -> ModelConfig:
        try:
            return self._models[key]
        except KeyError:
            raise KeyError(f"Unknown model key: {key}") from None
