"""JSON config file loading utilities."""

import json
from pathlib import Path
from typing import Any

from rigforge.constants import CONFIG_DIR, MODELS_DIR


def load_json(path: Path) -> Any:
    """Load and return parsed JSON from a file."""
    with open(path) as f:
        return json.load(f)


def load_config(name: str) -> Any:
    """Load a config file from assets/config/."""
    return load_json(CONFIG_DIR / name)


def resolve_model_path(path: str) -> Path:
    """Resolve a registry path; relative paths live under assets/models/."""
    p = Path(path)
    if p.is_absolute():
        return p
    return MODELS_DIR / p
