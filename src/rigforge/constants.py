"""Shared constants and paths for RigForge."""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
CONFIG_DIR = ASSETS_DIR / "config"
MODELS_DIR = ASSETS_DIR / "models"
MODEL_REGISTRY_FILE = "models.json"

# Standard naming prefixes
FEATURE_PREFIX = "Feature_"
ATTACHED_PREFIX = "Attached_"
PIVOT_PREFIX = "Pivot_"
NAME_DELIMITER = "_"
VALID_AXES = ("X", "Y", "Z")

# Feature slider ranges
SCALE_MIN_FLOOR = 0.01
SCALE_RANGE_FACTOR = 10.0
ROTATION_LIMIT_DEG = 180.0

# Generated GUI folder titles
FEATURES_FOLDER_TITLE = "Features"
ATTACHMENTS_FOLDER_TITLE = "Attachments Info"

# Viewer defaults
DEFAULT_MODEL = "abstract_table"
DEFAULT_BACKGROUND = "#1a1d26"
