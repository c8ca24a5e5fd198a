"""Tests for the model registry."""

import numpy as np
import pytest

from rigforge.constants import DEFAULT_MODEL
from rigforge.core.models import ModelConfig, ModelLibrary


def _library():
    return ModelLibrary.from_dict({
        "models": {
            "house": {"path": "house.json", "scale": [0.15, 0.15, 0.15]},
            "abstract_table": {"path": "abstract_table.json", "standard_naming": True,
                               "label": "Abstract Table"},
        }
    })


def test_keys_keep_file_order():
    assert _library().keys() == ["house", "abstract_table"]


def test_defaults_and_overrides():
    library = _library()
    house = library.get("house")
    assert house.standard_naming is False
    assert house.label == "house"
    np.testing.assert_array_almost_equal(house.scale, [0.15, 0.15, 0.15])
    np.testing.assert_array_equal(house.position, [0, 0, 0])

    table = library.get("abstract_table")
    assert table.standard_naming is True
    assert table.label == "Abstract Table"


def test_unknown_key_raises():
    with pytest.raises(KeyError, match="Unknown model key"):
        _library().get("spaceship")


def test_contains_and_len():
    library = _library()
    assert "house" in library
    assert "spaceship" not in library
    assert len(library) == 2


def test_model_config_requires_path():
    with pytest.raises(KeyError):
        ModelConfig.from_dict("broken", {})


def test_shipped_registry_has_default_model():
    library = ModelLibrary.from_config()
    assert DEFAULT_MODEL in library
    assert library.get(DEFAULT_MODEL).standard_naming is True
