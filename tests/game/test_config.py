import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest

from scorbble.config import DEFAULT_DATA_DIR, DEFAULT_REGION, Settings, load_settings
from scorbble.dictionary import DEFAULT_DICT_DIR, Region


def test_defaults():
    settings = load_settings({})
    assert settings == Settings()
    assert settings.dict_dir == DEFAULT_DICT_DIR
    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.region is DEFAULT_REGION is Region.INTERNATIONAL


def test_environment_overrides(tmp_path):
    settings = load_settings({
        "SCORBBLE_DICT_DIR": str(tmp_path / "dicts"),
        "SCORBBLE_DATA_DIR": str(tmp_path / "data"),
        "SCORBBLE_REGION": "us",
    })
    assert settings.dict_dir == str(tmp_path / "dicts")
    assert settings.region is Region.NORTH_AMERICAN
    assert settings.games_path == os.path.join(str(tmp_path / "data"), "games.jsonl")
    assert settings.profiles_path == os.path.join(str(tmp_path / "data"), "profiles.jsonl")


def test_bad_region_raises():
    with pytest.raises(ValueError):
        load_settings({"SCORBBLE_REGION": "klingon"})
