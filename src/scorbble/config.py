import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .dictionary import DEFAULT_DICT_DIR, Region

DEFAULT_DATA_DIR = os.path.join(os.path.expanduser("~"), ".scorbble")
# The app starts on the international list
DEFAULT_REGION = Region.INTERNATIONAL

GAMES_FILE = "games.jsonl"
PROFILES_FILE = "profiles.jsonl"


@dataclass(frozen=True)
class Settings:
    dict_dir: str = DEFAULT_DICT_DIR
    data_dir: str = DEFAULT_DATA_DIR
    region: Region = DEFAULT_REGION

    @property
    def games_path(self) -> str:
        return os.path.join(self.data_dir, GAMES_FILE)

    @property
    def profiles_path(self) -> str:
        return os.path.join(self.data_dir, PROFILES_FILE)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read SCORBBLE_DICT_DIR, SCORBBLE_DATA_DIR and SCORBBLE_REGION.

    Unset or empty variables keep the defaults; an unknown region raises
    ValueError.
    """
    env = os.environ if environ is None else environ
    region_name = env.get("SCORBBLE_REGION")
    return Settings(
        dict_dir=env.get("SCORBBLE_DICT_DIR") or DEFAULT_DICT_DIR,
        data_dir=env.get("SCORBBLE_DATA_DIR") or DEFAULT_DATA_DIR,
        region=Region.parse(region_name) if region_name else DEFAULT_REGION,
    )
