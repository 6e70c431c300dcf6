"""Regional word lists, loaded once and queried by region."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Dict, FrozenSet, Optional

from .builtin_words import ALTERNATE_SPELLINGS, BUILTIN_WORDS
from .letters import is_ascii_letter

log = logging.getLogger(__name__)

DEFAULT_DICT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../dictionaries"))
BASELINE_FILE = "twl_small.txt"
ALTERNATES_FILE = "intl_spellings.txt"


class Region(Enum):
    NORTH_AMERICAN = "north_american"
    INTERNATIONAL = "international"

    @property
    def label(self) -> str:
        return "US/Canada (TWL)" if self is Region.NORTH_AMERICAN else "UK/International (SOWPODS)"

    @staticmethod
    def parse(text: str) -> "Region":
        key = (text or "").strip().lower().replace("-", "_")
        if key in _REGION_ALIASES:
            return _REGION_ALIASES[key]
        raise ValueError(f"Unknown region: {text!r}")


_REGION_ALIASES: Dict[str, Region] = {
    "us": Region.NORTH_AMERICAN,
    "na": Region.NORTH_AMERICAN,
    "twl": Region.NORTH_AMERICAN,
    "north_american": Region.NORTH_AMERICAN,
    "uk": Region.INTERNATIONAL,
    "intl": Region.INTERNATIONAL,
    "sowpods": Region.INTERNATIONAL,
    "international": Region.INTERNATIONAL,
}


def load_word_list(path: str) -> FrozenSet[str]:
    # one word per line; '#' comments, blanks and non-letter entries are skipped
    with open(path, "r", encoding="utf-8") as f:
        words = set()
        for line in f:
            word = line.strip().lower()
            if not word or word.startswith("#"):
                continue
            if all(is_ascii_letter(ch) for ch in word):
                words.add(word)
    return frozenset(words)


class WordDictionary:
    """Immutable per-region word sets.

    The international set is always the north-american set plus the
    alternate regional spellings, so it is a superset by construction.
    """

    def __init__(self, baseline: FrozenSet[str], alternates: FrozenSet[str], source: str = "builtin"):
        self.source = source
        self._lists: Dict[Region, FrozenSet[str]] = {
            Region.NORTH_AMERICAN: frozenset(baseline),
            Region.INTERNATIONAL: frozenset(baseline) | frozenset(alternates),
        }

    @classmethod
    def builtin(cls) -> "WordDictionary":
        return cls(BUILTIN_WORDS, ALTERNATE_SPELLINGS, source="builtin")

    @classmethod
    def load(cls, dict_dir: Optional[str] = None) -> "WordDictionary":
        """Load the bundled word lists, falling back to the built-in table.

        A missing or empty baseline file switches both regions to the built-in
        table; a missing alternates file only replaces the alternate spellings.
        """
        dict_dir = dict_dir or DEFAULT_DICT_DIR
        baseline_path = os.path.join(dict_dir, BASELINE_FILE)
        try:
            baseline = load_word_list(baseline_path)
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Could not read %s (%s) -- using built-in word list.", baseline_path, exc)
            return cls.builtin()
        if not baseline:
            log.warning("%s contained no words -- using built-in word list.", baseline_path)
            return cls.builtin()

        alternates_path = os.path.join(dict_dir, ALTERNATES_FILE)
        try:
            alternates = load_word_list(alternates_path)
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Could not read %s (%s) -- using built-in alternate spellings.", alternates_path, exc)
            alternates = ALTERNATE_SPELLINGS

        log.info("Loaded %s words from %s", f"{len(baseline):,}", baseline_path)
        return cls(baseline, alternates, source=dict_dir)

    def word_list(self, region: Region) -> FrozenSet[str]:
        return self._lists[region]

    def contains(self, word: str, region: Region) -> bool:
        return word.strip().lower() in self._lists[region]

    def __len__(self) -> int:
        return len(self._lists[Region.INTERNATIONAL])
