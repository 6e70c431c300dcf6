from dataclasses import dataclass, field
from typing import Any, Dict, List

from .scoring import RACK_SIZE, score_word
from .tiles import MULTIPLIERS, Tile, sync_tiles


@dataclass
class CandidateWord:
    """The word being typed for the current turn, with its bonus state.

    Owned by a single editing session; callers sharing one across threads
    must serialize access themselves.
    """

    text: str = ""
    tiles: List[Tile] = field(default_factory=list)
    word_multiplier: int = 1
    has_bingo: bool = False

    def update_text(self, raw_input: str) -> None:
        previous_count = len(self.tiles)
        self.text = raw_input
        self.tiles = sync_tiles(raw_input, self.tiles)
        count = len(self.tiles)
        if count < RACK_SIZE:
            self.has_bingo = False
        elif count == RACK_SIZE and previous_count != RACK_SIZE:
            self.has_bingo = True
        # 8+ tiles: left as the user last set it

    def cycle_multiplier_at(self, index: int) -> None:
        if 0 <= index < len(self.tiles):
            self.tiles[index].cycle_multiplier()

    def set_multiplier_at(self, index: int, value: int) -> None:
        if 0 <= index < len(self.tiles):
            self.tiles[index].set_multiplier(value)

    def set_blank_at(self, index: int, blank: bool) -> None:
        if 0 <= index < len(self.tiles):
            self.tiles[index].set_blank(blank)

    def toggle_blank_at(self, index: int) -> None:
        if 0 <= index < len(self.tiles):
            self.tiles[index].toggle_blank()

    def set_word_multiplier(self, value: int) -> None:
        if value not in MULTIPLIERS:
            raise ValueError(f"Word multiplier must be 1, 2 or 3, got {value}")
        self.word_multiplier = value

    def set_bingo(self, value: bool) -> None:
        # only meaningful once a full rack's worth of tiles is down
        if len(self.tiles) >= RACK_SIZE:
            self.has_bingo = bool(value)

    @property
    def score(self) -> int:
        return score_word(self.tiles, self.word_multiplier, self.has_bingo)

    @property
    def letters(self) -> str:
        return "".join(t.letter for t in self.tiles)

    def reset(self) -> None:
        self.text = ""
        self.tiles = []
        self.word_multiplier = 1
        self.has_bingo = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "tiles": [
                {
                    "letter": t.letter,
                    "multiplier": t.multiplier,
                    "isBlank": t.is_blank,
                    "points": t.points,
                }
                for t in self.tiles
            ],
            "wordMultiplier": self.word_multiplier,
            "hasBingo": self.has_bingo,
            "score": self.score,
        }
