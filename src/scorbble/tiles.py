from dataclasses import dataclass
from typing import List, Sequence

from .letters import is_ascii_letter, point_value

MULTIPLIERS = (1, 2, 3)


@dataclass
class Tile:
    # letter is always 'A'-'Z'; a blank keeps the letter it stands for
    letter: str
    multiplier: int = 1
    is_blank: bool = False

    def __post_init__(self) -> None:
        if not is_ascii_letter(self.letter):
            raise ValueError(f"Invalid tile letter: {self.letter!r}")
        self.letter = self.letter.upper()
        if self.multiplier not in MULTIPLIERS:
            raise ValueError(f"Letter multiplier must be 1, 2 or 3, got {self.multiplier}")
        if self.is_blank:
            self.multiplier = 1

    @property
    def base_points(self) -> int:
        return 0 if self.is_blank else point_value(self.letter)

    @property
    def points(self) -> int:
        return self.base_points * self.multiplier

    def cycle_multiplier(self) -> None:
        # 1 -> 2 -> 3 -> 1; still cycles on a blank, which keeps scoring 0
        self.multiplier = 1 if self.multiplier == 3 else self.multiplier + 1

    def set_multiplier(self, value: int) -> None:
        if value not in MULTIPLIERS:
            raise ValueError(f"Letter multiplier must be 1, 2 or 3, got {value}")
        self.multiplier = value

    def set_blank(self, blank: bool) -> None:
        self.is_blank = bool(blank)
        if self.is_blank:
            self.multiplier = 1

    def toggle_blank(self) -> None:
        self.set_blank(not self.is_blank)


def normalize_letters(raw: str) -> str:
    """Uppercase ``raw`` and keep only the ASCII letters A-Z.

    Digits, punctuation, whitespace and non-ASCII letters are dropped, so the
    result never depends on the runtime's locale rules.
    """
    return "".join(ch.upper() for ch in raw if is_ascii_letter(ch))


def sync_tiles(raw_input: str, previous_tiles: Sequence[Tile]) -> List[Tile]:
    """Rebuild the tile row for freshly edited text.

    Tiles are kept (same object, bonuses intact) while the new letters match
    ``previous_tiles`` position by position from the start of the word. From
    the first differing position onward every tile is new, so an insertion or
    deletion in the middle of a word resets the bonuses after it.
    """
    letters = normalize_letters(raw_input)
    tiles: List[Tile] = []
    matching = True
    for i, ch in enumerate(letters):
        if matching and i < len(previous_tiles) and previous_tiles[i].letter == ch:
            tiles.append(previous_tiles[i])
        else:
            matching = False
            tiles.append(Tile(ch))
    return tiles


def tiles_for(word: str) -> List[Tile]:
    return sync_tiles(word, [])
