from typing import Iterable, Optional, Sequence

from .letters import is_ascii_letter
from .tiles import Tile

BINGO_BONUS = 50
# A bingo means the whole rack went down in one turn
RACK_SIZE = 7


def score_word(tiles: Iterable[Tile], word_multiplier: int = 1, has_bingo: bool = False) -> int:
    """Score one played word.

    Each tile already folds in its own letter multiplier and the blank rule;
    the word multiplier applies to the letter total and the bingo bonus is
    added last, outside the multiplier.
    """
    letter_total = sum(tile.points for tile in tiles)
    total = letter_total * word_multiplier
    if has_bingo:
        total += BINGO_BONUS
    return total


def score_letters(
    word: str,
    letter_multipliers: Optional[Sequence[int]] = None,
    word_multiplier: int = 1,
    has_bingo: bool = False,
) -> int:
    """Score a plain string where lowercase letters are blank tiles.

    ``letter_multipliers`` lines up with the letters of ``word`` (non-letters
    are skipped); missing entries count as 1.
    """
    letters = [ch for ch in word if is_ascii_letter(ch)]
    if letter_multipliers is None:
        letter_multipliers = [1] * len(letters)
    tiles = []
    for i, ch in enumerate(letters):
        mult = letter_multipliers[i] if i < len(letter_multipliers) else 1
        # lowercase -> blank tile (0 points)
        tiles.append(Tile(ch, multiplier=mult, is_blank='a' <= ch <= 'z'))
    return score_word(tiles, word_multiplier, has_bingo)
