from types import MappingProxyType
from typing import Mapping

# Standard English Scrabble letter scores
LETTER_SCORES: Mapping[str, int] = MappingProxyType({
    **{c: 1 for c in list("AEILNORSTU")},
    **{c: 2 for c in list("DG")},
    **{c: 3 for c in list("BCMP")},
    **{c: 4 for c in list("FHVWY")},
    "K": 5,
    **{c: 8 for c in list("JX")},
    **{c: 10 for c in list("QZ")},
})

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def is_ascii_letter(ch: str) -> bool:
    return len(ch) == 1 and ('A' <= ch <= 'Z' or 'a' <= ch <= 'z')


def point_value(letter: str) -> int:
    """Face value of a single letter tile, case-insensitive.

    Anything that is not one ASCII letter (digits, punctuation, '', 'AB', 'É')
    is worth 0 rather than an error.
    """
    if not isinstance(letter, str) or not is_ascii_letter(letter):
        return 0
    return LETTER_SCORES[letter.upper()]
