from enum import Enum
from typing import AbstractSet

from .dictionary import Region, WordDictionary

MIN_WORD_LENGTH = 2


class ValidationVerdict(Enum):
    TOO_SHORT = "too_short"
    INVALID_CHARACTERS = "invalid_characters"
    VALID = "valid"
    NOT_FOUND = "not_found"

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    @property
    def is_acceptable(self) -> bool:
        return self is ValidationVerdict.VALID


_MESSAGES = {
    ValidationVerdict.TOO_SHORT: "Enter a word (2+ letters)",
    ValidationVerdict.INVALID_CHARACTERS: "Letters only",
    ValidationVerdict.VALID: "Valid word ✓",
    ValidationVerdict.NOT_FOUND: "Not in dictionary",
}


def classify(raw_input: str, word_list: AbstractSet[str]) -> ValidationVerdict:
    """Classify a typed word against one regional word list.

    NOT_FOUND only means the list does not know the word; whether the score
    may still be recorded is up to the caller.
    """
    word = raw_input.strip().lower()
    if len(word) < MIN_WORD_LENGTH:
        return ValidationVerdict.TOO_SHORT
    if not all('a' <= ch <= 'z' for ch in word):
        return ValidationVerdict.INVALID_CHARACTERS
    if word in word_list:
        return ValidationVerdict.VALID
    return ValidationVerdict.NOT_FOUND


def classify_in(raw_input: str, dictionary: WordDictionary, region: Region) -> ValidationVerdict:
    return classify(raw_input, dictionary.word_list(region))
