import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest

from scorbble.letters import LETTER_SCORES, point_value


EXPECTED = {
    1: "AEIOULNSTR",
    2: "DG",
    3: "BCMP",
    4: "FHVWY",
    5: "K",
    8: "JX",
    10: "QZ",
}


def test_every_letter_has_standard_value():
    seen = set()
    for value, letters in EXPECTED.items():
        for ch in letters:
            assert point_value(ch) == value
            assert point_value(ch.lower()) == value
            seen.add(ch)
    assert seen == set("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    assert set(LETTER_SCORES) == seen
    assert set(LETTER_SCORES.values()) == {1, 2, 3, 4, 5, 8, 10}


@pytest.mark.parametrize("junk", ["", "7", "?", " ", "-", "AB", "É", "ß"])
def test_non_letters_score_zero(junk):
    assert point_value(junk) == 0


def test_table_is_read_only():
    with pytest.raises(TypeError):
        LETTER_SCORES["A"] = 5  # type: ignore[index]
