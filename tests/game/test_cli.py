import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest

from scorbble.cli import main
from scorbble.game import Player
from scorbble.storage import GameStorage

DICT_DIR = os.path.join(ROOT, "dictionaries")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SCORBBLE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("SCORBBLE_DICT_DIR", DICT_DIR)
    monkeypatch.delenv("SCORBBLE_REGION", raising=False)


def test_score_plain_word(capsys):
    assert main(["score", "quartz"]) == 0
    out = capsys.readouterr().out
    assert "Score: 24" in out
    assert "QUARTZ: Valid word" in out


def test_score_with_bonuses(capsys):
    assert main(["score", "QUARTZ", "--word-mult", "2", "--dl", "1", "--blank", "6", "--tl", "99"]) == 0
    out = capsys.readouterr().out
    # (Q20 + U1 + A1 + R1 + T1 + blank Z0) * 2
    assert "Score: 48 (word x2)" in out
    assert "Qx2" in out and "Z*" in out


def test_seven_letters_get_bingo_unless_disabled(capsys):
    main(["score", "puzzled"])
    assert "Score: 78 (bingo +50)" in capsys.readouterr().out
    main(["score", "puzzled", "--no-bingo"])
    assert "Score: 28" in capsys.readouterr().out


def test_check_regions(capsys):
    assert main(["check", "colour", "--region", "us"]) == 1
    assert "Not in dictionary" in capsys.readouterr().out
    assert main(["check", "colour", "--region", "uk"]) == 0
    assert main(["check", "a7"]) == 1
    assert "Letters only" in capsys.readouterr().out


def test_bad_region_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["check", "cat", "--region", "mars"])
    assert exc.value.code == 2


def test_history(capsys, tmp_path):
    assert main(["history"]) == 0
    assert "No saved games." in capsys.readouterr().out
    store = GameStorage(os.path.join(str(tmp_path / "data"), "games.jsonl"))
    store.save_players([Player("Emma", score=287), Player("Kieran", score=245)])
    assert main(["history"]) == 0
    out = capsys.readouterr().out
    assert "Emma won (287)" in out
    assert "Wins: Emma 1" in out


def test_letter_bonuses_are_assigned_not_stacked(capsys):
    assert main(["score", "QI", "--dl", "1", "1"]) == 0
    out = capsys.readouterr().out
    # Q doubled once (20) + I
    assert "Score: 21" in out and "Qx2" in out
    assert main(["score", "QI", "--tl", "1", "--blank", "2", "2"]) == 0
    out = capsys.readouterr().out
    assert "Score: 30" in out and "I*" in out


def test_same_position_on_double_and_triple_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["score", "QI", "--dl", "1", "--tl", "1"])
    assert exc.value.code == 2
    assert "--dl and --tl" in capsys.readouterr().err
