import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import json

from scorbble.game import Player
from scorbble.storage import GameStorage, ProfileStorage, SavedGame


def players(*scores):
    names = ["Emma", "Kieran", "Sarah", "Mike"]
    return [Player(names[i], score=s) for i, s in enumerate(scores)]


def test_winner_and_tie():
    game = SavedGame.from_players(players(287, 245, 198))
    assert game.winner_name == "Emma" and game.winner_score == 287
    assert not game.is_tie
    assert game.total_points == 730 and game.player_count == 3

    tie = SavedGame.from_players(players(100, 100, 50))
    assert tie.is_tie and tie.winner_name == "Tie" and tie.winner_score == 100

    empty = SavedGame.from_players([])
    assert empty.winner_name == "Unknown" and empty.winner_score == 0


def test_games_round_trip_through_file(tmp_path):
    path = str(tmp_path / "games.jsonl")
    store = GameStorage(path)
    first = store.save_players(players(10, 20))
    second = store.save_players(players(50, 5))
    assert [g.id for g in store.saved_games] == [second.id, first.id]

    reloaded = GameStorage(path)
    assert [g.id for g in reloaded.saved_games] == [second.id, first.id]
    assert reloaded.saved_games[1].players[1].name == "Kieran"
    assert reloaded.saved_games[1].players[1].score == 20


def test_statistics(tmp_path):
    store = GameStorage(str(tmp_path / "games.jsonl"))
    assert store.highest_score is None
    assert store.average_game_score == 0
    store.save_players(players(300, 200))
    store.save_players(players(100, 312))
    store.save_players(players(150, 150))
    store.save_players(players(250, 100))
    assert store.total_games_played == 4
    assert store.leaderboard == [("Emma", 2), ("Kieran", 1)]
    assert store.highest_score == ("Kieran", 312)
    assert store.average_game_score == (300 + 200 + 100 + 312 + 150 + 150 + 250 + 100) // 8


def test_delete_and_clear(tmp_path):
    store = GameStorage(str(tmp_path / "games.jsonl"))
    game = store.save_players(players(1, 2))
    store.save_players(players(3, 4))
    store.delete_at(9)
    assert store.total_games_played == 2
    assert store.delete(game.id)
    assert not store.delete(game.id)
    store.delete_at(0)
    assert store.total_games_played == 0
    store.save_players(players(1, 2))
    store.clear()
    assert GameStorage(store.path).saved_games == []


def test_old_records_without_emoji_and_corrupt_lines(tmp_path):
    path = tmp_path / "games.jsonl"
    record = {
        "id": "g1",
        "date": "2025-12-07T20:15:00",
        "players": [
            {"id": "p1", "name": "Emma", "score": 287, "color_name": "purple"},
            {"id": "p2", "name": "Mike", "score": 198, "color_name": "orange", "emoji": "🎯"},
        ],
        "winner_name": "Emma",
        "winner_score": 287,
    }
    path.write_text("{not json\n" + json.dumps(record) + "\n" + json.dumps({"id": "x"}) + "\n", encoding="utf-8")
    store = GameStorage(str(path))
    assert len(store.saved_games) == 1
    assert store.saved_games[0].players[0].emoji == "😊"
    assert store.saved_games[0].players[1].emoji == "🎯"


def test_saving_updates_profile_stats(tmp_path):
    profiles = ProfileStorage(str(tmp_path / "profiles.jsonl"))
    profiles.get_or_create("emma", "purple")
    profiles.get_or_create("Kieran")
    store = GameStorage(str(tmp_path / "games.jsonl"), profiles=profiles)
    store.save_players(players(120, 80))
    store.save_players(players(90, 90))

    emma = profiles.find("EMMA")
    kieran = profiles.find("kieran")
    assert emma.games_played == 2 and emma.total_wins == 1 and emma.highest_score == 120
    assert kieran.games_played == 2 and kieran.total_wins == 0 and kieran.highest_score == 90
    assert emma.win_rate == 50 and kieran.win_rate == 0
    assert emma.last_played is not None


def test_profiles(tmp_path):
    path = str(tmp_path / "profiles.jsonl")
    profiles = ProfileStorage(path)
    sarah = profiles.get_or_create("Sarah", "green")
    assert profiles.get_or_create("SARAH", "red") is sarah
    mike = profiles.get_or_create("Mike", "orange")
    profiles.get_or_create("Emma")
    profiles.update_stats("Mike", 200, True)
    profiles.update_stats("Nobody", 999, True)
    profiles.update_preferred_color("sarah", "pink")

    reloaded = ProfileStorage(path)
    assert reloaded.find("sarah").preferred_color_name == "pink"
    assert reloaded.find("Mike").win_rate == 100
    assert reloaded.find("Nobody") is None
    assert reloaded.recent_profiles[0].name == "Mike"
    assert [p.name for p in reloaded.search("a")] == ["Sarah", "Emma"]
    assert reloaded.search("")[0].name == "Mike"

    assert reloaded.delete(mike.id)
    assert not reloaded.delete(mike.id)
    reloaded.clear()
    assert ProfileStorage(path).profiles == []


def test_undecodable_lines_are_skipped(tmp_path):
    games_path = tmp_path / "games.jsonl"
    good = SavedGame.from_players(players(40, 30))
    games_path.write_bytes(b"\xff\n" + json.dumps(good.to_dict()).encode("utf-8") + b"\n")
    store = GameStorage(str(games_path))
    assert [g.id for g in store.saved_games] == [good.id]

    profiles_path = tmp_path / "profiles.jsonl"
    profiles_path.write_bytes(b'{"id": "a", "name": "Emma"}\n\xfe\xff garbage\n')
    profiles = ProfileStorage(str(profiles_path))
    assert [p.name for p in profiles.profiles] == ["Emma"]
