"""Game history and player profile stores.

Both stores keep one JSON record per line, keyed by a stable ``id``, and
rewrite the whole file after every change. A corrupt line is skipped with a
warning instead of losing the rest of the history.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .game import DEFAULT_EMOJI, Player, new_id

log = logging.getLogger(__name__)

TIE = "Tie"
UNKNOWN_WINNER = "Unknown"


def _parse_date(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _read_records(path: str) -> List[Dict[str, Any]]:
    records: List[Dict[str, Any]] = []
    if not os.path.exists(path):
        return records
    # undecodable bytes become U+FFFD so the line fails json.loads and is skipped
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as exc:
                log.warning("Skipping corrupt record %s:%d (%s)", path, lineno, exc)
                continue
            if isinstance(data, dict):
                records.append(data)
    return records


def _write_records(path: str, records: Sequence[Dict[str, Any]]) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for entry in records:
            f.write(json.dumps(entry, ensure_ascii=False) + "\n")


@dataclass
class SavedPlayer:
    name: str
    score: int
    color_name: str
    emoji: str = DEFAULT_EMOJI
    id: str = field(default_factory=new_id)

    @staticmethod
    def from_player(player: Player) -> "SavedPlayer":
        return SavedPlayer(
            name=player.name,
            score=player.score,
            color_name=player.color_name,
            emoji=player.emoji,
            id=player.id,
        )

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SavedPlayer":
        # records written before emoji existed have no "emoji" key
        return SavedPlayer(
            name=str(data["name"]),
            score=int(data["score"]),
            color_name=str(data["color_name"]),
            emoji=data.get("emoji") or DEFAULT_EMOJI,
            id=str(data["id"]),
        )


@dataclass
class SavedGame:
    players: List[SavedPlayer]
    winner_name: str
    winner_score: int
    date: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=new_id)

    @staticmethod
    def from_players(players: Sequence[Player]) -> "SavedGame":
        """Snapshot finished players; a shared top score is recorded as a tie."""
        saved = [SavedPlayer.from_player(p) for p in players]
        if not players:
            return SavedGame(saved, UNKNOWN_WINNER, 0)
        highest = max(p.score for p in players)
        top = [p for p in players if p.score == highest]
        if len(top) > 1:
            return SavedGame(saved, TIE, highest)
        return SavedGame(saved, top[0].name, top[0].score)

    @property
    def is_tie(self) -> bool:
        return self.winner_name == TIE

    @property
    def total_points(self) -> int:
        return sum(p.score for p in self.players)

    @property
    def player_count(self) -> int:
        return len(self.players)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "players": [asdict(p) for p in self.players],
            "winner_name": self.winner_name,
            "winner_score": self.winner_score,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SavedGame":
        return SavedGame(
            players=[SavedPlayer.from_dict(p) for p in data.get("players", [])],
            winner_name=str(data["winner_name"]),
            winner_score=int(data["winner_score"]),
            date=_parse_date(data.get("date")) or datetime.now(),
            id=str(data["id"]),
        )


@dataclass
class PlayerProfile:
    name: str
    preferred_color_name: str = "blue"
    games_played: int = 0
    total_wins: int = 0
    highest_score: int = 0
    last_played: Optional[datetime] = None
    id: str = field(default_factory=new_id)

    @property
    def win_rate(self) -> int:
        if self.games_played <= 0:
            return 0
        return int(self.total_wins / self.games_played * 100)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["last_played"] = self.last_played.isoformat() if self.last_played else None
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "PlayerProfile":
        return PlayerProfile(
            name=str(data["name"]),
            preferred_color_name=data.get("preferred_color_name") or "blue",
            games_played=int(data.get("games_played", 0)),
            total_wins=int(data.get("total_wins", 0)),
            highest_score=int(data.get("highest_score", 0)),
            last_played=_parse_date(data.get("last_played")),
            id=str(data["id"]),
        )


def _decode_all(records: List[Dict[str, Any]], decode, path: str) -> list:
    items = []
    for data in records:
        try:
            items.append(decode(data))
        except (KeyError, TypeError, ValueError) as exc:
            log.warning("Skipping malformed record in %s (%s)", path, exc)
    return items


class ProfileStorage:
    """Player profiles, matched by name case-insensitively."""

    def __init__(self, path: str):
        self.path = path
        self.profiles: List[PlayerProfile] = _decode_all(_read_records(path), PlayerProfile.from_dict, path)
        log.info("Loaded %d player profiles from %s", len(self.profiles), path)

    def _persist(self) -> None:
        _write_records(self.path, [p.to_dict() for p in self.profiles])

    def find(self, name: str) -> Optional[PlayerProfile]:
        key = name.lower()
        for profile in self.profiles:
            if profile.name.lower() == key:
                return profile
        return None

    def get_or_create(self, name: str, color_name: str = "blue") -> PlayerProfile:
        existing = self.find(name)
        if existing is not None:
            return existing
        profile = PlayerProfile(name=name, preferred_color_name=color_name)
        self.profiles.append(profile)
        self._persist()
        return profile

    def update_stats(self, name: str, score: int, did_win: bool) -> None:
        profile = self.find(name)
        if profile is None:
            return
        profile.games_played += 1
        profile.last_played = datetime.now()
        if did_win:
            profile.total_wins += 1
        if score > profile.highest_score:
            profile.highest_score = score
        self._persist()

    def update_preferred_color(self, name: str, color_name: str) -> None:
        profile = self.find(name)
        if profile is None:
            return
        profile.preferred_color_name = color_name
        self._persist()

    @property
    def recent_profiles(self) -> List[PlayerProfile]:
        # most recently played first; never-played profiles last
        played = sorted(
            (p for p in self.profiles if p.last_played is not None),
            key=lambda p: p.last_played,
            reverse=True,
        )
        return played + [p for p in self.profiles if p.last_played is None]

    def search(self, query: str) -> List[PlayerProfile]:
        if not query:
            return self.recent_profiles
        q = query.lower()
        return [p for p in self.profiles if q in p.name.lower()]

    def delete(self, profile_id: str) -> bool:
        before = len(self.profiles)
        self.profiles = [p for p in self.profiles if p.id != profile_id]
        if len(self.profiles) == before:
            return False
        self._persist()
        return True

    def clear(self) -> None:
        self.profiles = []
        self._persist()


class GameStorage:
    """Finished games, most recent first."""

    def __init__(self, path: str, profiles: Optional[ProfileStorage] = None):
        self.path = path
        self.profiles = profiles
        self.saved_games: List[SavedGame] = _decode_all(_read_records(path), SavedGame.from_dict, path)
        log.info("Loaded %d saved games from %s", len(self.saved_games), path)

    def _persist(self) -> None:
        _write_records(self.path, [g.to_dict() for g in self.saved_games])
        log.info("Saved %d games to %s", len(self.saved_games), self.path)

    def get(self, game_id: str) -> Optional[SavedGame]:
        for game in self.saved_games:
            if game.id == game_id:
                return game
        return None

    def save_game(self, game: SavedGame) -> SavedGame:
        self.saved_games.insert(0, game)
        self._persist()
        return game

    def save_players(self, players: Sequence[Player]) -> SavedGame:
        """Store a finished game and update every player's profile stats."""
        game = self.save_game(SavedGame.from_players(players))
        if self.profiles is not None:
            for player in players:
                did_win = not game.is_tie and player.name == game.winner_name
                self.profiles.update_stats(player.name, player.score, did_win)
        return game

    def delete(self, game_id: str) -> bool:
        before = len(self.saved_games)
        self.saved_games = [g for g in self.saved_games if g.id != game_id]
        if len(self.saved_games) == before:
            return False
        self._persist()
        return True

    def delete_at(self, index: int) -> None:
        if not (0 <= index < len(self.saved_games)):
            return
        del self.saved_games[index]
        self._persist()

    def clear(self) -> None:
        self.saved_games = []
        self._persist()

    @property
    def total_games_played(self) -> int:
        return len(self.saved_games)

    @property
    def leaderboard(self) -> List[Tuple[str, int]]:
        wins: Dict[str, int] = {}
        for game in self.saved_games:
            if game.is_tie:
                continue
            wins[game.winner_name] = wins.get(game.winner_name, 0) + 1
        return sorted(wins.items(), key=lambda item: item[1], reverse=True)

    @property
    def highest_score(self) -> Optional[Tuple[str, int]]:
        best: Optional[Tuple[str, int]] = None
        for game in self.saved_games:
            for player in game.players:
                if best is None or player.score > best[1]:
                    best = (player.name, player.score)
        return best

    @property
    def average_game_score(self) -> int:
        total_players = sum(g.player_count for g in self.saved_games)
        if total_players == 0:
            return 0
        return sum(g.total_points for g in self.saved_games) // total_players
