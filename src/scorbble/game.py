import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .candidate import CandidateWord

AVAILABLE_COLORS = ["blue", "green", "orange", "purple", "red", "pink"]
DEFAULT_EMOJI = "😊"
MIN_PLAYERS = 2
MAX_PLAYERS = 4


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Player:
    name: str
    color_name: str = "blue"
    emoji: str = DEFAULT_EMOJI
    score: int = 0
    id: str = field(default_factory=new_id)


@dataclass
class TurnRecord:
    player_index: int
    player_name: str
    points: int
    # None for quick (points-only) entries
    word: Optional[str] = None


@dataclass
class Game:
    """A game in progress: whose turn it is and every turn played so far."""

    players: List[Player]
    current_player_index: int = 0
    is_finished: bool = False
    date: datetime = field(default_factory=datetime.now)
    turn_history: List[TurnRecord] = field(default_factory=list)
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        if not (MIN_PLAYERS <= len(self.players) <= MAX_PLAYERS):
            raise ValueError(f"A game needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(self.players)}")
        if not (0 <= self.current_player_index < len(self.players)):
            raise ValueError(f"current_player_index out of range: {self.current_player_index}")

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def leader(self) -> Optional[Player]:
        if not self.players:
            return None
        return max(self.players, key=lambda p: p.score)

    def next_turn(self) -> None:
        self.current_player_index = (self.current_player_index + 1) % len(self.players)

    def add_score(self, player_index: int, points: int) -> None:
        self.players[player_index].score += points

    def record_points(self, points: int, word: Optional[str] = None) -> TurnRecord:
        """Credit the current player, log the turn and pass to the next player."""
        turn = TurnRecord(
            player_index=self.current_player_index,
            player_name=self.current_player.name,
            points=points,
            word=word,
        )
        self.turn_history.append(turn)
        self.add_score(self.current_player_index, points)
        self.next_turn()
        return turn

    def record_word(self, candidate: CandidateWord) -> TurnRecord:
        turn = self.record_points(candidate.score, word=candidate.letters)
        candidate.reset()
        return turn

    def undo_last_turn(self) -> Optional[TurnRecord]:
        if not self.turn_history:
            return None
        turn = self.turn_history.pop()
        self.add_score(turn.player_index, -turn.points)
        self.current_player_index = turn.player_index
        return turn

    def end_game(self) -> None:
        self.is_finished = True
