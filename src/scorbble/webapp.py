import logging
import threading
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from .candidate import CandidateWord
from .config import Settings, load_settings
from .dictionary import Region, WordDictionary
from .game import Player
from .letters import LETTER_SCORES
from .scoring import score_word
from .storage import GameStorage, ProfileStorage, SavedGame
from .tiles import Tile, tiles_for
from .validation import classify_in

log = logging.getLogger(__name__)

# Oldest candidate sessions are dropped past this many
MAX_CANDIDATE_SESSIONS = 256


class InvalidRequest(ValueError):
    """Malformed request input, answered with a 400 JSON error."""


def _game_json(game: SavedGame) -> Dict[str, Any]:
    data = game.to_dict()
    data["isTie"] = game.is_tie
    data["totalPoints"] = game.total_points
    return data


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidRequest("expected a JSON object")
    return data


def _parse_int(value: Any, name: str, allowed: Optional[tuple] = None) -> int:
    # JSON true/false are not numbers here
    if isinstance(value, bool):
        raise InvalidRequest(f"{name} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidRequest(f"{name} must be an integer")
    if allowed is not None and number not in allowed:
        raise InvalidRequest(f"{name} must be one of {', '.join(str(a) for a in allowed)}")
    return number


def _parse_bool(value: Any, name: str, default: bool = False) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidRequest(f"{name} must be true or false")
    return value


def create_app(
    settings: Optional[Settings] = None,
    dictionary: Optional[WordDictionary] = None,
) -> Flask:
    settings = settings or load_settings()
    app = Flask(__name__)
    words = dictionary or WordDictionary.load(settings.dict_dir)
    profiles = ProfileStorage(settings.profiles_path)
    games = GameStorage(settings.games_path, profiles=profiles)

    # Candidate words being edited, one per client session (in-memory,
    # least recently used first)
    _candidates_lock = threading.Lock()
    _candidates: Dict[str, CandidateWord] = {}
    # Storage objects rewrite their files on every change
    _storage_lock = threading.Lock()

    @app.errorhandler(InvalidRequest)
    def _invalid_request(exc: InvalidRequest):
        return jsonify({"error": str(exc)}), 400

    def _region_from(data: Dict[str, Any]) -> Region:
        name = data.get("region")
        if not name:
            return settings.region
        try:
            return Region.parse(str(name))
        except ValueError as exc:
            raise InvalidRequest(str(exc))

    def _open_candidate(sid: str) -> CandidateWord:
        candidate = _candidates.pop(sid, None)
        if candidate is None:
            candidate = CandidateWord()
            while len(_candidates) >= MAX_CANDIDATE_SESSIONS:
                evicted = next(iter(_candidates))
                del _candidates[evicted]
                log.info("Dropped idle candidate session %s", evicted)
        _candidates[sid] = candidate
        return candidate

    def _existing_candidate(sid: str) -> Optional[CandidateWord]:
        candidate = _candidates.pop(sid, None)
        if candidate is not None:
            _candidates[sid] = candidate
        return candidate

    def _unknown_session(sid: str):
        return jsonify({"error": f"unknown candidate session: {sid}"}), 404

    @app.get("/api/letters")
    def api_letters():
        return jsonify({"letters": dict(LETTER_SCORES)})

    @app.post("/api/word/check")
    def api_word_check():
        data = _json_body()
        word = str(data.get("word") or "")
        region = _region_from(data)
        verdict = classify_in(word, words, region)
        return jsonify({
            "word": word.strip().lower(),
            "region": region.value,
            "verdict": verdict.value,
            "message": verdict.message,
            "acceptable": verdict.is_acceptable,
        })

    @app.post("/api/word/score")
    def api_word_score():
        data = _json_body()
        word = str(data.get("word") or "")
        tiles: List[Tile] = tiles_for(word)
        word_mult = _parse_int(data.get("wordMultiplier", 1), "wordMultiplier", (1, 2, 3))
        # optional per-tile bonuses, matched by position
        for tile, entry in zip(tiles, data.get("tiles") or []):
            if not isinstance(entry, dict):
                raise InvalidRequest("tiles entries must be objects")
            tile.set_multiplier(_parse_int(entry.get("multiplier", 1), "multiplier", (1, 2, 3)))
            tile.set_blank(_parse_bool(entry.get("isBlank"), "isBlank"))
        bingo = _parse_bool(data.get("bingo"), "bingo")
        return jsonify({
            "word": "".join(t.letter for t in tiles),
            "score": score_word(tiles, word_mult, bingo),
            "tiles": [{"letter": t.letter, "multiplier": t.multiplier, "isBlank": t.is_blank, "points": t.points} for t in tiles],
        })

    @app.post("/api/candidate/<sid>/input")
    def api_candidate_input(sid: str):
        data = _json_body()
        with _candidates_lock:
            candidate = _open_candidate(sid)
            candidate.update_text(str(data.get("text") or ""))
            return jsonify(candidate.to_dict())

    @app.post("/api/candidate/<sid>/tile/<int:index>/cycle")
    def api_candidate_cycle(sid: str, index: int):
        with _candidates_lock:
            candidate = _existing_candidate(sid)
            if candidate is None:
                return _unknown_session(sid)
            candidate.cycle_multiplier_at(index)
            return jsonify(candidate.to_dict())

    @app.post("/api/candidate/<sid>/tile/<int:index>/blank")
    def api_candidate_blank(sid: str, index: int):
        with _candidates_lock:
            candidate = _existing_candidate(sid)
            if candidate is None:
                return _unknown_session(sid)
            candidate.toggle_blank_at(index)
            return jsonify(candidate.to_dict())

    @app.post("/api/candidate/<sid>/word-multiplier")
    def api_candidate_word_multiplier(sid: str):
        value = _parse_int(_json_body().get("value"), "value", (1, 2, 3))
        with _candidates_lock:
            candidate = _existing_candidate(sid)
            if candidate is None:
                return _unknown_session(sid)
            candidate.set_word_multiplier(value)
            return jsonify(candidate.to_dict())

    @app.post("/api/candidate/<sid>/bingo")
    def api_candidate_bingo(sid: str):
        value = _parse_bool(_json_body().get("value"), "value")
        with _candidates_lock:
            candidate = _existing_candidate(sid)
            if candidate is None:
                return _unknown_session(sid)
            candidate.set_bingo(value)
            return jsonify(candidate.to_dict())

    @app.delete("/api/candidate/<sid>")
    def api_candidate_clear(sid: str):
        with _candidates_lock:
            _candidates.pop(sid, None)
        return jsonify({"ok": True})

    @app.get("/api/games")
    def api_games():
        with _storage_lock:
            return jsonify({"games": [_game_json(g) for g in games.saved_games]})

    @app.post("/api/games")
    def api_save_game():
        entries = _json_body().get("players")
        if not isinstance(entries, list) or not entries:
            raise InvalidRequest("players is required")
        players: List[Player] = []
        for entry in entries:
            if not isinstance(entry, dict) or not str(entry.get("name") or "").strip():
                raise InvalidRequest("each player needs a name")
            player = Player(
                name=str(entry["name"]).strip(),
                color_name=str(entry.get("colorName") or "blue"),
                score=_parse_int(entry.get("score", 0), "score"),
            )
            if entry.get("emoji"):
                player.emoji = str(entry["emoji"])
            players.append(player)
        with _storage_lock:
            for player in players:
                profiles.get_or_create(player.name, player.color_name)
            game = games.save_players(players)
        log.info("Saved game %s (winner=%s)", game.id, game.winner_name)
        return jsonify({"game": _game_json(game)}), 201

    @app.delete("/api/games/<game_id>")
    def api_delete_game(game_id: str):
        with _storage_lock:
            if not games.delete(game_id):
                return jsonify({"error": f"game not found: {game_id}"}), 404
        return jsonify({"ok": True})

    @app.get("/api/games/stats")
    def api_game_stats():
        with _storage_lock:
            best = games.highest_score
            return jsonify({
                "totalGames": games.total_games_played,
                "averageScore": games.average_game_score,
                "highestScore": {"name": best[0], "score": best[1]} if best else None,
                "leaderboard": [{"name": name, "wins": wins} for name, wins in games.leaderboard],
            })

    @app.get("/api/profiles")
    def api_profiles():
        query = request.args.get("q", "")
        with _storage_lock:
            found = profiles.search(query)
            return jsonify({"profiles": [dict(p.to_dict(), winRate=p.win_rate) for p in found]})

    @app.post("/api/profiles")
    def api_create_profile():
        data = _json_body()
        name = str(data.get("name") or "").strip()
        if not name:
            raise InvalidRequest("name is required")
        with _storage_lock:
            profile = profiles.get_or_create(name, str(data.get("colorName") or "blue"))
            return jsonify({"profile": profile.to_dict()})

    @app.delete("/api/profiles/<profile_id>")
    def api_delete_profile(profile_id: str):
        with _storage_lock:
            if not profiles.delete(profile_id):
                return jsonify({"error": f"profile not found: {profile_id}"}), 404
        return jsonify({"ok": True})

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    app.run(host="127.0.0.1", port=8765, debug=True)
