import argparse
import logging
from typing import List, Optional

from .candidate import CandidateWord
from .config import Settings, load_settings
from .dictionary import Region, WordDictionary
from .storage import GameStorage, ProfileStorage
from .validation import ValidationVerdict, classify_in


def _positions(values: Optional[List[int]]) -> List[int]:
    # 1-based on the command line
    return [v - 1 for v in (values or [])]


def _format_tiles(candidate: CandidateWord) -> str:
    pretty = []
    for tile in candidate.tiles:
        if tile.is_blank:
            pretty.append(f"{tile.letter}*")
        elif tile.multiplier > 1:
            pretty.append(f"{tile.letter}x{tile.multiplier}")
        else:
            pretty.append(tile.letter)
    return " ".join(pretty)


def _cmd_score(args: argparse.Namespace, dictionary: WordDictionary, settings: Settings) -> int:
    candidate = CandidateWord()
    candidate.update_text(args.word)
    if not candidate.tiles:
        print("No letters to score.")
        return 1

    for idx in _positions(args.dl):
        candidate.set_multiplier_at(idx, 2)
    for idx in _positions(args.tl):
        candidate.set_multiplier_at(idx, 3)
    for idx in _positions(args.blank):
        candidate.set_blank_at(idx, True)
    candidate.set_word_multiplier(args.word_mult)
    if args.bingo is not None:
        candidate.set_bingo(args.bingo)

    region = args.region or settings.region
    verdict = classify_in(candidate.letters, dictionary, region)
    print(f"Tiles: {_format_tiles(candidate)}" + ("  (* = blank)" if any(t.is_blank for t in candidate.tiles) else ""))
    extras = []
    if candidate.word_multiplier > 1:
        extras.append(f"word x{candidate.word_multiplier}")
    if candidate.has_bingo:
        extras.append("bingo +50")
    print(f"Score: {candidate.score}" + (f" ({', '.join(extras)})" if extras else ""))
    print(f"{candidate.letters}: {verdict.message} [{region.label}]")
    return 0


def _cmd_check(args: argparse.Namespace, dictionary: WordDictionary, settings: Settings) -> int:
    region = args.region or settings.region
    verdict = classify_in(args.word, dictionary, region)
    print(f"{args.word.strip().upper()}: {verdict.message} [{region.label}]")
    return 0 if verdict is ValidationVerdict.VALID else 1


def _cmd_history(args: argparse.Namespace, dictionary: WordDictionary, settings: Settings) -> int:
    profiles = ProfileStorage(settings.profiles_path)
    games = GameStorage(settings.games_path, profiles=profiles)
    if not games.saved_games:
        print("No saved games.")
        return 0
    for game in games.saved_games:
        players = ", ".join(f"{p.name} {p.score}" for p in game.players)
        winner = "Tie" if game.is_tie else f"{game.winner_name} won"
        print(f"{game.date:%Y-%m-%d %H:%M}  {winner} ({game.winner_score})  [{players}]")
    print(f"Games played: {games.total_games_played}  average score: {games.average_game_score}")
    best = games.highest_score
    if best is not None:
        print(f"Highest score: {best[0]} {best[1]}")
    if games.leaderboard:
        print("Wins: " + ", ".join(f"{name} {wins}" for name, wins in games.leaderboard))
    return 0


def _region_arg(text: str) -> Region:
    try:
        return Region.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scrabble word scorer and checker")
    p.add_argument("--dict-dir", type=str, help="Directory holding twl_small.txt and intl_spellings.txt")
    p.add_argument("--data-dir", type=str, help="Directory for saved games and profiles")
    p.add_argument("-v", "--verbose", action="store_true", help="Log dictionary and storage activity")
    sub = p.add_subparsers(dest="command", required=True)

    ps = sub.add_parser("score", help="Score a word with letter/word bonuses")
    ps.add_argument("word", type=str)
    ps.add_argument("--word-mult", type=int, default=1, choices=[1, 2, 3], help="Word multiplier")
    ps.add_argument("--dl", type=int, nargs="+", metavar="POS", help="1-based positions on a double letter square")
    ps.add_argument("--tl", type=int, nargs="+", metavar="POS", help="1-based positions on a triple letter square")
    ps.add_argument("--blank", type=int, nargs="+", metavar="POS", help="1-based positions played with a blank")
    ps.add_argument("--bingo", dest="bingo", action="store_true", default=None, help="Add the 50 point bingo bonus")
    ps.add_argument("--no-bingo", dest="bingo", action="store_false", help="Skip the automatic bingo for 7 letters")
    ps.add_argument("--region", type=_region_arg, help="us|uk (default from SCORBBLE_REGION)")
    ps.set_defaults(bingo=None)

    pc = sub.add_parser("check", help="Check a word against a regional word list")
    pc.add_argument("word", type=str)
    pc.add_argument("--region", type=_region_arg, help="us|uk (default from SCORBBLE_REGION)")

    sub.add_parser("history", help="List saved games and the leaderboard")

    args = p.parse_args(argv)
    if args.command == "score":
        both = sorted(set(args.dl or []) & set(args.tl or []))
        if both:
            p.error(f"position(s) {', '.join(map(str, both))} given to both --dl and --tl")

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings()
    except ValueError as exc:
        p.error(str(exc))
    if args.dict_dir or args.data_dir:
        settings = Settings(
            dict_dir=args.dict_dir or settings.dict_dir,
            data_dir=args.data_dir or settings.data_dir,
            region=settings.region,
        )

    dictionary = WordDictionary.load(settings.dict_dir)
    handlers = {"score": _cmd_score, "check": _cmd_check, "history": _cmd_history}
    return handlers[args.command](args, dictionary, settings)


if __name__ == "__main__":
    raise SystemExit(main())
