import argparse
import logging
from typing import Any, cast

from othello.cli.duel import PlayerSpec, run_duel_series
from othello.engine.board import Board, side_label
from othello.engine.registry import get_player_choices

PLAYER_NAMES = sorted(get_player_choices().keys())

COMPUTER_CHOICES = {
    "dark": (Board.DARK,),
    "light": (Board.LIGHT,),
    "both": (Board.DARK, Board.LIGHT),
    "none": (),
}


def run_ui(args: argparse.Namespace) -> None:
    # flet is only needed for the desktop app
    import flet as ft

    from othello.engine.local_engine import LocalEngine
    from othello.ui.app import OthelloApp

    print(f"Starting UI (computer: {args.computer}, delay {args.delay:.2f}s)...")
    engine = LocalEngine(think_delay=args.delay, computer_sides=COMPUTER_CHOICES[args.computer])
    app = OthelloApp(engine, computer_sides=COMPUTER_CHOICES[args.computer])
    ft.app(target=app.main)


def _spec_label(player_name: str, side: str, other_name: str) -> str:
    if player_name == other_name:
        return f"{player_name} ({side_label(side).lower()})"
    return player_name


def run_duel(args: argparse.Namespace) -> None:
    dark_spec = PlayerSpec(
        key=args.dark,
        label=_spec_label(args.dark, Board.DARK, args.light),
        rng_seed=args.seed,
    )
    light_spec = PlayerSpec(
        key=args.light,
        label=_spec_label(args.light, Board.LIGHT, args.dark),
        rng_seed=None if args.seed is None else args.seed + 1000,
    )

    stats, results = run_duel_series(
        dark_spec=dark_spec,
        light_spec=light_spec,
        games=max(1, args.games),
        swap_colors=not args.no_swap,
    )

    print("\nGame results:")
    for index, result in enumerate(results, start=1):
        dark_label = result.side_to_label.get(Board.DARK, "DARK")
        light_label = result.side_to_label.get(Board.LIGHT, "LIGHT")
        dark_score = result.scores.get(Board.DARK, 0)
        light_score = result.scores.get(Board.LIGHT, 0)
        if result.winner_side == "DRAW":
            verdict = "Draw"
        else:
            verdict = f"Winner: {result.side_to_label.get(result.winner_side, result.winner_side)}"
        print(
            f"Game {index}: {dark_label} (Dark) {dark_score} - "
            f"{light_label} (Light) {light_score} | {verdict}"
        )

    summary: dict[str, Any] = stats.summary()
    players = cast(dict[str, Any], summary["players"])
    print(f"\nDuel complete: {summary['total_games']} games, {summary['draws']} draws.")
    print(f"Average moves per game: {summary['average_moves']:.2f}")
    print("\nPlayer breakdown:")
    for label, data in players.items():
        wins = data.get("wins", 0)
        games = data.get("games", 0)
        avg_score = data.get("avg_score", 0.0)
        avg_margin = data.get("avg_margin", 0.0)
        print(
            f"- {label}: {wins} wins / {games} games, "
            f"avg score {avg_score:.2f}, avg margin {avg_margin:+.2f}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Othello game CLI")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # UI Command
    ui_parser = subparsers.add_parser("ui", help="Start the GUI")
    ui_parser.add_argument(
        "--computer",
        choices=sorted(COMPUTER_CHOICES),
        default="light",
        help="Side(s) played by the computer (default: light)",
    )
    ui_parser.add_argument(
        "--delay",
        type=float,
        default=0.5,
        help="Seconds the computer waits before playing (default: 0.5)",
    )
    ui_parser.set_defaults(func=run_ui)

    duel_parser = subparsers.add_parser("duel", help="Run player vs player duels")
    duel_parser.add_argument("--games", type=int, default=2, help="Number of games to run (default: 2)")
    duel_parser.add_argument("--no-swap", action="store_true", help="Disable color swapping between games")
    duel_parser.add_argument(
        "--dark",
        choices=PLAYER_NAMES,
        default="heuristic",
        help="Player used as dark in the first game",
    )
    duel_parser.add_argument(
        "--light",
        choices=PLAYER_NAMES,
        default="random",
        help="Player used as light in the first game",
    )
    duel_parser.add_argument("--seed", type=int, default=None, help="Seed for random players")
    duel_parser.set_defaults(func=run_duel)
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
