import pytest

from othello.cli.duel import DRAW, PlayerMatch, PlayerSpec, run_duel_series
from othello.engine.board import Board
from othello.engine.players import HeuristicPlayer, RandomPlayer
from othello.engine.registry import build_player, get_player_choices
from othello.main import main


def test_registry_builds_players():
    assert set(get_player_choices()) == {"heuristic", "random"}
    assert isinstance(build_player("heuristic"), HeuristicPlayer)
    assert isinstance(build_player("random", rng_seed=3), RandomPlayer)


def test_registry_rejects_unknown_player():
    with pytest.raises(ValueError):
        build_player("minimax")


def test_random_player_is_reproducible():
    first = PlayerMatch(PlayerSpec("random", "a", rng_seed=5), PlayerSpec("random", "b", rng_seed=6)).play()
    second = PlayerMatch(PlayerSpec("random", "a", rng_seed=5), PlayerSpec("random", "b", rng_seed=6)).play()

    assert first.moves == second.moves
    assert first.scores == second.scores


def test_match_result_is_consistent():
    result = PlayerMatch(PlayerSpec("heuristic", "h"), PlayerSpec("random", "r", rng_seed=1)).play()

    dark, light = result.scores[Board.DARK], result.scores[Board.LIGHT]
    assert dark + light <= 64
    if dark > light:
        assert result.winner_side == Board.DARK
    elif light > dark:
        assert result.winner_side == Board.LIGHT
    else:
        assert result.winner_side == DRAW
    assert result.moves[0] == (Board.DARK, "D3")


def test_duel_series_swaps_colors():
    heuristic = PlayerSpec("heuristic", "heuristic")
    rand = PlayerSpec("random", "random", rng_seed=11)

    stats, results = run_duel_series(heuristic, rand, games=4)

    assert [r.side_to_label[Board.DARK] for r in results] == ["heuristic", "random", "heuristic", "random"]
    summary = stats.summary()
    assert summary["total_games"] == 4
    assert summary["players"]["heuristic"]["games"] == 4
    assert summary["players"]["random"]["games"] == 4
    wins = summary["players"]["heuristic"]["wins"] + summary["players"]["random"]["wins"]
    assert wins + summary["draws"] == 4
    assert summary["average_moves"] > 0


def test_duel_series_without_swap():
    _, results = run_duel_series(
        PlayerSpec("heuristic", "h"),
        PlayerSpec("random", "r", rng_seed=2),
        games=2,
        swap_colors=False,
    )
    assert all(r.side_to_label[Board.DARK] == "h" for r in results)


def test_duel_command(capsys):
    main(["duel", "--games", "2", "--seed", "4"])

    out = capsys.readouterr().out
    assert "Game 1: heuristic (Dark)" in out
    assert "Game 2: random (Dark)" in out
    assert "Duel complete: 2 games" in out


def test_duel_command_same_player_both_sides(capsys):
    main(["duel", "--games", "1", "--dark", "heuristic", "--light", "heuristic"])

    out = capsys.readouterr().out
    assert "heuristic (dark) (Dark)" in out
    assert "heuristic (light) (Light)" in out


def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out.lower()


def test_ui_command_passes_computer_sides_to_app(monkeypatch):
    flet = pytest.importorskip("flet")
    import othello.ui.app as ui_app

    created = {}

    class FakeApp:
        def __init__(self, engine, computer_sides=()):
            created["engine"] = engine
            created["computer_sides"] = tuple(computer_sides)

        def main(self, page):
            pass

    monkeypatch.setattr(ui_app, "OthelloApp", FakeApp)
    monkeypatch.setattr(flet, "app", lambda target: None)

    main(["ui", "--computer", "dark", "--delay", "0"])

    assert created["computer_sides"] == (Board.DARK,)
    assert created["engine"].session.computer_sides == {Board.DARK}
