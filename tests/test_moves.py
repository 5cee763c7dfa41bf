import random

import pytest

from othello.engine.board import Board, count_discs, create_initial_board, opponent
from othello.engine.moves import LegalMoves, apply_move, has_legal_move, legal_moves

from positions import CORNER_OR_CENTER, DARK_35_LIGHT_29, LIGHT_STUCK


def _step(a: int, b: int) -> int:
    return (b > a) - (b < a)


def assert_capture_is_flanked(board: Board, destination, capture, side):
    """The capture lies on a straight line of opponent discs closed by ``side``."""
    r, c = destination
    cr, cc = capture
    dr, dc = _step(r, cr), _step(c, cc)
    assert (dr, dc) != (0, 0)
    assert cr - r == 0 or cc - c == 0 or abs(cr - r) == abs(cc - c)

    nr, nc = r + dr, c + dc
    while board.get_piece(nr, nc) == opponent(side):
        nr += dr
        nc += dc
    assert board.get_piece(nr, nc) == side
    # The capture sits between the destination and the closing disc.
    steps_to_capture = max(abs(cr - r), abs(cc - c))
    steps_to_close = max(abs(nr - r), abs(nc - c))
    assert 0 < steps_to_capture < steps_to_close


def test_initial_legal_moves():
    board = create_initial_board()

    dark = legal_moves(board, Board.DARK)
    light = legal_moves(board, Board.LIGHT)

    assert list(dark) == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert list(light) == [(2, 4), (3, 5), (4, 2), (5, 3)]
    assert len(dark) == 4
    assert len(light) == 4
    assert dark[(2, 3)] == ((3, 3),)


def test_legal_moves_table_lookups():
    moves = legal_moves(create_initial_board(), Board.DARK)

    assert (2, 3) in moves
    assert (0, 0) not in moves
    assert (9, 9) not in moves
    assert moves.get((0, 0)) is None
    with pytest.raises(KeyError):
        moves[(0, 0)]
    assert dict(moves.items())[(5, 4)] == ((4, 4),)


def test_occupied_cells_are_never_candidates():
    board = create_initial_board()
    for side in (Board.DARK, Board.LIGHT):
        for r, c in legal_moves(board, side):
            assert board.get_piece(r, c) is Board.EMPTY


def test_capture_in_several_directions():
    board = Board.from_rows(
        [
            "D.D.....",
            ".LL.....",
            "DL......",
            "........",
            "........",
            "........",
            "........",
            "........",
        ]
    )
    captures = legal_moves(board, Board.DARK)[(2, 2)]

    assert sorted(captures) == [(1, 1), (1, 2), (2, 1)]


def test_probe_off_board_captures_nothing():
    board = Board.from_rows([".LLLLLLL"] + ["........"] * 6 + ["D......."])

    assert not legal_moves(board, Board.DARK)
    assert len(legal_moves(board, Board.DARK)) == 0


def test_full_board_has_no_moves():
    assert not has_legal_move(DARK_35_LIGHT_29, Board.DARK)
    assert not has_legal_move(DARK_35_LIGHT_29, Board.LIGHT)
    assert legal_moves(DARK_35_LIGHT_29, Board.DARK) == LegalMoves.none()


def test_side_without_moves():
    assert not legal_moves(LIGHT_STUCK, Board.LIGHT)
    assert list(legal_moves(LIGHT_STUCK, Board.DARK)) == [(0, 2)]


def test_legal_moves_is_deterministic():
    board = CORNER_OR_CENTER
    first = legal_moves(board, Board.DARK)
    second = legal_moves(board, Board.DARK)

    assert first == second
    assert list(first.items()) == list(second.items())
    assert board == CORNER_OR_CENTER


def test_apply_opening_move():
    board = create_initial_board()
    captures = legal_moves(board, Board.DARK)[(2, 3)]

    after = apply_move(board, (2, 3), Board.DARK, captures)

    for cell in [(2, 3), (3, 3), (3, 4), (4, 3)]:
        assert after.get_piece(*cell) == Board.DARK
    assert after.get_piece(4, 4) == Board.LIGHT
    assert count_discs(after) == (4, 1)
    # input untouched
    assert board == create_initial_board()


def test_apply_move_rejects_occupied_destination():
    board = create_initial_board()
    with pytest.raises(AssertionError):
        apply_move(board, (3, 3), Board.DARK, ((3, 4),))


def test_apply_move_rejects_empty_capture_set():
    with pytest.raises(AssertionError):
        apply_move(create_initial_board(), (0, 0), Board.DARK, ())


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_games_respect_move_properties(seed):
    rng = random.Random(seed)
    board = create_initial_board()
    side = Board.DARK

    for _ in range(80):
        moves = legal_moves(board, side)
        if not moves:
            side = opponent(side)
            moves = legal_moves(board, side)
            if not moves:
                break

        for destination, captures in moves.items():
            assert captures
            for capture in captures:
                assert board.get_piece(*capture) == opponent(side)
                assert_capture_is_flanked(board, destination, capture, side)

        destination = rng.choice(list(moves))
        captures = moves[destination]
        after = apply_move(board, destination, side, captures)

        changed = {
            (r, c)
            for r in range(Board.SIZE)
            for c in range(Board.SIZE)
            if after.get_piece(r, c) != board.get_piece(r, c)
        }
        assert changed == {destination, *captures}
        assert all(after.get_piece(r, c) == side for r, c in changed)
        assert sum(count_discs(after)) == sum(count_discs(board)) + 1

        board = after
        side = opponent(side)
