from othello.engine.board import Board, create_initial_board
from othello.engine.heuristic import (
    POSITION_WEIGHTS,
    mobility_penalty,
    positional_weight,
    rank_moves,
    score_move,
    select_move,
)
from othello.engine.moves import LegalMoves, legal_moves

from positions import CORNER_OR_CENTER


def test_weight_table_shape_and_symmetry():
    assert len(POSITION_WEIGHTS) == 8
    for r in range(8):
        assert len(POSITION_WEIGHTS[r]) == 8
        for c in range(8):
            assert POSITION_WEIGHTS[r][c] == POSITION_WEIGHTS[c][r]
            assert POSITION_WEIGHTS[r][c] == POSITION_WEIGHTS[7 - r][c]
            assert POSITION_WEIGHTS[r][c] == POSITION_WEIGHTS[r][7 - c]


def test_corners_highest_x_squares_lowest():
    assert positional_weight((0, 0)) == 120
    assert positional_weight((7, 7)) == 120
    assert positional_weight((1, 1)) == -40
    values = [value for row in POSITION_WEIGHTS for value in row]
    assert max(values) == 120
    assert min(values) == -40


def test_opening_move_components():
    board = create_initial_board()
    captures = ((3, 3),)

    assert mobility_penalty(board, (2, 3), Board.DARK, captures) == -3
    # 3 (weight) + 3 * 1 (capture) + 2 * -3 (mobility)
    assert score_move(board, (2, 3), Board.DARK, captures) == 0


def test_opening_ties_break_row_major():
    board = create_initial_board()
    legal = legal_moves(board, Board.DARK)

    ranked = rank_moves(legal, board, Board.DARK)

    assert [coord for coord, _ in ranked] == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert {score for _, score in ranked} == {0}
    assert select_move(legal, board, Board.DARK) == (2, 3)


def test_prefers_corner():
    legal = legal_moves(CORNER_OR_CENTER, Board.DARK)

    assert list(legal) == [(0, 0), (4, 4)]
    assert select_move(legal, CORNER_OR_CENTER, Board.DARK) == (0, 0)


def test_single_candidate_is_selected():
    board = Board.from_rows(
        [
            "........",
            "........",
            "...D....",
            "...L....",
            "...L....",
            "........",
            "........",
            "........",
        ]
    )
    legal = legal_moves(board, Board.DARK)
    assert list(legal) == [(5, 3)]
    assert select_move(legal, board, Board.DARK) == (5, 3)


def test_avoids_x_square_when_alternative_exists():
    board = Board.from_rows(
        [
            "........",
            ".L......",
            "..D.....",
            "........",
            "...L....",
            "...D....",
            "........",
            "........",
        ]
    )
    legal = legal_moves(board, Board.DARK)

    assert set(legal) == {(0, 0), (3, 3)}
    assert select_move(legal, board, Board.DARK) == (0, 0)

    no_corner = Board.from_rows(
        [
            "D.......",
            "........",
            "..L.....",
            "...D....",
            "........",
            ".....L..",
            "......L.",
            ".......D",
        ]
    )
    legal = legal_moves(no_corner, Board.DARK)
    scores = dict(rank_moves(legal, no_corner, Board.DARK))
    assert set(legal) == {(1, 1), (4, 4)}
    assert scores[(4, 4)] > scores[(1, 1)]
    assert select_move(legal, no_corner, Board.DARK) == (4, 4)


def test_select_move_on_empty_set_is_none():
    assert select_move(LegalMoves.none(), create_initial_board(), Board.DARK) is None
