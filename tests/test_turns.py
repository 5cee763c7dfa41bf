import random

from othello.engine.board import Board, create_initial_board
from othello.engine.moves import apply_move, has_legal_move, legal_moves
from othello.engine.turns import (
    INITIAL_STATE,
    GameOver,
    Outcome,
    ToMove,
    next_state,
    outcome_for,
    resolve_turn,
)

from positions import DARK_35_LIGHT_29, FULL_DRAW, FULL_LIGHT_WINS, LIGHT_STUCK


def test_initial_state_is_dark_to_move():
    assert INITIAL_STATE == ToMove(Board.DARK)
    assert INITIAL_STATE.outcome == Outcome.IN_PROGRESS


def test_opening_move_hands_turn_to_light():
    board = create_initial_board()
    after = apply_move(board, (2, 3), Board.DARK, ((3, 3),))

    assert next_state(Board.DARK, after) == ToMove(Board.LIGHT)


def test_light_without_moves_passes_back_to_dark():
    state = next_state(Board.DARK, LIGHT_STUCK)

    assert state == ToMove(Board.DARK, passed=Board.LIGHT)
    assert not isinstance(state, GameOver)


def test_resolve_turn_passes_before_asking_for_input():
    assert resolve_turn(Board.LIGHT, LIGHT_STUCK) == ToMove(Board.DARK, passed=Board.LIGHT)
    assert resolve_turn(Board.DARK, LIGHT_STUCK) == ToMove(Board.DARK)


def test_both_sides_stuck_dark_wins_35_29():
    state = next_state(Board.LIGHT, DARK_35_LIGHT_29)

    assert state == GameOver(Outcome.DARK_WINS, 35, 29)
    assert state.winner == Board.DARK


def test_draw_and_light_win_outcomes():
    assert outcome_for(FULL_DRAW) == GameOver(Outcome.DRAW, 32, 32)
    assert outcome_for(FULL_DRAW).winner is None
    assert outcome_for(FULL_LIGHT_WINS).outcome == Outcome.LIGHT_WINS
    assert resolve_turn(Board.DARK, FULL_LIGHT_WINS).winner == Board.LIGHT


def test_game_over_when_one_side_is_wiped_out():
    board = Board.from_rows(["DDD....."] + ["........"] * 7)

    assert next_state(Board.DARK, board) == GameOver(Outcome.DARK_WINS, 3, 0)


def test_never_game_over_while_a_move_exists():
    rng = random.Random(7)
    for _ in range(10):
        board = create_initial_board()
        state = INITIAL_STATE
        while isinstance(state, ToMove):
            side = state.side
            assert has_legal_move(board, side)
            moves = legal_moves(board, side)
            destination = rng.choice(list(moves))
            board = apply_move(board, destination, side, moves[destination])
            state = next_state(side, board)
        assert not has_legal_move(board, Board.DARK)
        assert not has_legal_move(board, Board.LIGHT)
