from __future__ import annotations

from typing import List, Optional, Tuple

from othello.engine.board import Board, opponent
from othello.engine.moves import Captures, Coord, LegalMoves, apply_move, legal_moves

# Corners can never be flipped back; the cells touching an empty corner hand
# it to the opponent.
POSITION_WEIGHTS = [
    [120, -20, 20, 5, 5, 20, -20, 120],
    [-20, -40, -5, -5, -5, -5, -40, -20],
    [20, -5, 15, 3, 3, 15, -5, 20],
    [5, -5, 3, 3, 3, 3, -5, 5],
    [5, -5, 3, 3, 3, 3, -5, 5],
    [20, -5, 15, 3, 3, 15, -5, 20],
    [-20, -40, -5, -5, -5, -5, -40, -20],
    [120, -20, 20, 5, 5, 20, -20, 120],
]

CAPTURE_WEIGHT = 3
MOBILITY_WEIGHT = 2


def positional_weight(destination: Coord) -> int:
    r, c = destination
    return POSITION_WEIGHTS[r][c]


def mobility_penalty(board: Board, destination: Coord, side: str, captures: Captures) -> int:
    after = apply_move(board, destination, side, captures)
    return -len(legal_moves(after, opponent(side)))


def score_move(board: Board, destination: Coord, side: str, captures: Captures) -> int:
    return (
        positional_weight(destination)
        + CAPTURE_WEIGHT * len(captures)
        + MOBILITY_WEIGHT * mobility_penalty(board, destination, side, captures)
    )


def rank_moves(legal: LegalMoves, board: Board, side: str) -> List[Tuple[Coord, int]]:
    """Score every candidate, in row-major order."""
    return [(coord, score_move(board, coord, side, captures)) for coord, captures in legal.items()]


def select_move(legal: LegalMoves, board: Board, side: str) -> Optional[Coord]:
    best_move: Optional[Coord] = None
    best_score = None
    for coord, score in rank_moves(legal, board, side):
        if best_score is None or score > best_score:
            best_move = coord
            best_score = score
    return best_move
