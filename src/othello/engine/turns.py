from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from othello.engine.board import Board, count_discs, opponent
from othello.engine.moves import has_legal_move


class Outcome:
    IN_PROGRESS = "IN_PROGRESS"
    DARK_WINS = "DARK_WINS"
    LIGHT_WINS = "LIGHT_WINS"
    DRAW = "DRAW"


@dataclass(frozen=True)
class ToMove:
    side: str
    # Set when the other side had no move and was skipped to reach this state.
    passed: Optional[str] = None

    @property
    def outcome(self) -> str:
        return Outcome.IN_PROGRESS


@dataclass(frozen=True)
class GameOver:
    outcome: str
    dark: int
    light: int

    @property
    def winner(self) -> Optional[str]:
        if self.outcome == Outcome.DARK_WINS:
            return Board.DARK
        if self.outcome == Outcome.LIGHT_WINS:
            return Board.LIGHT
        return None


TurnState = Union[ToMove, GameOver]

INITIAL_STATE = ToMove(Board.DARK)


def outcome_for(board: Board) -> GameOver:
    dark, light = count_discs(board)
    if dark > light:
        outcome = Outcome.DARK_WINS
    elif light > dark:
        outcome = Outcome.LIGHT_WINS
    else:
        outcome = Outcome.DRAW
    return GameOver(outcome, dark, light)


def resolve_turn(side: str, board: Board) -> TurnState:
    """Decide who actually moves when control passes to ``side``.

    ``side`` keeps the turn if it has a move. Otherwise it passes and the
    opponent moves again, or the game ends when neither side can move.
    """
    if has_legal_move(board, side):
        return ToMove(side)
    other = opponent(side)
    if has_legal_move(board, other):
        return ToMove(other, passed=side)
    return outcome_for(board)


def next_state(current_side: str, resulting_board: Board) -> TurnState:
    """State after ``current_side`` has played and produced ``resulting_board``."""
    return resolve_turn(opponent(current_side), resulting_board)
