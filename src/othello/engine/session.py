from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from othello.engine.board import Board, coord_to_str, count_discs, create_initial_board, side_label
from othello.engine.heuristic import select_move
from othello.engine.moves import Coord, LegalMoves, apply_move, legal_moves
from othello.engine.turns import INITIAL_STATE, GameOver, ToMove, TurnState, next_state

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a move is requested that the current position does not allow."""


@dataclass(frozen=True)
class HistoryEntry:
    board: Board
    side: str


@dataclass(frozen=True)
class MoveRequest:
    """Ask for a computer move on ``board``.

    ``generation`` identifies the session state the request was issued
    from; a reply carrying an older generation is discarded.
    """

    side: str
    board: Board
    generation: int


class GameSession:
    """The single current game: board, turn state, undo history."""

    def __init__(self, computer_sides: Optional[Set[str]] = None):
        self.computer_sides: Set[str] = set(computer_sides or ())
        self.board = create_initial_board()
        self.state: TurnState = INITIAL_STATE
        self.history: List[HistoryEntry] = []
        self.last_move: Optional[Coord] = None
        self.generation = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_over(self) -> bool:
        return isinstance(self.state, GameOver)

    @property
    def current_side(self) -> Optional[str]:
        if isinstance(self.state, ToMove):
            return self.state.side
        return None

    def legal_moves(self) -> LegalMoves:
        side = self.current_side
        if side is None:
            return LegalMoves.none()
        return legal_moves(self.board, side)

    def scores(self) -> Tuple[int, int]:
        return count_discs(self.board)

    def hint(self) -> Optional[Coord]:
        side = self.current_side
        if side is None:
            return None
        return select_move(legal_moves(self.board, side), self.board, side)

    def is_computer(self, side: Optional[str]) -> bool:
        return side is not None and side in self.computer_sides

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def play(self, r: int, c: int) -> TurnState:
        side = self.current_side
        if side is None:
            raise IllegalMoveError("The game is over")
        legal = legal_moves(self.board, side)
        captures = legal.get((r, c))
        if not captures:
            raise IllegalMoveError(f"{coord_to_str(r, c)} is not a legal move for {side_label(side)}")

        self.history.append(HistoryEntry(self.board, side))
        self.board = apply_move(self.board, (r, c), side, captures)
        self.last_move = (r, c)
        self.state = next_state(side, self.board)
        self.generation += 1
        logger.debug("%s played %s flipping %d", side, coord_to_str(r, c), len(captures))

        if isinstance(self.state, ToMove) and self.state.passed:
            logger.info("%s has no legal move and passes", side_label(self.state.passed))
        elif isinstance(self.state, GameOver):
            logger.info("Game over: %s (%d-%d)", self.state.outcome, self.state.dark, self.state.light)
        return self.state

    def undo(self) -> bool:
        if not self.history:
            return False
        entry = self.history.pop()
        self.board = entry.board
        self.state = ToMove(entry.side)
        self.last_move = None
        self.generation += 1
        logger.debug("Undo to %s to move (%d entries left)", entry.side, len(self.history))
        return True

    def undo_turn(self) -> int:
        """Undo back to the most recent turn a human has to play.

        In hot-seat play this is a single step; against the computer it
        also takes back the computer's reply. With the computer on both
        sides there is no human turn to return to, so only one move is
        taken back.
        """
        if self.computer_sides >= {Board.DARK, Board.LIGHT}:
            return 1 if self.undo() else 0
        undone = 0
        while self.undo():
            undone += 1
            if not self.is_computer(self.current_side):
                break
        return undone

    def restart(self):
        self.board = create_initial_board()
        self.state = INITIAL_STATE
        self.history = []
        self.last_move = None
        self.generation += 1
        logger.debug("New game")

    # ------------------------------------------------------------------
    # Computer control
    # ------------------------------------------------------------------
    def set_computer_side(self, side: str, enabled: bool):
        if side not in (Board.DARK, Board.LIGHT):
            raise ValueError(f"Unknown side {side!r}")
        if enabled:
            self.computer_sides.add(side)
        else:
            self.computer_sides.discard(side)
        # Any move already being thought about was asked for under the old roles.
        self.cancel_pending()

    def cancel_pending(self):
        self.generation += 1

    def pending_request(self) -> Optional[MoveRequest]:
        side = self.current_side
        if not self.is_computer(side):
            return None
        return MoveRequest(side=side, board=self.board, generation=self.generation)

    def submit(self, request: MoveRequest, move: Optional[Coord]) -> Optional[TurnState]:
        if request.generation != self.generation:
            logger.info(
                "Discarding stale move for %s (generation %d, now %d)",
                side_label(request.side),
                request.generation,
                self.generation,
            )
            return None
        if move is None:
            raise IllegalMoveError(f"No move supplied for {side_label(request.side)}")
        return self.play(*move)
