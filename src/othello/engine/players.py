from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional

from othello.engine.board import Board
from othello.engine.heuristic import select_move
from othello.engine.moves import Coord, legal_moves


class Player(ABC):
    """Chooses a move for ``side`` on ``board``; ``None`` when it has to pass."""

    label = "Player"

    @abstractmethod
    def choose_move(self, board: Board, side: str) -> Optional[Coord]:
        pass


class HeuristicPlayer(Player):
    """One-ply player: position weight, discs flipped and opponent mobility."""

    label = "Heuristic"

    def choose_move(self, board: Board, side: str) -> Optional[Coord]:
        return select_move(legal_moves(board, side), board, side)


class RandomPlayer(Player):
    """Random legal move, useful as a baseline in duels."""

    label = "Random"

    def __init__(self, rng_seed: int | None = None):
        self._rng = random.Random(rng_seed)

    def choose_move(self, board: Board, side: str) -> Optional[Coord]:
        moves = list(legal_moves(board, side))
        if not moves:
            return None
        return self._rng.choice(moves)
