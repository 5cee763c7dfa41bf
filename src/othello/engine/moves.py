from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from othello.engine.board import Board, opponent

Coord = Tuple[int, int]
Captures = Tuple[Coord, ...]

DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class LegalMoves:
    """Legal destinations for one side on one board.

    Stored as an 8x8 table indexed by coordinates; each cell holds the
    capture tuple for that destination or ``None``.
    """

    def __init__(self, table: List[List[Optional[Captures]]]):
        self._table = table
        self._count = sum(1 for row in table for captures in row if captures)

    @classmethod
    def none(cls) -> "LegalMoves":
        return cls([[None] * Board.SIZE for _ in range(Board.SIZE)])

    def __contains__(self, coord) -> bool:
        r, c = coord
        if not (0 <= r < Board.SIZE and 0 <= c < Board.SIZE):
            return False
        return self._table[r][c] is not None

    def __getitem__(self, coord: Coord) -> Captures:
        r, c = coord
        captures = self._table[r][c] if coord in self else None
        if captures is None:
            raise KeyError(coord)
        return captures

    def get(self, coord: Coord) -> Optional[Captures]:
        return self._table[coord[0]][coord[1]] if coord in self else None

    def __iter__(self) -> Iterator[Coord]:
        for r in range(Board.SIZE):
            for c in range(Board.SIZE):
                if self._table[r][c] is not None:
                    yield r, c

    def items(self) -> Iterator[Tuple[Coord, Captures]]:
        for coord in self:
            yield coord, self._table[coord[0]][coord[1]]

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, LegalMoves):
            return NotImplemented
        return self._table == other._table

    def __repr__(self) -> str:
        return f"LegalMoves({list(self)})"


def captures_for(board: Board, r: int, c: int, side: str) -> Captures:
    """Opponent discs that playing ``side`` at (r, c) would flip."""
    if board.grid[r][c] is not Board.EMPTY:
        return ()
    enemy = opponent(side)
    flips: List[Coord] = []
    for dr, dc in DIRECTIONS:
        nr, nc = r + dr, c + dc
        line: List[Coord] = []
        while board.is_on_board(nr, nc) and board.grid[nr][nc] == enemy:
            line.append((nr, nc))
            nr += dr
            nc += dc
        if line and board.is_on_board(nr, nc) and board.grid[nr][nc] == side:
            flips.extend(line)
    return tuple(flips)


def legal_moves(board: Board, side: str) -> LegalMoves:
    table: List[List[Optional[Captures]]] = []
    for r in range(Board.SIZE):
        row: List[Optional[Captures]] = []
        for c in range(Board.SIZE):
            captures = captures_for(board, r, c, side)
            row.append(captures or None)
        table.append(row)
    return LegalMoves(table)


def has_legal_move(board: Board, side: str) -> bool:
    for r in range(Board.SIZE):
        for c in range(Board.SIZE):
            if captures_for(board, r, c, side):
                return True
    return False


def apply_move(board: Board, destination: Coord, side: str, captures: Captures) -> Board:
    """Place ``side`` at ``destination`` and flip ``captures``.

    ``captures`` must come from ``legal_moves`` for the same board, side and
    destination.
    """
    r, c = destination
    enemy = opponent(side)
    assert board.grid[r][c] is Board.EMPTY, f"destination {destination} is occupied"
    assert captures, "a move must capture at least one disc"
    assert all(board.grid[fr][fc] == enemy for fr, fc in captures), "captures must be opponent discs"
    return board.with_cells([destination, *captures], side)
