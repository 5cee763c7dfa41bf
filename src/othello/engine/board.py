from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

Grid = Tuple[Tuple[Optional[str], ...], ...]


@dataclass(frozen=True)
class Board:
    """Immutable 8x8 Othello board.

    Cells hold ``Board.DARK``, ``Board.LIGHT`` or ``Board.EMPTY``. Every
    operation that changes the position returns a new Board.
    """

    DARK = "DARK"
    LIGHT = "LIGHT"
    EMPTY = None
    SIZE = 8

    grid: Grid

    def __post_init__(self):
        if len(self.grid) != self.SIZE or any(len(row) != self.SIZE for row in self.grid):
            raise ValueError(f"Board must be {self.SIZE}x{self.SIZE}")
        for row in self.grid:
            for cell in row:
                if cell not in (self.DARK, self.LIGHT, self.EMPTY):
                    raise ValueError(f"Invalid cell state {cell!r}")

    @classmethod
    def empty(cls) -> "Board":
        return cls(tuple(tuple(cls.EMPTY for _ in range(cls.SIZE)) for _ in range(cls.SIZE)))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from text rows using ``D``, ``L`` and ``.``."""
        mapping = {"D": cls.DARK, "L": cls.LIGHT, ".": cls.EMPTY}
        try:
            return cls(tuple(tuple(mapping[ch] for ch in row) for row in rows))
        except KeyError as exc:
            raise ValueError(f"Unknown cell character {exc.args[0]!r}") from exc

    @classmethod
    def from_state_string(cls, state: str) -> "Board":
        if len(state) != cls.SIZE * cls.SIZE:
            raise ValueError(f"State string must have {cls.SIZE * cls.SIZE} cells")
        return cls.from_rows([state[r * cls.SIZE:(r + 1) * cls.SIZE] for r in range(cls.SIZE)])

    def is_on_board(self, r: int, c: int) -> bool:
        return 0 <= r < self.SIZE and 0 <= c < self.SIZE

    def get_piece(self, r: int, c: int) -> Optional[str]:
        if self.is_on_board(r, c):
            return self.grid[r][c]
        return None

    def with_cells(self, cells: Iterable[Tuple[int, int]], side: str) -> "Board":
        rows = [list(row) for row in self.grid]
        for r, c in cells:
            rows[r][c] = side
        return Board(tuple(tuple(row) for row in rows))

    def to_state_string(self) -> str:
        chars = []
        for row in self.grid:
            for cell in row:
                if cell == self.DARK:
                    chars.append("D")
                elif cell == self.LIGHT:
                    chars.append("L")
                else:
                    chars.append(".")
        return "".join(chars)

    def __str__(self) -> str:
        state = self.to_state_string()
        return "\n".join(state[r * self.SIZE:(r + 1) * self.SIZE] for r in range(self.SIZE))


def create_initial_board() -> Board:
    mid = Board.SIZE // 2
    # (3,3) and (4,4) light, (3,4) and (4,3) dark
    board = Board.empty()
    board = board.with_cells([(mid - 1, mid - 1), (mid, mid)], Board.LIGHT)
    return board.with_cells([(mid - 1, mid), (mid, mid - 1)], Board.DARK)


def count_discs(board: Board) -> Tuple[int, int]:
    dark = 0
    light = 0
    for row in board.grid:
        for cell in row:
            if cell == Board.DARK:
                dark += 1
            elif cell == Board.LIGHT:
                light += 1
    return dark, light


def opponent(side: str) -> str:
    return Board.LIGHT if side == Board.DARK else Board.DARK


def side_label(side: str) -> str:
    if side == Board.DARK:
        return "Dark"
    if side == Board.LIGHT:
        return "Light"
    return side.capitalize()


def coord_to_str(r: int, c: int) -> str:
    return f"{chr(65 + c)}{r + 1}"


def str_to_coord(coord: str) -> Tuple[int, int]:
    if len(coord) < 2 or not coord[0].isalpha():
        raise ValueError(f"Invalid coordinate {coord!r}")
    c = ord(coord[0].upper()) - 65
    r = int(coord[1:]) - 1
    if not (0 <= r < Board.SIZE and 0 <= c < Board.SIZE):
        raise ValueError(f"Coordinate {coord!r} is off the board")
    return r, c
