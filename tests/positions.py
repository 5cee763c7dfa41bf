"""Hand-built positions shared by the tests."""

from othello.engine.board import Board

EMPTY_ROW = "........"

# Light's only discs sit against Dark corner discs, so Light can never flank.
# Dark can capture in both clusters.
TWO_CORNER_CLUSTERS = Board.from_rows(
    ["DL......"] + [EMPTY_ROW] * 6 + ["DL......"]
)

# Same as above after Dark took the bottom cluster: Light has no move, Dark has C1.
LIGHT_STUCK = Board.from_rows(
    ["DL......"] + [EMPTY_ROW] * 6 + ["DDD....."]
)

# Full board, 35 dark vs 29 light.
DARK_35_LIGHT_29 = Board.from_rows(
    ["DDDDDDDD"] * 4 + ["DDDLLLLL"] + ["LLLLLLLL"] * 3
)

FULL_DRAW = Board.from_rows(["DDDDDDDD"] * 4 + ["LLLLLLLL"] * 4)

FULL_LIGHT_WINS = Board.from_rows(["DDDDDDDD"] * 3 + ["LLLLLLLL"] * 5)

# One empty corner; Dark fills it and the game ends 64-0.
LAST_MOVE_FOR_DARK = Board.from_rows([".LDDDDDD"] + ["DDDDDDDD"] * 7)

# Dark can take the A1 corner or play E5 in the middle.
CORNER_OR_CENTER = Board.from_rows(
    [".LD....."]
    + [EMPTY_ROW] * 3
    + ["..DL...."]
    + [EMPTY_ROW] * 3
)
