"""
Connect Four board on the standard 7x6 grid with gravity.

Designed to be search-friendly:
- Board is a frozen dataclass; drop() returns a new board
- row 0 is the BOTTOM row, heights[c] is the next free row in column c
- cells hold 0 (empty), 1 (player 1) or 2 (player 2)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from connectfour.errors import IllegalMoveError

WIDTH = 7
HEIGHT = 6
CONNECT = 4
CENTER_COL = WIDTH // 2

EMPTY = 0
PLAYER_1 = 1
PLAYER_2 = 2
PLAYERS = (PLAYER_1, PLAYER_2)

# (d_row, d_col): right, up, up-right, up-left
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (1, 1), (1, -1))

Window = Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class Move:
    ply: int
    player: int
    row: int
    col: int


@dataclass(frozen=True)
class Board:
    cells: np.ndarray  # shape (HEIGHT, WIDTH), dtype=int8
    heights: np.ndarray  # shape (WIDTH,), dtype=int16

    def __post_init__(self) -> None:
        # Boards are values: the arrays are read-only.
        self.cells.setflags(write=False)
        self.heights.setflags(write=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash(self.cells.tobytes())

    def cell(self, row: int, col: int) -> int:
        return int(self.cells[row, col])

    @property
    def pieces(self) -> int:
        return int(self.heights.sum())

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """
        Build a board from a matrix listed TOP row first, the way it is drawn.

        Raises ValueError for a wrong shape, unknown cell values or a piece
        floating above an empty cell.
        """

        cells = np.array(rows, dtype=np.int8)
        if cells.shape != (HEIGHT, WIDTH):
            raise ValueError(f"board must be {HEIGHT}x{WIDTH}, got {cells.shape}")
        if not np.isin(cells, (EMPTY, PLAYER_1, PLAYER_2)).all():
            raise ValueError("cells must be 0, 1 or 2")

        cells = cells[::-1].copy()
        heights = np.zeros((WIDTH,), dtype=np.int16)
        for c in range(WIDTH):
            filled = cells[:, c] != EMPTY
            h = int(filled.sum())
            if not filled[:h].all():
                raise ValueError(f"column {c} has a floating piece")
            heights[c] = h
        return cls(cells=cells, heights=heights)


def initial_board() -> Board:
    cells = np.zeros((HEIGHT, WIDTH), dtype=np.int8)
    heights = np.zeros((WIDTH,), dtype=np.int16)
    return Board(cells=cells, heights=heights)


def other(player: int) -> int:
    return 3 - player


def is_legal(board: Board, col: object) -> bool:
    if isinstance(col, bool) or not isinstance(col, (int, np.integer)):
        return False
    if col < 0 or col >= WIDTH:
        return False
    return int(board.heights[col]) < HEIGHT


def legal_columns(board: Board) -> List[int]:
    return [int(c) for c in np.nonzero(board.heights < HEIGHT)[0]]


def is_full(board: Board) -> bool:
    return not legal_columns(board)


def drop(board: Board, col: int, player: int) -> Board:
    """Return a new board with ``player``'s piece in the lowest empty cell of ``col``."""

    if player not in PLAYERS:
        raise ValueError(f"player must be 1 or 2, got {player!r}")
    if not is_legal(board, col):
        raise IllegalMoveError(col)

    row = int(board.heights[col])
    cells = board.cells.copy()
    cells[row, col] = player
    heights = board.heights.copy()
    heights[col] += 1
    return Board(cells=cells, heights=heights)


def landing_row(board: Board, col: int) -> int:
    """Row the next piece dropped into ``col`` lands on."""
    return int(board.heights[col])


def _build_windows() -> Tuple[Window, ...]:
    # One window per (start cell, direction); windows running off the board are skipped.
    out: List[Window] = []
    for r in range(HEIGHT):
        for c in range(WIDTH):
            for dr, dc in DIRECTIONS:
                end_r = r + dr * (CONNECT - 1)
                end_c = c + dc * (CONNECT - 1)
                if not (0 <= end_r < HEIGHT and 0 <= end_c < WIDTH):
                    continue
                out.append(tuple((r + dr * i, c + dc * i) for i in range(CONNECT)))
    return tuple(out)


WINDOWS = _build_windows()


def winner(board: Board) -> Optional[int]:
    cells = board.cells
    for window in WINDOWS:
        first = int(cells[window[0]])
        if first == EMPTY:
            continue
        if all(int(cells[pos]) == first for pos in window[1:]):
            return first
    return None


def render(board: Board) -> str:
    sym = {PLAYER_1: "X", PLAYER_2: "O", EMPTY: "."}
    lines: List[str] = []
    for r in range(HEIGHT - 1, -1, -1):
        lines.append(" ".join(sym[board.cell(r, c)] for c in range(WIDTH)))
    lines.append("-" * (2 * WIDTH - 1))
    lines.append(" ".join(str(c) for c in range(WIDTH)))
    return "\n".join(lines)
