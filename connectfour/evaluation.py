"""Static heuristic evaluation of a Connect Four position."""

from __future__ import annotations

from connectfour.engine import CENTER_COL, EMPTY, WINDOWS, Board, Window, is_legal, other

WIN_WINDOW = 99999
OPEN_THREE = 10
OPEN_TWO = 2
CENTER_WEIGHT = 3


def score(board: Board, player: int) -> int:
    """
    Heuristic score of ``board`` from ``player``'s point of view.

    Every 4-cell window (horizontal, vertical, both diagonals) is scored once:
      - four of a kind            -> +/-WIN_WINDOW
      - three + one playable gap  -> +/-OPEN_THREE
      - two + two empty           -> +/-OPEN_TWO
    Pieces in the center column add CENTER_WEIGHT for the player and subtract
    it for the opponent, so score(b, 1) == -score(b, 2) for any board.
    """

    total = 0
    for window in WINDOWS:
        total += _score_window(board, window, player)

    center = board.cells[:, CENTER_COL]
    total += CENTER_WEIGHT * int((center == player).sum())
    total -= CENTER_WEIGHT * int((center == other(player)).sum())
    return total


def _score_window(board: Board, window: Window, player: int) -> int:
    values = [board.cell(r, c) for r, c in window]
    own = values.count(player)
    opp = values.count(other(player))
    empty = values.count(EMPTY)

    if own == 4:
        return WIN_WINDOW
    if opp == 4:
        return -WIN_WINDOW
    if empty == 1 and (own == 3 or opp == 3):
        _, gap_col = window[values.index(EMPTY)]
        if is_legal(board, gap_col):
            return OPEN_THREE if own == 3 else -OPEN_THREE
        return 0
    if empty == 2 and own == 2:
        return OPEN_TWO
    if empty == 2 and opp == 2:
        return -OPEN_TWO
    return 0
