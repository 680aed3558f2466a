"""Depth-limited minimax with alpha-beta pruning."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from connectfour.engine import Board, drop, legal_columns, other, winner
from connectfour.evaluation import score

TERMINAL_SCORE = 1_000_000
MIN_DEPTH = 1
MAX_DEPTH = 8


@dataclass(frozen=True)
class SearchResult:
    score: float
    column: Optional[int]


@dataclass
class SearchStats:
    nodes: int = 0


def alphabeta(
    board: Board,
    depth: int,
    player: int,
    root_player: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Best achievable score for ``root_player`` with ``player`` to move.

      - a decided board scores +/-TERMINAL_SCORE before anything else
      - at the depth frontier (or on a full board) fall back to score()
      - columns are tried left to right and only a strictly better score
        replaces the incumbent, so ties go to the lowest column
      - once beta <= alpha the remaining siblings cannot matter and are skipped
    """

    if stats is not None:
        stats.nodes += 1

    won_by = winner(board)
    if won_by is not None:
        return SearchResult(TERMINAL_SCORE if won_by == root_player else -TERMINAL_SCORE, None)

    legal = legal_columns(board)
    if not legal or depth <= 0:
        return SearchResult(score(board, root_player), None)

    best_col: Optional[int] = None
    if player == root_player:
        best = -math.inf
        for col in legal:
            child = drop(board, col, player)
            value = alphabeta(child, depth - 1, other(player), root_player, alpha, beta, stats).score
            if value > best:
                best = value
                best_col = col
            alpha = max(alpha, value)
            if beta <= alpha:
                break  # beta cut-off
        return SearchResult(best, best_col)

    best = math.inf
    for col in legal:
        child = drop(board, col, player)
        value = alphabeta(child, depth - 1, other(player), root_player, alpha, beta, stats).score
        if value < best:
            best = value
            best_col = col
        beta = min(beta, value)
        if beta <= alpha:
            break  # alpha cut-off
    return SearchResult(best, best_col)
