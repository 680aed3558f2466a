"""Alpha-beta (minimax) agent over the static window evaluator."""

from __future__ import annotations

import logging
import time

from connectfour.agents.base import Agent, Proposal
from connectfour.engine import Board, legal_columns
from connectfour.evaluation import score
from connectfour.search import MAX_DEPTH, MIN_DEPTH, SearchResult, SearchStats, alphabeta

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 5


def check_depth(depth: int) -> int:
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise ValueError(f"depth must be an integer, got {depth!r}")
    if not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise ValueError(f"depth must be in [{MIN_DEPTH}, {MAX_DEPTH}], got {depth}")
    return depth


class AlphaBetaAgent(Agent):
    """
    Search agent.

    The opponent is always modelled as a worst-case adversary, including when
    it is actually a random agent: there are no chance nodes in the tree.
    """

    strategy = "ai"

    def __init__(self, player: int, depth: int = DEFAULT_DEPTH) -> None:
        super().__init__(player)
        self.depth = check_depth(depth)

    def set_depth(self, depth: int) -> None:
        self.depth = check_depth(depth)

    def evaluate(self, board: Board) -> int:
        return score(board, self.player)

    def search(self, board: Board) -> SearchResult:
        stats = SearchStats()
        start = time.perf_counter()
        result = alphabeta(board, self.depth, self.player, self.player, stats=stats)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info(
            "player %d: score=%s move=%s depth=%d nodes=%d (%.1f ms)",
            self.player,
            result.score,
            result.column,
            self.depth,
            stats.nodes,
            elapsed_ms,
        )
        return result

    async def propose_move(self, board: Board) -> Proposal:
        if not legal_columns(board):
            return Proposal(None)
        result = self.search(board)
        return Proposal(result.column, result.score)
