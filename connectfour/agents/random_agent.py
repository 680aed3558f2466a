"""Uniform random baseline agent."""

from __future__ import annotations

import logging
import random
from typing import Optional

from connectfour.agents.base import Agent, Proposal
from connectfour.engine import Board, legal_columns

logger = logging.getLogger(__name__)


class RandomAgent(Agent):
    strategy = "random"

    def __init__(self, player: int, seed: Optional[int] = None) -> None:
        super().__init__(player)
        self.rng = random.Random(seed)

    def choose_move(self, board: Board) -> Optional[int]:
        # Only known-legal columns are sampled; a full board yields None.
        legal = legal_columns(board)
        if not legal:
            return None
        move = self.rng.choice(legal)
        logger.debug("random player %d chose move %d", self.player, move)
        return move

    async def propose_move(self, board: Board) -> Proposal:
        return Proposal(self.choose_move(board))
