"""Human-in-the-loop agent: moves arrive from the presentation layer."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from connectfour.agents.base import Agent, Proposal
from connectfour.engine import Board

logger = logging.getLogger(__name__)


class MoveRequest:
    """
    One outstanding "it is your turn" request.

    The presentation layer settles it exactly once, either with a column or
    by cancelling (which yields None). Later calls are ignored.
    """

    def __init__(self, player: int, board: Board, on_settle: Optional[Callable[[], None]] = None) -> None:
        self.player = player
        self.board = board
        self._on_settle = on_settle
        self._future: asyncio.Future = asyncio.get_running_loop().create_future()

    @property
    def done(self) -> bool:
        return self._future.done()

    def resolve(self, col: Optional[int]) -> bool:
        if self._future.done():
            logger.debug("move request for player %d already settled; ignoring %r", self.player, col)
            return False
        self._future.set_result(col)
        if self._on_settle is not None:
            self._on_settle()
        return True

    def cancel(self) -> bool:
        return self.resolve(None)

    def __await__(self):
        return self._future.__await__()


class HumanAgent(Agent):
    strategy = "human"

    def __init__(self, player: int) -> None:
        super().__init__(player)
        self.pending: Optional[MoveRequest] = None
        self._requested = asyncio.Event()

    @property
    def is_human(self) -> bool:
        return True

    async def wait_for_request(self) -> MoveRequest:
        """Wait until the coordinator parks on this agent and return the request."""
        while True:
            await self._requested.wait()
            if self.pending is not None and not self.pending.done:
                return self.pending
            self._requested.clear()

    def submit(self, col: Optional[int]) -> bool:
        if self.pending is None:
            return False
        return self.pending.resolve(col)

    async def propose_move(self, board: Board) -> Proposal:
        request = MoveRequest(self.player, board, on_settle=self._requested.clear)
        self.pending = request
        self._requested.set()
        try:
            col = await request
        finally:
            self.pending = None
            self._requested.clear()
        return Proposal(col)
