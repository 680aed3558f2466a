"""Shared test doubles and board builders."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from connectfour.agents import Agent, Proposal
from connectfour.engine import Board, drop, initial_board

# Column order that fills the board without any four-in-a-row when the two
# players alternate starting with player 1 (repeats every two rows).
TIE_SEQUENCE: List[int] = [0, 2, 1, 3, 4, 6, 5] * 6


def board_after(moves: Iterable[Tuple[int, int]], board: Optional[Board] = None) -> Board:
    """Apply (col, player) pairs in order."""
    b = board if board is not None else initial_board()
    for col, player in moves:
        b = drop(b, col, player)
    return b


def alternate(cols: Sequence[int], first: int = 1) -> List[Tuple[int, int]]:
    out = []
    player = first
    for c in cols:
        out.append((c, player))
        player = 3 - player
    return out


class ScriptedAgent(Agent):
    """Non-human agent that replays a fixed list of columns."""

    strategy = "scripted"

    def __init__(self, player: int, columns: Sequence[Optional[int]], score: Optional[float] = None) -> None:
        super().__init__(player)
        self.columns = list(columns)
        self.score = score
        self.calls = 0

    async def propose_move(self, board: Board) -> Proposal:
        col = self.columns[self.calls]
        self.calls += 1
        return Proposal(col, self.score)
