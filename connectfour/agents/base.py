"""Abstract base class for Connect Four agents."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Optional

from connectfour.engine import PLAYERS, Board


@dataclass(frozen=True)
class Proposal:
    """A proposed column (None when no move was produced) and an optional score."""

    column: Optional[int]
    score: Optional[float] = None


class Agent(abc.ABC):
    strategy: str

    def __init__(self, player: int) -> None:
        if player not in PLAYERS:
            raise ValueError(f"player must be 1 or 2, got {player!r}")
        self.player = player

    @property
    def label(self) -> str:
        return f"Player {self.player}:{self.strategy}"

    @property
    def is_human(self) -> bool:
        return False

    @abc.abstractmethod
    async def propose_move(self, board: Board) -> Proposal:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"
