"""Error kinds raised by the Connect Four engine and turn coordinator."""

from __future__ import annotations

from typing import Optional


class ConnectFourError(Exception):
    """Base class for every error raised by this package."""


class IllegalMoveError(ConnectFourError, ValueError):
    """A piece was dropped into a full or out-of-range column."""

    def __init__(self, col: object, reason: str = "column full or out of range") -> None:
        super().__init__(f"illegal move {col!r}: {reason}")
        self.col = col
        self.reason = reason


class IllegalMoveByHuman(IllegalMoveError):
    """A human proposed an unplayable column; recovered by re-prompting."""


class IllegalMoveByAgent(IllegalMoveError):
    """A search or random agent proposed an unplayable column (agent defect)."""

    def __init__(self, col: object, agent_label: str) -> None:
        super().__init__(col, f"proposed by {agent_label}")
        self.agent_label = agent_label


class UnknownAgentStrategy(ConnectFourError, ValueError):
    def __init__(self, strategy: object, choices: Optional[tuple] = None) -> None:
        msg = f"unsupported agent strategy: {strategy!r}"
        if choices:
            msg += f" (expected one of {', '.join(choices)})"
        super().__init__(msg)
        self.strategy = strategy


class RandomAgentExhausted(ConnectFourError):
    def __init__(self, agent_label: str, attempts: int) -> None:
        super().__init__(f"{agent_label} found no legal column after {attempts} attempts")
        self.agent_label = agent_label
        self.attempts = attempts


class GameOverError(ConnectFourError):
    """A move was offered to a session that has already finished."""
