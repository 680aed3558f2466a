"""
Turn coordinator: the game session value and the loop that drives it.

The session is an immutable value. apply_move() is the only transition and
TurnCoordinator is the only owner that feeds it moves, one turn at a time:

    AwaitingMove(turn) -> Evaluating(turn, move) -> AwaitingMove(other) | Over(winner)
"""

from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Sequence, Tuple

from connectfour.agents import Agent, AlphaBetaAgent, HumanAgent, Proposal, RandomAgent
from connectfour.config import GameConfig, build_agents
from connectfour.engine import (
    PLAYER_1,
    PLAYER_2,
    Board,
    Move,
    drop,
    initial_board,
    is_full,
    is_legal,
    landing_row,
    other,
    winner,
)
from connectfour.errors import (
    GameOverError,
    IllegalMoveByAgent,
    IllegalMoveByHuman,
    IllegalMoveError,
    RandomAgentExhausted,
)

logger = logging.getLogger(__name__)

SMOOTHING = 0.3
FINAL_SCORE = 400.0
MAX_RANDOM_ATTEMPTS = 100

StatusFn = Callable[[str], None]


class Status(enum.Enum):
    IN_PROGRESS = "in-progress"
    WON = "won"
    TIE = "tie"


class Phase(enum.Enum):
    AWAITING_MOVE = "awaiting-move"
    EVALUATING = "evaluating"
    OVER = "over"


@dataclass(frozen=True)
class GameSession:
    board: Board
    turn: int = PLAYER_1
    status: Status = Status.IN_PROGRESS
    winner: Optional[int] = None
    player1_score: float = 0.0
    player2_score: float = 0.0
    history: Tuple[Move, ...] = ()
    stalled: bool = False

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def score_for(self, player: int) -> float:
        return self.player1_score if player == PLAYER_1 else self.player2_score


def new_game() -> GameSession:
    return GameSession(board=initial_board())


def apply_move(session: GameSession, col: int, score: float) -> GameSession:
    """
    Drop the current player's piece into ``col`` and settle the outcome.

    ``score`` is the mover's signed evaluation of the resulting position. Both
    display scores move SMOOTHING of the way towards it (negated for the other
    player); a win snaps them to +/-FINAL_SCORE instead.
    """

    if session.is_over:
        raise GameOverError(f"game is over ({session.status.value})")
    if not is_legal(session.board, col):
        raise IllegalMoveError(col)

    mover = session.turn
    move = Move(ply=len(session.history), player=mover, row=landing_row(session.board, col), col=col)
    board = drop(session.board, col, mover)
    history = session.history + (move,)

    won_by = winner(board)
    if won_by is not None:
        return replace(
            session,
            board=board,
            status=Status.WON,
            winner=won_by,
            player1_score=FINAL_SCORE if won_by == PLAYER_1 else -FINAL_SCORE,
            player2_score=FINAL_SCORE if won_by == PLAYER_2 else -FINAL_SCORE,
            history=history,
        )

    signed_p1 = score if mover == PLAYER_1 else -score
    p1 = session.player1_score * (1 - SMOOTHING) + signed_p1 * SMOOTHING
    p2 = session.player2_score * (1 - SMOOTHING) - signed_p1 * SMOOTHING

    if is_full(board):
        return replace(
            session,
            board=board,
            status=Status.TIE,
            player1_score=p1,
            player2_score=p2,
            history=history,
        )

    return replace(
        session,
        board=board,
        turn=other(mover),
        player1_score=p1,
        player2_score=p2,
        history=history,
    )


def status_line(session: GameSession, agents: Dict[int, Agent]) -> str:
    if session.status is Status.WON:
        return f"Game Over: Player {session.winner} Wins!"
    if session.status is Status.TIE:
        return "Game Over: Tie!"
    return agents[session.turn].label


class TurnCoordinator:
    def __init__(
        self,
        agents: Sequence[Agent],
        *,
        move_delay: float = 0.5,
        on_status: Optional[StatusFn] = None,
        session: Optional[GameSession] = None,
    ) -> None:
        by_player = {a.player: a for a in agents}
        if len(agents) != 2 or set(by_player) != {PLAYER_1, PLAYER_2}:
            raise ValueError("need exactly one agent for player 1 and one for player 2")
        self.agents = by_player
        self.move_delay = move_delay
        self.on_status = on_status
        self.session = session if session is not None else new_game()
        self._phase = Phase.AWAITING_MOVE
        self._game = 0

    @classmethod
    def from_config(cls, cfg: GameConfig, *, on_status: Optional[StatusFn] = None) -> "TurnCoordinator":
        return cls(build_agents(cfg), move_delay=cfg.move_delay, on_status=on_status)

    @property
    def phase(self) -> Phase:
        if self.session.is_over:
            return Phase.OVER
        return self._phase

    def agent_for(self, player: int) -> Agent:
        return self.agents[player]

    def status(self) -> str:
        return status_line(self.session, self.agents)

    def reset(self) -> GameSession:
        # Any turn still in flight belongs to the previous game and is dropped.
        self._game += 1
        for agent in self.agents.values():
            if isinstance(agent, HumanAgent) and agent.pending is not None:
                agent.pending.cancel()
        self.session = new_game()
        self._phase = Phase.AWAITING_MOVE
        self._publish()
        return self.session

    async def run(self) -> GameSession:
        """Play turns until the game ends or an agent defect stalls it."""
        self._publish()
        while not self.session.is_over and not self.session.stalled:
            await self.play_turn()
        return self.session

    async def play_turn(self) -> GameSession:
        session = self.session
        if session.is_over:
            raise GameOverError(f"game is over ({session.status.value})")
        if session.stalled:
            logger.warning("session is stalled; waiting for a reset")
            return session

        game = self._game
        agent = self.agent_for(session.turn)
        self._phase = Phase.AWAITING_MOVE
        if not agent.is_human and self.move_delay > 0:
            await asyncio.sleep(self.move_delay)
            if self._game != game:
                return self.session

        try:
            proposal = await self._request_move(agent, session.board)
            if self._game != game:
                logger.debug("discarding %s proposal made before a reset", agent.label)
                return self.session
            col = self._validate(agent, session.board, proposal)
        except IllegalMoveByHuman as exc:
            logger.info("%s; waiting for another column", exc)
            return session
        except (IllegalMoveByAgent, RandomAgentExhausted) as exc:
            logger.error("turn abandoned: %s", exc)
            self.session = replace(session, stalled=True)
            return self.session

        if col is None:
            logger.debug("%s cancelled the move request", agent.label)
            return session

        self._phase = Phase.EVALUATING
        score = proposal.score
        if score is None:
            score = self._display_score(agent, drop(session.board, col, agent.player))

        self.session = apply_move(session, col, score)
        self._phase = Phase.AWAITING_MOVE
        logger.debug("%s -> column %d (score %.1f)", agent.label, col, score)
        self._publish()
        return self.session

    async def _request_move(self, agent: Agent, board: Board) -> Proposal:
        if not isinstance(agent, RandomAgent):
            return await agent.propose_move(board)

        for _ in range(MAX_RANDOM_ATTEMPTS):
            proposal = await agent.propose_move(board)
            if proposal.column is not None and is_legal(board, proposal.column):
                return proposal
        raise RandomAgentExhausted(agent.label, MAX_RANDOM_ATTEMPTS)

    def _validate(self, agent: Agent, board: Board, proposal: Proposal) -> Optional[int]:
        col = proposal.column
        if agent.is_human:
            if col is not None and not is_legal(board, col):
                raise IllegalMoveByHuman(col)
            return col
        if col is None or not is_legal(board, col):
            raise IllegalMoveByAgent(col, agent.label)
        return col

    def _display_score(self, mover: Agent, board: Board) -> float:
        # Opponent's evaluator when it is a search agent, else a throwaway one.
        evaluator = self.agent_for(other(mover.player))
        if not isinstance(evaluator, AlphaBetaAgent):
            evaluator = AlphaBetaAgent(other(mover.player))
        return float(-evaluator.evaluate(board))

    def _publish(self) -> None:
        line = self.status()
        logger.info("%s", line)
        if self.on_status is not None:
            self.on_status(line)
