"""Game configuration and agent construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from connectfour.agents import Agent, AlphaBetaAgent, HumanAgent, RandomAgent
from connectfour.agents.alphabeta import DEFAULT_DEPTH, check_depth
from connectfour.engine import PLAYER_1, PLAYER_2
from connectfour.errors import UnknownAgentStrategy

STRATEGIES = ("human", "ai", "random")
_ALIASES: Dict[str, str] = {"search": "ai", "alphabeta": "ai"}


def normalize_strategy(strategy: str) -> str:
    key = str(strategy).strip().lower()
    key = _ALIASES.get(key, key)
    if key not in STRATEGIES:
        raise UnknownAgentStrategy(strategy, STRATEGIES)
    return key


@dataclass(frozen=True)
class GameConfig:
    player1: str = "human"
    player2: str = "ai"
    depth: int = DEFAULT_DEPTH
    move_delay: float = 0.5
    seed: Optional[int] = None

    def validate(self) -> None:
        normalize_strategy(self.player1)
        normalize_strategy(self.player2)
        check_depth(self.depth)
        if self.move_delay < 0:
            raise ValueError("move_delay must be >= 0")


def build_agent(strategy: str, player: int, cfg: GameConfig) -> Agent:
    choice = normalize_strategy(strategy)
    if choice == "human":
        return HumanAgent(player)
    if choice == "random":
        seed = None if cfg.seed is None else cfg.seed + player - 1
        return RandomAgent(player, seed=seed)
    return AlphaBetaAgent(player, depth=cfg.depth)


def build_agents(cfg: GameConfig) -> Tuple[Agent, Agent]:
    cfg.validate()
    return build_agent(cfg.player1, PLAYER_1, cfg), build_agent(cfg.player2, PLAYER_2, cfg)
