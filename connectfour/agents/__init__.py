"""Agent implementations for Connect Four."""

from connectfour.agents.alphabeta import AlphaBetaAgent
from connectfour.agents.base import Agent, Proposal
from connectfour.agents.human import HumanAgent, MoveRequest
from connectfour.agents.random_agent import RandomAgent

__all__ = ["Agent", "Proposal", "HumanAgent", "MoveRequest", "RandomAgent", "AlphaBetaAgent"]
