"""Connect Four package (engine + search + agents + turn coordinator + CLI)."""

from connectfour.config import GameConfig
from connectfour.coordinator import GameSession, Phase, Status, TurnCoordinator, apply_move, new_game
from connectfour.engine import Board, Move, drop, initial_board, is_full, is_legal, legal_columns, winner
from connectfour.evaluation import score
from connectfour.search import SearchResult, alphabeta

__all__ = [
    "Board",
    "GameConfig",
    "GameSession",
    "Move",
    "Phase",
    "SearchResult",
    "Status",
    "TurnCoordinator",
    "alphabeta",
    "apply_move",
    "drop",
    "initial_board",
    "is_full",
    "is_legal",
    "legal_columns",
    "new_game",
    "score",
    "winner",
]
