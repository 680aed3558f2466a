import pytest

from connectfour.agents import AlphaBetaAgent, HumanAgent, RandomAgent
from connectfour.config import GameConfig, build_agents, normalize_strategy
from connectfour.errors import UnknownAgentStrategy


def test_defaults_validate():
    cfg = GameConfig()
    cfg.validate()
    p1, p2 = build_agents(cfg)
    assert isinstance(p1, HumanAgent)
    assert isinstance(p2, AlphaBetaAgent)
    assert p2.depth == cfg.depth


@pytest.mark.parametrize(
    "raw, expected",
    [("human", "human"), ("AI", "ai"), ("search", "ai"), ("alphabeta", "ai"), (" random ", "random")],
)
def test_strategy_names(raw, expected):
    assert normalize_strategy(raw) == expected


@pytest.mark.parametrize("bad", ["", "minimax-ish", "expectimax", None])
def test_unknown_strategy_fails_fast(bad):
    with pytest.raises(UnknownAgentStrategy):
        GameConfig(player2=bad).validate()
    with pytest.raises(UnknownAgentStrategy):
        build_agents(GameConfig(player1=bad))


def test_unknown_strategy_is_a_value_error():
    with pytest.raises(ValueError):
        normalize_strategy("telepathy")


@pytest.mark.parametrize("depth", [0, 9])
def test_depth_out_of_range(depth):
    with pytest.raises(ValueError):
        GameConfig(depth=depth).validate()


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        GameConfig(move_delay=-0.1).validate()


def test_agents_get_identities_and_seeds():
    cfg = GameConfig(player1="random", player2="random", seed=10)
    p1, p2 = build_agents(cfg)
    assert isinstance(p1, RandomAgent) and isinstance(p2, RandomAgent)
    assert (p1.player, p2.player) == (1, 2)
    again1, _ = build_agents(cfg)
    assert p1.rng.random() == again1.rng.random()
