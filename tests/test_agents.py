import asyncio
from collections import Counter

import pytest

from connectfour.agents import AlphaBetaAgent, HumanAgent, Proposal, RandomAgent
from connectfour.engine import HEIGHT, initial_board, legal_columns
from connectfour.search import TERMINAL_SCORE
from helpers import TIE_SEQUENCE, alternate, board_after


def test_labels_combine_identity_and_strategy():
    assert AlphaBetaAgent(1).label == "Player 1:ai"
    assert RandomAgent(2).label == "Player 2:random"
    assert HumanAgent(1).label == "Player 1:human"


def test_agent_rejects_unknown_identity():
    with pytest.raises(ValueError):
        RandomAgent(0)


def test_random_agent_only_picks_legal_columns():
    # columns 0 and 5 are full
    b = board_after(alternate([0] * HEIGHT + [5] * HEIGHT))
    legal = legal_columns(b)
    agent = RandomAgent(1, seed=123)
    for _ in range(500):
        assert agent.choose_move(b) in legal


def test_random_agent_is_roughly_uniform():
    b = board_after(alternate([6] * HEIGHT))
    legal = legal_columns(b)
    agent = RandomAgent(2, seed=7)
    trials = 6000
    counts = Counter(agent.choose_move(b) for _ in range(trials))
    assert set(counts) == set(legal)
    expected = trials / len(legal)
    for col in legal:
        assert abs(counts[col] - expected) < 0.15 * expected


def test_random_agent_is_reproducible_with_seed():
    b = initial_board()
    a = RandomAgent(1, seed=5)
    c = RandomAgent(1, seed=5)
    assert [a.choose_move(b) for _ in range(20)] == [c.choose_move(b) for _ in range(20)]


def test_random_agent_on_full_board_returns_none():
    full = board_after(alternate(TIE_SEQUENCE))
    assert RandomAgent(1).choose_move(full) is None


def test_alphabeta_depth_is_validated():
    for bad in (0, 9, -1, 2.5, True):
        with pytest.raises(ValueError):
            AlphaBetaAgent(1, depth=bad)
    agent = AlphaBetaAgent(1, depth=1)
    agent.set_depth(8)
    assert agent.depth == 8
    with pytest.raises(ValueError):
        agent.set_depth(0)
    assert agent.depth == 8


@pytest.mark.asyncio
async def test_alphabeta_agent_proposes_winning_move_with_score():
    b = board_after(alternate([0, 0, 1, 1, 2, 2]))
    proposal = await AlphaBetaAgent(1, depth=3).propose_move(b)
    assert proposal == Proposal(3, TERMINAL_SCORE)


@pytest.mark.asyncio
async def test_alphabeta_agent_on_full_board_proposes_nothing():
    full = board_after(alternate(TIE_SEQUENCE))
    assert await AlphaBetaAgent(1, depth=2).propose_move(full) == Proposal(None)


@pytest.mark.asyncio
async def test_human_move_request_resolves_once():
    human = HumanAgent(1)
    task = asyncio.ensure_future(human.propose_move(initial_board()))
    request = await human.wait_for_request()
    assert human.pending is request
    assert not request.done

    assert request.resolve(4) is True
    assert request.resolve(5) is False
    assert request.cancel() is False

    assert await task == Proposal(4)
    assert human.pending is None


@pytest.mark.asyncio
async def test_human_cancel_yields_no_column():
    human = HumanAgent(2)
    task = asyncio.ensure_future(human.propose_move(initial_board()))
    await human.wait_for_request()
    assert human.submit(None) is True
    assert await task == Proposal(None)


@pytest.mark.asyncio
async def test_human_submit_without_pending_request_is_ignored():
    human = HumanAgent(1)
    assert human.submit(3) is False


@pytest.mark.asyncio
async def test_each_human_turn_gets_a_fresh_request():
    human = HumanAgent(1)
    first = asyncio.ensure_future(human.propose_move(initial_board()))
    r1 = await human.wait_for_request()
    r1.resolve(0)
    await first

    second = asyncio.ensure_future(human.propose_move(initial_board()))
    r2 = await human.wait_for_request()
    assert r2 is not r1
    r1.resolve(6)  # stale request: no effect on the new one
    assert not r2.done
    r2.resolve(2)
    assert await second == Proposal(2)


@pytest.mark.asyncio
async def test_wait_for_request_skips_settled_requests():
    human = HumanAgent(1)
    first = asyncio.ensure_future(human.propose_move(initial_board()))
    stale = await human.wait_for_request()
    stale.resolve(1)

    # Before the settled turn finishes, waiting must not hand back the old request.
    waiter = asyncio.ensure_future(human.wait_for_request())
    await first
    assert not waiter.done()

    second = asyncio.ensure_future(human.propose_move(initial_board()))
    request = await waiter
    assert request is not stale
    request.resolve(4)
    assert await second == Proposal(4)
