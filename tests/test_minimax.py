"""
Tests for the minimax best-move search.
"""
import random
from collections import Counter

import numpy as np
import pytest
from othello.core.board import Board, make_players, BOARD_AREA
from othello.core.effects import compute_effect, legal_moves, trial_move, SearchInvariantError
from othello.ai.search import minimax
from othello.ai.search.minimax import MinimaxSearch, SearchConfig, SearchResult, INIT_MAX_EFFECT
from othello.ai.search.move_pool import MoveRecordPool


OPENING_MOVES = [(2, 4), (3, 5), (4, 2), (5, 3)]


def opening():
    board = Board()
    black, white = make_players()
    board.setup_start(black, white)
    return board, black, white


def random_position(seed, num_moves):
    """Play random legal moves from the opening; return (board, player to move)."""
    rng = random.Random(seed)
    board, black, white = opening()
    player = black
    for _ in range(num_moves):
        moves = legal_moves(board, player)
        if not moves:
            break
        compute_effect(board, *rng.choice(moves), player)
        player = player.opponent
    return board, player


def reference_search(board, player, ply, max_ply):
    """Plain negamax without pruning; returns (value, best root moves)."""
    best_value = None
    best_moves = []
    for row, col in board.get_empty_cells():
        with trial_move(board, row, col, player) as effect:
            if effect.gain == 0:
                continue
            value = effect.gain
            if ply < max_ply and player.count + player.opponent.count < BOARD_AREA:
                value -= reference_search(board, player.opponent, ply + 1, max_ply)[0]
        if best_value is None or value > best_value:
            best_value = value
            best_moves = [(row, col)]
        elif value == best_value:
            best_moves.append((row, col))
    if best_value is None:
        return 0, []
    return best_value, best_moves


def test_search_config_defaults_and_roundtrip():
    """Test SearchConfig defaults and dict conversion."""
    config = SearchConfig()
    assert config.max_ply == 4
    assert config.seed is None
    assert config.verbose is False

    config = SearchConfig(max_ply=7, seed=3, verbose=True)
    restored = SearchConfig.from_dict(config.to_dict())
    assert restored.to_dict() == {'max_ply': 7, 'seed': 3, 'verbose': True}


@pytest.mark.parametrize("max_ply", [0, 11, -1])
def test_search_config_rejects_bad_depth(max_ply):
    """Test that search depth must be in 1-10."""
    with pytest.raises(ValueError):
        SearchConfig(max_ply=max_ply)

    board, black, _ = opening()
    with pytest.raises(ValueError):
        MinimaxSearch(board).search(black, max_ply)


def test_opening_one_ply():
    """Test that a 1-ply search from the opening picks one of the four moves."""
    board, black, white = opening()
    search = MinimaxSearch(board, seed=0)

    result = search.search(black, 1)

    assert isinstance(result, SearchResult)
    assert result.value == 2
    assert result.move in OPENING_MOVES
    assert result.moves == [result.move]


def test_opening_one_ply_covers_all_four_moves():
    """Test that the tie set at the opening is exactly the four legal moves."""
    seen = set()
    for seed in range(200):
        board, black, _ = opening()
        result = MinimaxSearch(board, seed=seed).search(black, 1)
        seen.add(result.move)

    assert seen == set(OPENING_MOVES)


def test_tie_break_uniformity():
    """Test that tied moves are chosen with roughly equal frequency."""
    trials = 2000
    counts = Counter()
    board, black, _ = opening()
    for seed in range(trials):
        search = MinimaxSearch(board, seed=seed)
        result = search.search(black, 1)
        counts[result.move] += 1
        search.release(result)

    assert set(counts) == set(OPENING_MOVES)
    expected = trials / len(OPENING_MOVES)
    for move in OPENING_MOVES:
        assert abs(counts[move] - expected) < 0.2 * expected


def test_same_seed_is_reproducible():
    """Test that the injected seed fixes the outcome."""
    board, player = random_position(seed=5, num_moves=10)

    first = MinimaxSearch(board, seed=99).search(player, 3)
    second = MinimaxSearch(board, seed=99).search(player, 3)

    assert first.value == second.value
    assert first.moves == second.moves


def test_injected_rng_is_used():
    """Test that an explicit random source drives tie-breaks."""
    board, black, _ = opening()
    first = MinimaxSearch(board, rng=random.Random(11)).search(black, 1)
    second = MinimaxSearch(board, rng=random.Random(11)).search(black, 1)

    assert first.move == second.move


def test_search_restores_board():
    """Test that a search leaves the board and counts exactly as found."""
    board, player = random_position(seed=2, num_moves=12)
    before = board.state.copy()
    counts = (player.count, player.opponent.count)

    MinimaxSearch(board, seed=0).search(player, 3)

    assert np.array_equal(board.state, before)
    assert (player.count, player.opponent.count) == counts


@pytest.mark.parametrize("seed", range(6))
def test_pruned_search_matches_plain_negamax(seed):
    """Test that pruning never changes the root value or best-move set."""
    board, player = random_position(seed=seed, num_moves=8 + seed)
    expected_value, expected_moves = reference_search(board, player, 1, 3)

    result = MinimaxSearch(board, seed=seed).search(player, 3)

    assert result.value == expected_value
    if expected_moves:
        assert result.move in expected_moves
    else:
        assert result.move is None


def test_pruning_happens_at_depth():
    """Test that deeper searches actually cut branches."""
    board, player = random_position(seed=4, num_moves=10)
    search = MinimaxSearch(board, seed=0)

    search.search(player, 3)

    assert search.prunes > 0
    assert search.get_stats()['prunes'] == search.prunes


def test_chain_is_a_legal_continuation():
    """Test that the predicted chain replays legally for alternating players."""
    board, player = random_position(seed=7, num_moves=10)
    result = MinimaxSearch(board, seed=1).search(player, 4)

    assert 1 <= len(result.moves) <= 4
    replay = board.copy()
    mover = player
    for row, col in result.moves:
        assert compute_effect(replay, row, col, mover).gain > 0
        mover = mover.opponent


def test_chain_reaches_horizon_in_midgame():
    """Test that the chain has one move per ply when nobody has to pass."""
    board, black, _ = opening()
    result = MinimaxSearch(board, seed=3).search(black, 3)

    assert len(result.moves) == 3
    assert result.moves[0] in OPENING_MOVES


def test_no_legal_move_reports_pass():
    """Test that a player without legal moves gets value 0 and no chain."""
    board = Board.from_rows(["OX......"] + ["........"] * 7)
    black, white = make_players()
    board.sync_counts(black, white)
    search = MinimaxSearch(board, seed=0)

    result = search.search(black, 3)

    assert result.value == 0
    assert result.chain is None
    assert result.move is None
    assert result.moves == []

    # O can capture along the row
    assert search.search(white, 1).move == (0, 2)


def test_opponent_pass_counts_as_zero_reply():
    """Test that a move leaving the opponent without replies scores its full gain."""
    board = Board.from_rows([".OX....."] + ["........"] * 7)
    black, white = make_players()
    board.sync_counts(black, white)

    result = MinimaxSearch(board, seed=0).search(black, 3)

    assert result.move == (0, 0)
    assert result.value == 64 + 8
    assert result.moves == [(0, 0)]


def test_prefers_corner_capture():
    """Test that the heuristic steers a 1-ply search to the corner."""
    board = Board.from_rows([
        ".OX.....",
        "........",
        "........",
        "...XO...",
        "...OX...",
        "........",
        "........",
        "........",
    ])
    black, white = make_players()
    board.sync_counts(black, white)

    result = MinimaxSearch(board, seed=0).search(black, 1)

    assert result.move == (0, 0)
    assert result.value == 72


def test_chains_are_recycled():
    """Test that repeated searches reuse pooled records instead of creating new ones."""
    board, player = random_position(seed=3, num_moves=6)
    search = MinimaxSearch(board, seed=0)

    search.release(search.search(player, 3))
    created = search.pool.created
    search.release(search.search(player, 3))

    assert search.pool.reused > 0
    assert search.pool.created <= created + 3
    assert len(search.pool) == search.pool.created


def test_sentinel_violation_aborts_and_restores(monkeypatch):
    """Test that an impossible value raises and the board is still restored."""
    board, black, white = opening()
    before = board.state.copy()
    monkeypatch.setattr(minimax, 'INIT_MAX_EFFECT', 1000)

    with pytest.raises(SearchInvariantError):
        MinimaxSearch(board, seed=0).search(black, 2)

    assert np.array_equal(board.state, before)
    assert black.count == 2 and white.count == 2


def test_sentinel_is_below_any_reachable_value():
    """Test the sentinel constant."""
    assert INIT_MAX_EFFECT == -9 * BOARD_AREA


def test_verbose_trace(capsys):
    """Test that verbose mode prints placements and the final choice."""
    board, black, _ = opening()
    MinimaxSearch(board, seed=0, verbose=True).search(black, 1)

    out = capsys.readouterr().out
    assert "Ply 1: X placed at (2,4)" in out
    assert "Ply 1: X placed at (5,3)" in out
    assert "Chose move" in out
    assert "=> 2" in out


def test_quiet_by_default(capsys):
    """Test that nothing is printed without verbose."""
    board, black, _ = opening()
    MinimaxSearch(board, seed=0).search(black, 2)

    assert capsys.readouterr().out == ""


def test_from_config_uses_seed_and_verbosity():
    """Test that a search built from a config follows its seed and verbosity."""
    config = SearchConfig(max_ply=2, seed=21, verbose=True)
    board, black, _ = opening()

    search = MinimaxSearch.from_config(board, config)

    assert search.verbose is True
    assert search.rng.random() == random.Random(21).random()


def test_from_config_prefers_explicit_pool_and_rng():
    """Test that a shared pool and random source override the config seed."""
    board, black, _ = opening()
    pool = MoveRecordPool()
    rng = random.Random(5)

    search = MinimaxSearch.from_config(board, SearchConfig(seed=99), pool=pool, rng=rng)

    assert search.pool is pool
    assert search.rng is rng
    assert search.verbose is False
