"""Tests for minimax move scoring and selection."""

import random

from Gomoku_AI.Board import Board, Player
from Gomoku_AI.ai import move_selector, search_minimax


def _setup(board, stones):
    for row, col, player in stones:
        board.current_player = player
        assert board.place_stone(row, col)


def test_minimax_prefers_immediate_win_and_does_not_mutate_board():
    b = Board()
    _setup(b, [(7, c, Player.BLACK) for c in range(5, 9)] + [(6, 6, Player.WHITE), (8, 8, Player.WHITE)])
    before_cells = [row[:] for row in b.cells]
    before_count = b.move_count

    searcher = search_minimax.MinimaxSearcher(Player.BLACK, depth=2)
    best = searcher.best_moves(b, [(0, 0), (7, 4), (7, 9), (5, 5)])

    assert set(best) == {(7, 4), (7, 9)}
    assert searcher.node_counter > 0
    assert b.cells == before_cells
    assert b.move_count == before_count


def test_win_scores_include_depth_bonus():
    b = Board()
    _setup(b, [(7, c, Player.BLACK) for c in range(5, 9)])
    searcher = search_minimax.MinimaxSearcher(Player.BLACK, depth=3)
    scores = dict(searcher.score_moves(b, [(7, 4)]))
    assert scores[(7, 4)] == search_minimax.win_value(b.size, 2)
    assert search_minimax.win_value(b.size, 2) - search_minimax.win_value(b.size, 1) == search_minimax.DEPTH_BONUS


def test_minimax_sees_opponent_win_one_ply_ahead():
    b = Board()
    _setup(b, [(3, c, Player.WHITE) for c in range(3, 7)] + [(10, 10, Player.BLACK)])
    searcher = search_minimax.MinimaxSearcher(Player.BLACK, depth=2)
    scores = dict(searcher.score_moves(b, [(3, 2), (12, 12)]))
    # Only (3, 2) is worth anything; elsewhere white completes five at (3, 2) or (3, 7).
    assert scores[(12, 12)] <= -search_minimax.WIN_SCORE
    assert scores[(3, 2)] <= -search_minimax.WIN_SCORE  # (3, 7) is still open


def test_minimax_blocks_when_one_end_is_closed():
    b = Board()
    _setup(
        b,
        [(3, c, Player.WHITE) for c in range(3, 7)]
        + [(3, 7, Player.BLACK), (10, 10, Player.BLACK)],
    )
    searcher = search_minimax.MinimaxSearcher(Player.BLACK, depth=2)
    best = searcher.best_moves(b, [(12, 12), (3, 2), (0, 14)])
    assert best == [(3, 2)]


def test_choose_move_is_deterministic_for_a_seed():
    b = Board()
    _setup(b, [(7, 7, Player.BLACK), (7, 8, Player.WHITE), (8, 7, Player.BLACK), (6, 6, Player.WHITE)])
    cands = move_selector.order_candidates(b, move_selector.generate_candidates(b), Player.BLACK, limit=10)
    first = search_minimax.choose_move(b, Player.BLACK, 2, cands, random.Random(42))
    second = search_minimax.choose_move(b, Player.BLACK, 2, cands, random.Random(42))
    assert first == second
    assert b.is_empty(*first)


def test_choose_move_without_candidates_returns_none():
    assert search_minimax.choose_move(Board(), Player.BLACK, 2, [], random.Random(0)) is None


def test_inner_nodes_seed_center_on_empty_board():
    searcher = search_minimax.MinimaxSearcher(Player.BLACK, depth=2)
    assert searcher._node_candidates(Board(), Player.BLACK, 2) == move_selector.center_seed(Board())


def test_completed_five_outranks_any_open_four_leaf():
    b = Board()
    _setup(
        b,
        [(3, c, Player.BLACK) for c in range(4)]
        + [(10, c, Player.BLACK) for c in (5, 6, 7)],
    )
    searcher = search_minimax.MinimaxSearcher(Player.BLACK, depth=1)
    scores = dict(searcher.score_moves(b, [(3, 4), (10, 4)]))
    assert scores[(3, 4)] == search_minimax.win_value(b.size, 0)
    assert scores[(3, 4)] > scores[(10, 4)]


def test_opponent_five_is_worse_than_any_static_loss():
    b = Board()
    _setup(
        b,
        [(3, c, Player.WHITE) for c in range(4)]
        + [(10, c, Player.WHITE) for c in (5, 6, 7)]
        + [(12, 12, Player.BLACK)],
    )
    searcher = search_minimax.MinimaxSearcher(Player.BLACK, depth=2)
    scores = dict(searcher.score_moves(b, [(3, 4), (0, 14)]))
    # Elsewhere white completes five on row 3; blocking it only concedes an open four.
    assert scores[(0, 14)] <= -search_minimax.win_value(b.size, 0)
    assert scores[(3, 4)] > scores[(0, 14)]
