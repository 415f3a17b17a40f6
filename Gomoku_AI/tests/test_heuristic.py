"""Pattern table, line analysis, static evaluation, and quick ordering score."""

import random

from Gomoku_AI.Board import DIRECTIONS, Board, Player
from Gomoku_AI.ai import heuristic


def _setup(board, stones):
    for row, col, player in stones:
        board.current_player = player
        assert board.place_stone(row, col)


def _full_sum(board, player):
    total = 0
    for row in range(board.size):
        for col in range(board.size):
            for dr, dc in DIRECTIONS:
                total += heuristic.score_pattern(*heuristic.analyze_line(board, row, col, dr, dc, player))
    return total


def test_pattern_table():
    assert heuristic.score_pattern(5, 0) == 100000
    assert heuristic.score_pattern(6, 1) == 100000
    assert heuristic.score_pattern(4, 2) == 50000
    assert heuristic.score_pattern(4, 1) == 1000
    assert heuristic.score_pattern(3, 2) == 5000
    assert heuristic.score_pattern(3, 1) == 200
    assert heuristic.score_pattern(2, 2) == 150
    assert heuristic.score_pattern(2, 1) == 15
    assert heuristic.score_pattern(1, 2) == 10
    assert heuristic.score_pattern(1, 1) == 0
    assert heuristic.score_pattern(4, 0) == 0
    assert heuristic.score_pattern(2, 0) == 0


def test_analyze_line_counts_run_and_open_ends():
    b = Board()
    _setup(b, [(7, c, Player.BLACK) for c in (5, 6, 7)] + [(7, 8, Player.WHITE)])
    assert heuristic.analyze_line(b, 7, 5, 0, 1, Player.BLACK) == (3, 1)
    # Hypothetical stone at (7, 4) joins the run.
    assert heuristic.analyze_line(b, 7, 4, 0, 1, Player.BLACK, placed=True) == (4, 1)
    assert heuristic.analyze_line(b, 7, 4, 1, 0, Player.BLACK, placed=True) == (1, 2)


def test_analyze_line_stops_at_edge():
    b = Board(size=5)
    _setup(b, [(0, 0, Player.WHITE), (0, 1, Player.WHITE)])
    assert heuristic.analyze_line(b, 0, 0, 0, 1, Player.WHITE) == (2, 1)


def test_evaluate_empty_board_is_zero():
    assert heuristic.evaluate_board(Board(), Player.BLACK) == 0


def test_evaluate_single_center_stone():
    b = Board()
    b.place_stone(7, 7)
    # 4 directions x 2 anchors x open one (10) plus centre bonus.
    assert heuristic.evaluate_board(b, Player.BLACK) == 80 + 10
    assert heuristic.evaluate_board(b, Player.WHITE) == -80 - 8


def test_side_score_matches_full_board_sum():
    rng = random.Random(7)
    b = Board(size=9)
    cells = [(r, c) for r in range(9) for c in range(9)]
    rng.shuffle(cells)
    for row, col in cells[:30]:
        b.place_stone(row, col)
        if b.state.is_over:
            break
    for player in (Player.BLACK, Player.WHITE):
        assert heuristic.score_side(b, player) == _full_sum(b, player)


def test_open_four_outscores_scattered_stones():
    line = Board()
    _setup(line, [(7, c, Player.BLACK) for c in range(4, 8)])
    scattered = Board()
    _setup(scattered, [(2, 2, Player.BLACK), (2, 12, Player.BLACK), (12, 2, Player.BLACK), (12, 12, Player.BLACK)])
    assert heuristic.evaluate_board(line, Player.BLACK) > heuristic.evaluate_board(scattered, Player.BLACK)


def test_quick_evaluate_prefers_extending_a_three():
    b = Board()
    _setup(b, [(7, c, Player.BLACK) for c in (5, 6, 7)] + [(0, 0, Player.WHITE)])
    near = heuristic.quick_evaluate(b, 7, 8, Player.BLACK)
    far = heuristic.quick_evaluate(b, 3, 3, Player.BLACK)
    # Open four for black plus lone-stone patterns for both sides on the other lines.
    assert near == 50000 // 10 + 3 * (10 // 10) + 3 * (10 // 10)
    assert near > far


def test_quick_evaluate_counts_opponent_threats():
    b = Board()
    _setup(b, [(7, c, Player.WHITE) for c in (5, 6, 7)])
    assert heuristic.quick_evaluate(b, 7, 8, Player.BLACK) >= 5000


def test_static_bound_exceeds_stacked_open_fours():
    b = Board()
    for row in (3, 7, 11):
        for col in range(5, 9):
            b.current_player = Player.BLACK
            assert b.place_stone(row, col)
    score = heuristic.evaluate_board(b, Player.BLACK)
    assert score > 3 * heuristic.PATTERN_SCORES[(4, 2)]
    assert abs(score) < heuristic.static_bound(b.size)
    assert abs(heuristic.evaluate_board(b, Player.WHITE)) < heuristic.static_bound(b.size)
