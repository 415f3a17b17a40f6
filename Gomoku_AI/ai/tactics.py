"""Forcing-move scans: immediate wins, open fours, and open threes."""

try:
    from Board import DIRECTIONS, GameStatus
except ImportError:
    from Gomoku_AI.Board import DIRECTIONS, GameStatus

from . import heuristic
from . import move_selector


def find_winning_move(board, player, candidates=None):
    """First candidate that wins on the spot for player, simulated on a clone."""
    if candidates is None:
        candidates = move_selector.generate_candidates(board)
    for row, col in candidates:
        test_board = board.clone()
        test_board.current_player = player
        if not test_board.place_stone(row, col):
            continue
        if test_board.state.status is GameStatus.WON:
            return (row, col)
    return None


def makes_run(board, row, col, player, length, min_open_ends):
    for dr, dc in DIRECTIONS:
        count, open_ends = heuristic.analyze_line(board, row, col, dr, dc, player, placed=True)
        if count == length and open_ends >= min_open_ends:
            return True
    return False


def find_open_four(board, player, candidates=None):
    """First candidate that gives player exactly four in a row with an open end."""
    if candidates is None:
        candidates = move_selector.generate_candidates(board)
    for row, col in candidates:
        if makes_run(board, row, col, player, 4, 1):
            return (row, col)
    return None


def find_open_threes(board, player, candidates=None):
    """All candidates that give player exactly three in a row open at both ends."""
    if candidates is None:
        candidates = move_selector.generate_candidates(board)
    return [(row, col) for row, col in candidates if makes_run(board, row, col, player, 3, 2)]
