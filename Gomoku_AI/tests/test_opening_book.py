"""Opening book replies for the first plies."""

import random

import pytest

from Gomoku_AI.Board import Board, Player
from Gomoku_AI.ai.opening_book import MAX_BOOK_MOVES, OpeningBook


@pytest.mark.parametrize("seed", range(8))
def test_first_move_within_one_of_center(seed):
    move = OpeningBook(rng=random.Random(seed)).lookup(Board(), Player.BLACK)
    assert max(abs(move[0] - 7), abs(move[1] - 7)) <= 1


@pytest.mark.parametrize("seed", range(5))
def test_reply_to_center_is_diagonal_neighbor(seed):
    b = Board()
    b.place_stone(7, 7)
    move = OpeningBook(rng=random.Random(seed)).lookup(b, Player.WHITE)
    assert move in {(6, 6), (6, 8), (8, 6), (8, 8)}


def test_reply_to_near_center_takes_center():
    b = Board()
    b.place_stone(8, 9)
    assert OpeningBook(rng=random.Random(0)).lookup(b, Player.WHITE) == (7, 7)


def test_reply_to_corner_stays_adjacent():
    b = Board()
    b.place_stone(0, 0)
    # (1, 1) is the only on-board diagonal neighbour of the corner.
    assert OpeningBook(rng=random.Random(0)).lookup(b, Player.WHITE) == (1, 1)


@pytest.mark.parametrize("seed", range(5))
def test_later_plies_return_empty_cells(seed):
    rng = random.Random(seed)
    book = OpeningBook(rng=rng)
    b = Board()
    for _ in range(MAX_BOOK_MOVES):
        move = book.lookup(b, b.current_player)
        assert move is not None
        assert b.place_stone(*move)
    assert book.lookup(b, b.current_player) is None


def test_third_move_extends_toward_center():
    b = Board()
    b.place_stone(7, 7)
    b.place_stone(0, 14)
    # Black has one stone with open space: a strong-shape square next to it.
    move = OpeningBook(rng=random.Random(2)).lookup(b, Player.BLACK)
    assert max(abs(move[0] - 7), abs(move[1] - 7)) <= 2
    assert b.is_empty(*move)
