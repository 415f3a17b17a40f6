"""
Move selection under a difficulty profile.

The pipeline runs in a fixed order and the first step that yields a move wins:
opening book (hard only), first move near the centre, immediate win, immediate
block, open fours, open threes, then minimax over the ordered candidate list.
All randomness comes from the injected `random.Random`.
"""

import logging
import random

try:
    from Board import Player
except ImportError:
    from Gomoku_AI.Board import Player

from . import difficulty as difficulty_mod
from . import move_selector
from . import search_minimax
from . import tactics


LOGGER = logging.getLogger(__name__)

BOOK_PLY_LIMIT = 2
FIRST_MOVE_SPREAD = 2
SUBOPTIMAL_MAX_RANK = 3


class GomokuAI:
    def __init__(self, difficulty, rng=None, opening_book=None):
        self.profile = difficulty_mod.get_profile(difficulty)
        self.difficulty = difficulty_mod.Difficulty(difficulty)
        self.rng = rng if rng is not None else random.Random()
        self.opening_book = opening_book

    def find_best_move(self, board, player):
        """Return (row, col) for player on board, or None when there is no legal move."""
        player = Player(player)
        if player == Player.NONE or board.state.is_over:
            return None

        book_move = self._book_move(board, player)
        if book_move is not None:
            LOGGER.debug("opening book move %s", book_move)
            return book_move

        candidates = move_selector.generate_candidates(board)
        if not candidates:
            return self._first_move(board)

        move = self._tactical_move(board, player, candidates)
        if move is not None:
            return move

        move = self._search_move(board, player, candidates)
        if move is not None:
            return move

        LOGGER.debug("search produced nothing; falling back to first candidate")
        return candidates[0]

    def _roll(self, chance):
        return difficulty_mod.roll(self.rng, chance)

    def _book_move(self, board, player):
        if self.opening_book is None or not self.profile.uses_opening_book:
            return None
        if board.move_count >= BOOK_PLY_LIMIT:
            return None
        try:
            move = self.opening_book.lookup(board.clone(), player)
            if move is None:
                return None
            row, col = move
            row, col = int(row), int(col)
        except Exception as exc:
            LOGGER.warning("opening book lookup failed (%s); using normal search", exc)
            return None
        if not board.is_empty(row, col):
            LOGGER.warning("opening book suggested unplayable cell %s; ignoring", move)
            return None
        return (row, col)

    def _first_move(self, board):
        center = board.size // 2
        offsets = self.profile.first_move_offsets
        if offsets:
            d_row = self.rng.choice(offsets)
            d_col = self.rng.choice(offsets)
        else:
            d_row = self.rng.randint(-FIRST_MOVE_SPREAD, FIRST_MOVE_SPREAD)
            d_col = self.rng.randint(-FIRST_MOVE_SPREAD, FIRST_MOVE_SPREAD)
        last = board.size - 1
        move = (min(max(center + d_row, 0), last), min(max(center + d_col, 0), last))
        LOGGER.debug("first move %s", move)
        return move

    def _tactical_move(self, board, player, candidates):
        opponent = player.opposite

        # Winning and blocking five are never left to chance.
        move = tactics.find_winning_move(board, player, candidates)
        if move is not None:
            LOGGER.debug("winning move %s", move)
            return move
        move = tactics.find_winning_move(board, opponent, candidates)
        if move is not None:
            LOGGER.debug("blocking five at %s", move)
            return move

        if self._roll(self.profile.open_four_chance):
            move = tactics.find_open_four(board, opponent, candidates)
            if move is not None:
                LOGGER.debug("blocking four at %s", move)
                return move
        if self._roll(self.profile.open_four_chance):
            move = tactics.find_open_four(board, player, candidates)
            if move is not None:
                LOGGER.debug("making four at %s", move)
                return move

        if self._roll(self.profile.open_three_chance):
            threats = tactics.find_open_threes(board, opponent, candidates)
            if threats:
                move = self.rng.choice(threats)
                LOGGER.debug("blocking open three at %s", move)
                return move
            threats = tactics.find_open_threes(board, player, candidates)
            if threats:
                move = self.rng.choice(threats)
                LOGGER.debug("making open three at %s", move)
                return move
        return None

    def _search_move(self, board, player, candidates):
        ordered = move_selector.order_candidates(board, candidates, player, self.profile.candidate_limit)
        if not ordered:
            return None

        if self._roll(self.profile.suboptimal_chance) and len(ordered) > 2:
            index = self.rng.randint(1, min(SUBOPTIMAL_MAX_RANK, len(ordered) - 1))
            LOGGER.debug("picking rank %d candidate %s for variety", index, ordered[index])
            return ordered[index]

        move = search_minimax.choose_move(board, player, self.profile.depth, ordered, self.rng)
        LOGGER.debug("minimax (%s) chose %s", self.difficulty.value, move)
        return move


def find_best_move(board, player, difficulty, rng=None, opening_book=None):
    """One-shot search: build a GomokuAI for this tier and ask it for a move."""
    return GomokuAI(difficulty, rng=rng, opening_book=opening_book).find_best_move(board, player)
