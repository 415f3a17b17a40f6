"""Depth-limited minimax with alpha-beta pruning over quick-ordered candidate moves."""

import logging

try:
    from Board import GameStatus, Player
except ImportError:
    from Gomoku_AI.Board import GameStatus, Player

from . import heuristic
from . import move_selector


LOGGER = logging.getLogger(__name__)

INF = float("inf")
WIN_SCORE = 100000
DEPTH_BONUS = 1000  # per remaining ply, so faster wins score higher


def win_value(size, depth):
    """Score of a won position with `depth` plies left; above any static evaluation on the board."""
    return WIN_SCORE + heuristic.static_bound(size) + DEPTH_BONUS * depth


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, player, depth):
        self.player = Player(player)
        self.depth = depth
        self.node_counter = 0

    def score_moves(self, board, candidates):
        """
        Return [(move, score)] for each root candidate that can be played.
        Scores equal to the best are exact; weaker moves may carry an upper bound.
        """
        self.node_counter = 0
        results = []
        best = -INF
        for row, col in candidates:
            child = board.clone()
            child.current_player = self.player
            if not child.place_stone(row, col):
                continue
            # Narrow by one so that equal scores come back exact.
            score = self._minimax(child, self.depth - 1, best - 1, INF, maximizing=False)
            results.append(((row, col), score))
            best = max(best, score)
        LOGGER.debug("minimax depth=%d searched %d nodes over %d root moves", self.depth, self.node_counter, len(results))
        return results

    def best_moves(self, board, candidates):
        """All root candidates sharing the top score (ties included), in candidate order."""
        results = self.score_moves(board, candidates)
        if not results:
            return []
        top = max(score for _, score in results)
        return [move for move, score in results if score == top]

    def _minimax(self, board, depth, alpha, beta, maximizing):
        self.node_counter += 1

        state = board.state
        if state.status is GameStatus.WON:
            value = win_value(board.size, depth)
            return value if state.winner == self.player else -value
        if state.status is GameStatus.DRAW:
            return 0
        if depth == 0:
            return heuristic.evaluate_board(board, self.player)

        mover = self.player if maximizing else self.player.opposite
        candidates = self._node_candidates(board, mover, depth)

        best = None
        for row, col in candidates:
            child = board.clone()
            child.current_player = mover
            if not child.place_stone(row, col):
                continue
            score = self._minimax(child, depth - 1, alpha, beta, not maximizing)
            if maximizing:
                best = score if best is None else max(best, score)
                alpha = max(alpha, best)
            else:
                best = score if best is None else min(best, score)
                beta = min(beta, best)
            if beta <= alpha:
                break

        return 0 if best is None else best

    def _node_candidates(self, board, mover, depth):
        candidates = move_selector.generate_candidates(board)
        if not candidates:
            return move_selector.center_seed(board)
        limit = move_selector.node_limit(depth)
        if len(candidates) > limit:
            candidates = move_selector.order_candidates(board, candidates, mover, limit)
        return candidates


def choose_move(board, player, depth, candidates, rng):
    """Run minimax over `candidates` and pick uniformly among the best-scoring moves."""
    searcher = MinimaxSearcher(player=player, depth=depth)
    best = searcher.best_moves(board, candidates)
    if not best:
        return None
    return rng.choice(best)
