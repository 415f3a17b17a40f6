"""Engine-backed controller bound to one difficulty tier."""

import random

try:
    from Agent import Agent
    from ai import gomoku_ai, opening_book
except ImportError:
    from Gomoku_AI.Agent import Agent
    from Gomoku_AI.ai import gomoku_ai, opening_book


class AIAgent(Agent):
    def __init__(self, color, difficulty="medium", rng=None, use_book=True):
        super().__init__(color)
        self.rng = rng if rng is not None else random.Random()
        book = opening_book.OpeningBook(rng=self.rng) if use_book else None
        self.engine = gomoku_ai.GomokuAI(difficulty, rng=self.rng, opening_book=book)

    @property
    def difficulty(self):
        return self.engine.difficulty

    def next_move(self, board):
        return self.engine.find_best_move(board.clone(), self.color)

    def suggest(self, board, player):
        """Engine's pick for any side, used for hints."""
        return self.engine.find_best_move(board.clone(), player)
