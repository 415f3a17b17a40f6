"""Opening book: canned early-game replies built from standard Gomoku opening shapes."""

import random

try:
    from Board import Player
except ImportError:
    from Gomoku_AI.Board import Player


MAX_BOOK_MOVES = 8
FIRST_MOVE_OFFSETS = (0, 0, 0, 0, -1, 1)

DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ORTHOGONALS = ((-1, 0), (1, 0), (0, -1), (0, 1))
NEIGHBORS_8 = DIAGONALS + ORTHOGONALS


class OpeningBook:
    """
    Suggests moves for the first MAX_BOOK_MOVES plies; returns None once the game
    has left the book or no pattern applies.
    """

    def __init__(self, rng=None, max_book_moves=MAX_BOOK_MOVES):
        self.rng = rng if rng is not None else random.Random()
        self.max_book_moves = max_book_moves

    def lookup(self, board, player):
        history = board.move_history
        ply = len(history)
        if ply >= self.max_book_moves:
            return None
        player = Player(player)
        center = board.size // 2

        if ply == 0:
            row = center + self.rng.choice(FIRST_MOVE_OFFSETS)
            col = center + self.rng.choice(FIRST_MOVE_OFFSETS)
            return (row, col)
        if ply == 1:
            return self._second_move(board, history[0], center)

        tactical = self._strong_square(board, player)
        if tactical is not None:
            return tactical

        mine = [mv for mv in history if mv.player == player]
        theirs = [mv for mv in history if mv.player != player]
        if ply == 2:
            return self._third_move(board, mine, theirs, center)
        if ply == 3:
            return self._fourth_move(board, mine, center)
        return self._line_extension(board, mine) or self._connecting_move(board, mine, player, center)

    def _second_move(self, board, opening, center):
        if (opening.row, opening.col) == (center, center):
            return self._adjacent(board, center, center, prefer_diagonal=True)
        near_center = abs(opening.row - center) <= 2 and abs(opening.col - center) <= 2
        if near_center and board.is_empty(center, center):
            return (center, center)
        return self._adjacent(board, opening.row, opening.col, prefer_diagonal=True)

    def _third_move(self, board, mine, theirs, center):
        if mine:
            move = self._extension(board, mine[0].row, mine[0].col, center)
            if move is not None:
                return move
        if theirs:
            return self._adjacent(board, theirs[0].row, theirs[0].col, prefer_diagonal=False)
        return None

    def _fourth_move(self, board, mine, center):
        move = self._line_extension(board, mine)
        if move is not None:
            return move
        for stone in mine:
            move = self._extension(board, stone.row, stone.col, center)
            if move is not None:
                return move
        return None

    def _strong_square(self, board, player):
        """Random empty cell with 1-2 friendly neighbours and plenty of space around it."""
        strong = []
        for row in range(board.size):
            for col in range(board.size):
                if not board.is_empty(row, col):
                    continue
                friendly = empty = 0
                for dr, dc in NEIGHBORS_8:
                    r, c = row + dr, col + dc
                    if not board.in_bounds(r, c):
                        continue
                    occupant = board.get_player(r, c)
                    if occupant == player:
                        friendly += 1
                    elif occupant == Player.NONE:
                        empty += 1
                if 1 <= friendly <= 2 and empty >= 5:
                    strong.append((row, col))
        return self.rng.choice(strong) if strong else None

    def _adjacent(self, board, row, col, prefer_diagonal):
        diagonals = list(DIAGONALS)
        orthogonals = list(ORTHOGONALS)
        self.rng.shuffle(diagonals)
        self.rng.shuffle(orthogonals)
        order = diagonals + orthogonals if prefer_diagonal else orthogonals + diagonals
        for dr, dc in order:
            if board.is_empty(row + dr, col + dc):
                return (row + dr, col + dc)
        return None

    def _extension(self, board, row, col, center):
        """Empty cell 1-2 steps from (row, col) closest to the centre; ties broken at random."""
        best_moves = []
        best_score = None
        for dr, dc in NEIGHBORS_8:
            for distance in (1, 2):
                r, c = row + dr * distance, col + dc * distance
                if not board.is_empty(r, c):
                    continue
                score = board.size - abs(r - center) - abs(c - center)
                if best_score is None or score > best_score:
                    best_score = score
                    best_moves = [(r, c)]
                elif score == best_score:
                    best_moves.append((r, c))
        return self.rng.choice(best_moves) if best_moves else None

    def _line_extension(self, board, mine):
        """Extend a line through any two of our stones lying within two cells of each other."""
        extensions = []
        for i, first in enumerate(mine):
            for second in mine[i + 1:]:
                dr = second.row - first.row
                dc = second.col - first.col
                if max(abs(dr), abs(dc)) > 2:
                    continue
                step_r = (dr > 0) - (dr < 0)
                step_c = (dc > 0) - (dc < 0)
                for r, c in (
                    (second.row + step_r, second.col + step_c),
                    (first.row - step_r, first.col - step_c),
                ):
                    if board.is_empty(r, c):
                        extensions.append((r, c))
        return self.rng.choice(extensions) if extensions else None

    def _connecting_move(self, board, mine, player, center):
        if not mine:
            return None
        occupied = {(mv.row, mv.col) for mv in mine}
        scored = []
        for stone in mine:
            for dr, dc in NEIGHBORS_8:
                r, c = stone.row + dr, stone.col + dc
                if (r, c) in occupied or not board.is_empty(r, c):
                    continue
                friendly = sum(
                    1 for ar, ac in NEIGHBORS_8 if board.get_player(r + ar, c + ac) == player
                )
                centrality = (board.size - abs(r - center) - abs(c - center)) // 2
                scored.append(((r, c), friendly + centrality))
        if not scored:
            return None
        top = max(score for _, score in scored)
        return self.rng.choice([mv for mv, score in scored if score == top])
