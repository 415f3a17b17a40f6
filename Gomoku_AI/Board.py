"""Board state container, turn order, move history, and connected-five detection."""

from dataclasses import dataclass
from enum import Enum, IntEnum


DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))
WIN_LENGTH = 5


class Player(IntEnum):
    # Cell values double as occupancy markers: -1 black, 0 empty, 1 white
    BLACK = -1
    NONE = 0
    WHITE = 1

    @property
    def opposite(self):
        return Player(-self.value)


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameState:
    status: GameStatus
    winner: Player = Player.NONE

    @classmethod
    def playing(cls):
        return cls(GameStatus.PLAYING)

    @classmethod
    def won(cls, player):
        return cls(GameStatus.WON, Player(player))

    @classmethod
    def draw(cls):
        return cls(GameStatus.DRAW)

    @property
    def is_over(self):
        return self.status is not GameStatus.PLAYING


@dataclass(frozen=True)
class Move:
    row: int
    col: int
    player: Player


class Board:
    def __init__(self, size=15):
        if size < WIN_LENGTH:
            raise ValueError(f"board size must be at least {WIN_LENGTH}")
        self.size = size
        self.cells = [[Player.NONE] * size for _ in range(size)]
        self.current_player = Player.BLACK
        self.state = GameState.playing()
        self.history = []
        self._winning_line = []

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get_player(self, row, col):
        """Occupancy at (row, col); out-of-range reads come back empty."""
        if not self.in_bounds(row, col):
            return Player.NONE
        return self.cells[row][col]

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == Player.NONE

    @property
    def move_count(self):
        return len(self.history)

    @property
    def move_history(self):
        return tuple(self.history)

    @property
    def last_move(self):
        return self.history[-1] if self.history else None

    @property
    def winning_line(self):
        return list(self._winning_line)

    def can_undo(self):
        return bool(self.history)

    def is_full(self):
        return self.move_count >= self.size * self.size

    def place_stone(self, row, col):
        """
        Place the current player's stone. Returns False, leaving the board untouched,
        if the game is over, (row, col) is off the board, or the cell is taken.
        """
        if self.state.is_over:
            return False
        if not self.in_bounds(row, col) or self.cells[row][col] != Player.NONE:
            return False

        mover = self.current_player
        self.history.append(Move(row, col, mover))
        self.cells[row][col] = mover

        line = self._winning_run(row, col)
        if line:
            self._winning_line = line
            self.state = GameState.won(mover)
        elif self.is_full():
            self.state = GameState.draw()
        else:
            self.current_player = mover.opposite
        return True

    def undo_move(self):
        """Take back the last move; returns it, or None when there is nothing to undo."""
        if not self.history:
            return None
        move = self.history.pop()
        self.cells[move.row][move.col] = Player.NONE
        self.state = GameState.playing()
        self.current_player = move.player
        self._winning_line = []
        return move

    def reset(self):
        self.cells = [[Player.NONE] * self.size for _ in range(self.size)]
        self.current_player = Player.BLACK
        self.state = GameState.playing()
        self.history = []
        self._winning_line = []

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.current_player = self.current_player
        new_board.state = self.state
        new_board.history = self.history[:]
        new_board._winning_line = self._winning_line[:]
        return new_board

    def stones(self, player=None):
        """Yield (row, col, player) for placed stones, optionally for one side only."""
        for move in self.history:
            if player is None or move.player == player:
                yield move.row, move.col, move.player

    def _winning_run(self, row, col):
        """Coordinates of the first 5+ run through (row, col), checked in DIRECTIONS order."""
        color = self.cells[row][col]
        for dr, dc in DIRECTIONS:
            positions = [(row, col)]
            positions.extend(self._walk(row, col, dr, dc, color))
            positions.extend(self._walk(row, col, -dr, -dc, color))
            if len(positions) >= WIN_LENGTH:
                return sorted(positions)
        return []

    def _walk(self, row, col, dr, dc, color):
        """Cells of color from (row, col) (exclusive) along (dr, dc)."""
        found = []
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.cells[r][c] == color:
            found.append((r, c))
            r += dr
            c += dc
        return found
