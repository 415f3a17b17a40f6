"""Plain-text board dump for the terminal game loop."""

try:
    from Board import Player
except ImportError:
    from Gomoku_AI.Board import Player


SYMBOLS = {Player.BLACK: "X", Player.WHITE: "O", Player.NONE: "."}
WIN_MARK = "*"


def render_board(board):
    """Grid with row/column numbers; last move in brackets, winning stones as '*'."""
    last = board.last_move
    winning = set(board.winning_line) if board.state.is_over else set()
    width = len(str(board.size - 1))

    header = " " * (width + 1) + "".join(f"{col:>{width + 2}}" for col in range(board.size))
    lines = [header]
    for row in range(board.size):
        cells = []
        for col in range(board.size):
            symbol = WIN_MARK if (row, col) in winning else SYMBOLS[board.cells[row][col]]
            if last is not None and (last.row, last.col) == (row, col):
                cells.append(f"[{symbol}]".rjust(width + 2))
            else:
                cells.append(symbol.rjust(width + 2))
        lines.append(f"{row:>{width}} " + "".join(cells))
    return "\n".join(lines)


class TextView:
    def __init__(self, write=print):
        self.write = write

    def render(self, board, current_player, result):
        self.write(render_board(board))
        if result is None:
            self.write(f"{current_player.name.title()} to move")
