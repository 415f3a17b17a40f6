"""Move validation with human-readable reasons for rejected placements."""

try:
    from Board import Player
except ImportError:
    from Gomoku_AI.Board import Player


def check_move(move, board):
    """
    Validate a move against game state, bounds, and occupancy.
    Raises ValueError naming the problem; returns True otherwise.
    """
    if board.state.is_over:
        raise ValueError("Game is already over")

    try:
        row, col = move
        row, col = int(row), int(col)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Malformed move {move!r}; expected (row, col)") from exc

    if not board.in_bounds(row, col):
        raise ValueError(f"Move {(row, col)} out of bounds for a {board.size}x{board.size} board")
    if board.get_player(row, col) != Player.NONE:
        raise ValueError(f"Cell {(row, col)} already occupied")

    return True
