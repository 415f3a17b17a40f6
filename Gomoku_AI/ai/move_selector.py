"""Candidate move generation (frontier around placed stones, quick-score ordering)."""

from . import heuristic


CANDIDATE_RADIUS = 2
MIN_NODE_CANDIDATES = 8


def generate_candidates(board, radius=CANDIDATE_RADIUS):
    """
    Empty cells within Chebyshev distance `radius` of any stone, in row-major order.
    An empty board yields an empty list.
    """
    size = board.size
    cells = board.cells
    seen = set()
    for row, col, _ in board.stones():
        for dr in range(-radius, radius + 1):
            for dc in range(-radius, radius + 1):
                r, c = row + dr, col + dc
                if 0 <= r < size and 0 <= c < size and cells[r][c] == 0:
                    seen.add((r, c))
    return sorted(seen)


def center_seed(board):
    """The 3x3 block around the centre, used when a simulated board has no stones."""
    center = board.size // 2
    return [
        (center + dr, center + dc)
        for dr in (-1, 0, 1)
        for dc in (-1, 0, 1)
        if board.is_empty(center + dr, center + dc)
    ]


def order_candidates(board, candidates, player, limit=None):
    """Sort candidates by quick heuristic (best first, stable) and keep the top `limit`."""
    ranked = sorted(
        candidates,
        key=lambda mv: heuristic.quick_evaluate(board, mv[0], mv[1], player),
        reverse=True,
    )
    if limit is not None:
        ranked = ranked[:limit]
    return ranked


def node_limit(depth):
    """Branching cap for an inner search node with `depth` plies left."""
    return max(MIN_NODE_CANDIDATES, 4 * depth + 4)
