"""Line-pattern scoring for Gomoku evaluation (run length plus open ends)."""

try:
    from Board import DIRECTIONS, Player
except ImportError:
    from Gomoku_AI.Board import DIRECTIONS, Player


FIVE_SCORE = 100000

# (run length, open ends) -> score; anything missing scores 0.
PATTERN_SCORES = {
    (4, 2): 50000,  # open four
    (4, 1): 1000,   # closed four
    (3, 2): 5000,   # open three
    (3, 1): 200,
    (2, 2): 150,    # open two
    (2, 1): 15,
    (1, 2): 10,
}

QUICK_DIVISOR = 10
OWN_CENTER_WEIGHT = 10
OPP_CENTER_WEIGHT = 8


def score_pattern(count, open_ends):
    if count >= 5:
        return FIVE_SCORE
    return PATTERN_SCORES.get((count, open_ends), 0)


def analyze_line(board, row, col, dr, dc, player, placed=False):
    """
    Return (count, open_ends) for player's run anchored at (row, col) along (dr, dc).
    The walk goes forward from the anchor (inclusive) and backward from the cell
    before it. With placed=True the anchor counts as player's stone.
    """
    size = board.size
    cells = board.cells
    count = 0
    open_ends = 0

    r, c = row, col
    if placed:
        count = 1
        r, c = row + dr, col + dc
    while 0 <= r < size and 0 <= c < size and cells[r][c] == player:
        count += 1
        r += dr
        c += dc
    if 0 <= r < size and 0 <= c < size and cells[r][c] == Player.NONE:
        open_ends += 1

    r, c = row - dr, col - dc
    while 0 <= r < size and 0 <= c < size and cells[r][c] == player:
        count += 1
        r -= dr
        c -= dc
    if 0 <= r < size and 0 <= c < size and cells[r][c] == Player.NONE:
        open_ends += 1

    return count, open_ends


def score_side(board, player):
    """Sum of pattern scores over every anchor and direction for player."""
    size = board.size
    cells = board.cells
    total = 0
    for row, col, _ in board.stones(player):
        for dr, dc in DIRECTIONS:
            total += score_pattern(*analyze_line(board, row, col, dr, dc, player))
            # Only cells holding, or directly following, a stone of player can score.
            nr, nc = row + dr, col + dc
            if 0 <= nr < size and 0 <= nc < size and cells[nr][nc] != player:
                total += score_pattern(*analyze_line(board, nr, nc, dr, dc, player))
    return total


def static_bound(size):
    """Largest magnitude evaluate_board can reach on a size x size board without a five."""
    cells = size * size
    return 2 * len(DIRECTIONS) * cells * max(PATTERN_SCORES.values()) + cells * OWN_CENTER_WEIGHT


def center_control(board, player):
    center = board.size // 2
    total = 0
    for row, col, owner in board.stones():
        dist = abs(row - center) + abs(col - center)
        if owner == player:
            total += max(0, OWN_CENTER_WEIGHT - dist)
        else:
            total -= max(0, OPP_CENTER_WEIGHT - dist)
    return total


def evaluate_board(board, player):
    """
    Static evaluation from player's point of view: own patterns minus the opponent's,
    plus the centre-control term.
    """
    player = Player(player)
    return (
        score_side(board, player)
        - score_side(board, player.opposite)
        + center_control(board, player)
    )


def quick_evaluate(board, row, col, player):
    """Cheap ordering score for an empty cell: what it makes for player plus what it spoils."""
    # The cell is scored as if each side had just played there, so runs on both sides of it join.
    player = Player(player)
    opponent = player.opposite
    score = 0
    for dr, dc in DIRECTIONS:
        score += score_pattern(*analyze_line(board, row, col, dr, dc, player, placed=True)) // QUICK_DIVISOR
        score += score_pattern(*analyze_line(board, row, col, dr, dc, opponent, placed=True)) // QUICK_DIVISOR
    return score
