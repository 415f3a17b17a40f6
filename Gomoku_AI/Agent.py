"""Abstract controller interface for human or AI participants."""

try:
    from Board import Player
except ImportError:
    from Gomoku_AI.Board import Player


UNDO = "undo"
HINT = "hint"
RESIGN = "resign"
COMMANDS = (UNDO, HINT, RESIGN)


class Agent:
    is_human = False

    def __init__(self, color):
        self.color = Player(color)

    def next_move(self, board):
        """Return (row, col), one of COMMANDS, or None when no move exists."""
        raise NotImplementedError


class HumanAgent(Agent):
    is_human = True

    def __init__(self, color, input_fn=input):
        super().__init__(color)
        self.input_fn = input_fn

    def next_move(self, board):
        """Read 'row col' or a command from the terminal; raises ValueError on bad input."""
        prompt = f"{self.color.name.title()} move as 'row col' (or {', '.join(COMMANDS)}): "
        raw = self.input_fn(prompt).strip().lower()
        if raw in COMMANDS:
            return raw
        if raw == "quit":
            return RESIGN

        try:
            row_str, col_str = raw.replace(",", " ").split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
