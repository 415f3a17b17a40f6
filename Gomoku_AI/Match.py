"""Game loop and turn management, with undo, hint, and resign commands for humans."""

try:
    from Agent import HINT, RESIGN, UNDO
    from Board import Board, GameStatus, Player
    from engine import referee
    from utils.logger import log_event
except ImportError:
    from Gomoku_AI.Agent import HINT, RESIGN, UNDO
    from Gomoku_AI.Board import Board, GameStatus, Player
    from Gomoku_AI.engine import referee
    from Gomoku_AI.utils.logger import log_event


def _name(color):
    return color.name.title()


class Match:
    def __init__(self, board_size, black_agent, white_agent, logger=log_event, renderer=None, hint_agent=None):
        self.board = Board(size=board_size)
        self.agents = {Player.BLACK: black_agent, Player.WHITE: white_agent}
        self.logger = logger
        self.renderer = renderer
        self.hint_agent = hint_agent

    def play(self):
        """Run a single game. Returns the winning Player, or Player.NONE for a draw."""
        result = None
        while result is None:
            color = self.board.current_player
            if self.renderer:
                self.renderer(self.board, color, result)

            agent = self.agents[color]
            try:
                action = agent.next_move(self.board)
            except ValueError as exc:
                self.logger(f"Rejected input from {_name(color)}: {exc}")
                continue

            if action == RESIGN:
                self.logger(f"{_name(color)} resigns")
                result = color.opposite
                break
            if action == UNDO:
                self._undo()
                continue
            if action == HINT:
                self._hint(color)
                continue
            if action is None:
                self.logger("Result: Draw (no legal move)")
                result = Player.NONE
                break

            try:
                referee.check_move(action, self.board)
            except ValueError as exc:
                if agent.is_human:
                    self.logger(f"Rejected move {action}: {exc}")
                    continue
                self.logger(f"Disqualification: {_name(color)} - {exc}")
                result = color.opposite
                break

            row, col = action
            self.board.place_stone(int(row), int(col))
            self.logger(f"Move {self.board.move_count}: {_name(color)[0]} {(int(row), int(col))}")

            state = self.board.state
            if state.status is GameStatus.WON:
                self.logger(f"Winner: {_name(state.winner)} {self.board.winning_line}")
                result = state.winner
            elif state.status is GameStatus.DRAW:
                self.logger("Result: Draw (board full)")
                result = Player.NONE

        if self.renderer:
            self.renderer(self.board, self.board.current_player, result)
        return result

    def _undo(self):
        """Take back moves until a human is to move again (one move in human-vs-human)."""
        if not self.board.can_undo():
            self.logger("Nothing to undo")
            return
        undone = [self.board.undo_move()]
        while self.board.can_undo() and not self.agents[self.board.current_player].is_human:
            undone.append(self.board.undo_move())
        for move in undone:
            self.logger(f"Undo: {_name(move.player)[0]} {(move.row, move.col)}")

    def _hint(self, color):
        if self.hint_agent is None:
            self.logger("Hints are disabled")
            return
        move = self.hint_agent.suggest(self.board, color)
        if move is None:
            self.logger("No hint available")
        else:
            self.logger(f"Hint for {_name(color)}: {move}")
