"""CLI options for selecting players, difficulty, board size, and config paths."""


MODES = ["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"]
DIFFICULTIES = ["easy", "medium", "hard"]


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku AI (connect five)")
    parser.add_argument("--board-size", type=int, help="Board size (default from settings, 15)")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, help="Difficulty for every AI player")
    parser.add_argument("--black-difficulty", choices=DIFFICULTIES, help="Override difficulty for an AI playing black")
    parser.add_argument("--white-difficulty", choices=DIFFICULTIES, help="Override difficulty for an AI playing white")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="Play mode (who plays black/white)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed the AI random source for repeatable games")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--no-book", action="store_true", help="Disable the opening book for hard AI players")
    parser.add_argument("--verbose", action="store_true", help="Log every search decision")
    return parser.parse_args(argv)
