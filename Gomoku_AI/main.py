"""Entry point for Gomoku AI matches. Load config, wire players, start a Match."""

import random
from pathlib import Path

import yaml

try:
    from utils.cli import parse_args
    from utils.logger import configure_logging, log_event
    from utils.text_view import TextView
    from Match import Match
    from Agent import HumanAgent
    from AIAgent import AIAgent
    from Board import Player
except ImportError:
    from Gomoku_AI.utils.cli import parse_args
    from Gomoku_AI.utils.logger import configure_logging, log_event
    from Gomoku_AI.utils.text_view import TextView
    from Gomoku_AI.Match import Match
    from Gomoku_AI.Agent import HumanAgent
    from Gomoku_AI.AIAgent import AIAgent
    from Gomoku_AI.Board import Player


PROJECT_DIR = Path(__file__).resolve().parent
DEFAULT_SETTINGS = "config/settings.yaml"


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Gomoku_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path=DEFAULT_SETTINGS):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _agent_rng(seed, offset):
    return random.Random(seed + offset) if seed is not None else random.Random()


def build_agents(mode, black_difficulty, white_difficulty, seed=None, use_book=True, input_fn=input):
    """Return (black, white) controllers for a play mode."""
    human_black = mode in ("human-vs-ai", "human-vs-human")
    human_white = mode in ("ai-vs-human", "human-vs-human")
    if mode not in ("ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"):
        raise ValueError(f"Unsupported mode: {mode}")

    if human_black:
        black = HumanAgent(Player.BLACK, input_fn=input_fn)
    else:
        black = AIAgent(Player.BLACK, black_difficulty, rng=_agent_rng(seed, 0), use_book=use_book)
    if human_white:
        white = HumanAgent(Player.WHITE, input_fn=input_fn)
    else:
        white = AIAgent(Player.WHITE, white_difficulty, rng=_agent_rng(seed, 1), use_book=use_book)
    return black, white


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    settings = load_settings(args.settings)

    board_size = args.board_size or settings.get("board_size", 15)
    mode = args.mode or settings.get("mode", "human-vs-ai")
    difficulty = args.difficulty or settings.get("difficulty", "medium")
    seed = args.seed if args.seed is not None else settings.get("seed")
    hints = bool(settings.get("hints", True))

    black, white = build_agents(
        mode,
        black_difficulty=args.black_difficulty or difficulty,
        white_difficulty=args.white_difficulty or difficulty,
        seed=seed,
        use_book=not args.no_book,
    )
    hint_agent = None
    if hints and (black.is_human or white.is_human):
        hint_agent = AIAgent(Player.BLACK, difficulty, rng=_agent_rng(seed, 2), use_book=not args.no_book)

    view = TextView()
    log_event(f"Board {board_size}x{board_size}, mode {mode}, difficulty {difficulty}")
    match = Match(
        board_size=board_size,
        black_agent=black,
        white_agent=white,
        logger=log_event,
        renderer=view.render,
        hint_agent=hint_agent,
    )
    result = match.play()
    outcome = {Player.BLACK: "Black wins", Player.WHITE: "White wins", Player.NONE: "Draw"}
    print(outcome.get(result, "Unknown result"))
    return result


if __name__ == "__main__":
    main()
