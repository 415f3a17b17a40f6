"""Difficulty tiers: search depth, candidate cap, and the dice gates that weaken play."""

from dataclasses import dataclass
from enum import Enum


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class DifficultyProfile:
    depth: int
    candidate_limit: int
    suboptimal_chance: int      # percent chance to skip the best move
    open_four_chance: int       # percent chance to look for open fours
    open_three_chance: int      # percent chance to look for open threes
    first_move_offsets: tuple   # empty tuple means uniform in [-2, 2]
    uses_opening_book: bool = False


PROFILES = {
    Difficulty.EASY: DifficultyProfile(
        depth=1,
        candidate_limit=5,
        suboptimal_chance=40,
        open_four_chance=70,
        open_three_chance=0,
        first_move_offsets=(),
    ),
    Difficulty.MEDIUM: DifficultyProfile(
        depth=2,
        candidate_limit=10,
        suboptimal_chance=10,
        open_four_chance=100,
        open_three_chance=80,
        first_move_offsets=(0, 0, 0, -1, 1),
    ),
    Difficulty.HARD: DifficultyProfile(
        depth=4,
        candidate_limit=15,
        suboptimal_chance=0,
        open_four_chance=100,
        open_three_chance=100,
        first_move_offsets=(0, 0, 0, 0, -1, 1),
        uses_opening_book=True,
    ),
}


def get_profile(difficulty):
    """Accept a Difficulty or its name ("easy", "medium", "hard")."""
    try:
        return PROFILES[Difficulty(difficulty)]
    except ValueError as exc:
        choices = ", ".join(d.value for d in Difficulty)
        raise ValueError(f"Unknown difficulty {difficulty!r}; expected one of {choices}") from exc


def roll(rng, chance):
    """One dice roll on 1..100; passes when the roll is at most `chance`."""
    return rng.randint(1, 100) <= chance
