"""Gomoku_AI package exports."""

from .Board import Board, GameState, GameStatus, Move, Player
from .Match import Match
from .Agent import Agent, HumanAgent
from .AIAgent import AIAgent
from .ai.difficulty import Difficulty
from .ai.gomoku_ai import GomokuAI, find_best_move
from .ai.opening_book import OpeningBook

# Subpackages for the referee, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "GameState",
    "GameStatus",
    "Move",
    "Player",
    "Match",
    "Agent",
    "HumanAgent",
    "AIAgent",
    "Difficulty",
    "GomokuAI",
    "find_best_move",
    "OpeningBook",
    "ai",
    "engine",
    "utils",
]
