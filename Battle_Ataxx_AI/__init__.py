"""Battle_Ataxx_AI package exports."""

from .Move import Move, PASS
from .Board import Board, PieceColor
from .Ataxxgame import Ataxxgame
from .Player import Player, HumanPlayer
from .AIPlayer import AIPlayer

# Subpackages for rules/commands, AI search, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Move",
    "PASS",
    "Board",
    "PieceColor",
    "Ataxxgame",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "ai",
    "engine",
    "gui",
    "utils",
]
