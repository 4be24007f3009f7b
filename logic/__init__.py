"""
Logic module for TicTacToe.
Handles game state, rules, and move history.
"""

from .game_state import Mark, Board, EMPTY_BOARD, HistoryStore
from .win_checker import WinChecker, WinResult, NO_WINNER, WINNING_LINES, evaluate
from .move_validator import MoveValidator, ValidationResult
from .errors import (
    GameError,
    MoveRejected,
    CellOccupied,
    GameAlreadyWon,
    IndexOutOfRange,
    RejectReason,
)
from .config import GameConfig
from .game_engine import GameEngine

__version__ = "1.0.0"
