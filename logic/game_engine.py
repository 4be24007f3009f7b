"""
Game engine for TicTacToe.

Owns the history of snapshots and the current step, and applies moves and
jumps through history. Whose turn it is and who has won are always derived
from the current snapshot, never stored.
"""

import logging
import threading
from typing import Iterable, List, Optional, Tuple

from .config import GameConfig
from .errors import IndexOutOfRange
from .game_state import Board, HistoryStore, Mark, place_mark
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinResult, evaluate, is_board_full

logger = logging.getLogger(__name__)


class GameEngine:
    """
    TicTacToe game with move history.

    Game flow:
    1. apply_move() places the current player's mark on an empty cell
    2. jump_to() moves to any earlier (or later) snapshot
    3. A move made from an earlier snapshot overwrites the later ones
    """

    def __init__(self, config: Optional[GameConfig] = None, strict: Optional[bool] = None):
        """
        Initialize the engine with an empty board.

        Args:
            config: Game configuration (defaults to GameConfig()).
            strict: Raise on illegal moves instead of ignoring them.
                Defaults to config.STRICT_MOVES.
        """
        self.config = config or GameConfig()
        self.strict = self.config.STRICT_MOVES if strict is None else strict
        self.validator = MoveValidator()
        self._history = HistoryStore()
        self._lock = threading.RLock()

    @classmethod
    def from_moves(cls, moves: Iterable[int], **kwargs) -> "GameEngine":
        """
        Build an engine by replaying cell indices in order.

        Illegal moves in the sequence are handled like any other move:
        ignored, or raised in strict mode.
        """
        engine = cls(**kwargs)
        for index in moves:
            engine.apply_move(index)
        return engine

    # ==================== QUERIES ====================

    @property
    def history(self) -> Tuple[Board, ...]:
        """All snapshots, index 0 is the empty board."""
        with self._lock:
            return tuple(self._history.snapshots)

    @property
    def current_step(self) -> int:
        return self._history.current_step

    @property
    def current_board(self) -> Board:
        with self._lock:
            return self._history.current

    @property
    def current_player(self) -> Mark:
        """Whose turn it is. X on even steps, O on odd steps."""
        return self._history.current_player

    @property
    def move_count(self) -> int:
        """Number of moves in history (not counting the empty board)."""
        return self._history.tip

    @property
    def win_result(self) -> WinResult:
        """Win check of the current snapshot, computed on every call."""
        return evaluate(self.current_board)

    @property
    def is_board_full(self) -> bool:
        """
        True when the current snapshot has no empty cells.

        This does not change win_result or status: a full board without
        a line still reads "Next player: ...".
        """
        return is_board_full(self.current_board)

    @property
    def status(self) -> str:
        """Status line for the current snapshot."""
        with self._lock:
            result = evaluate(self._history.current)
            if result.has_winner:
                return self.config.STATUS_WINNER.format(mark=result.winner)
            return self.config.STATUS_NEXT_PLAYER.format(mark=self.current_player)

    def history_label(self, step: int) -> str:
        """Label of a history entry."""
        if step == 0:
            return self.config.HISTORY_START_LABEL
        return self.config.HISTORY_MOVE_LABEL.format(step=step)

    def history_labels(self) -> List[str]:
        """Labels for every snapshot in history."""
        return [self.history_label(step) for step in range(len(self._history))]

    def history_entries(self) -> List[Tuple[int, str]]:
        """(step, label) for every snapshot in history."""
        return list(enumerate(self.history_labels()))

    def validate_move(self, index) -> ValidationResult:
        """Check a move against the current snapshot without applying it."""
        return self.validator.validate_move(self.current_board, index)

    def valid_moves(self) -> List[int]:
        return self.validator.get_valid_moves(self.current_board)

    # ==================== COMMANDS ====================

    def apply_move(self, index: int) -> bool:
        """
        Place the current player's mark at a cell.

        Later snapshots (left over from a jump back) are discarded.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was applied, False if it was ignored.

        Raises:
            IndexOutOfRange: if index is not a cell index.
            CellOccupied, GameAlreadyWon: in strict mode only.
        """
        with self._lock:
            board = self._history.current
            result = self.validator.validate_move(board, index)
            if not result.is_valid:
                logger.debug("Move %r rejected: %s", index, result.error_message)
                error = self.validator.to_error(board, index, result)
                if self.strict or isinstance(error, IndexOutOfRange):
                    raise error
                return False

            mark = self.current_player
            step = self._history.record(place_mark(board, index, mark))
            logger.debug("%s played cell %d (step %d)", mark, index, step)
            return True

    def jump_to(self, step: int):
        """
        Make an earlier (or later) snapshot current.

        History is kept as it is; the next move truncates it.

        Raises:
            IndexOutOfRange: if step is not in 0..len(history) - 1.
        """
        with self._lock:
            tip = self._history.tip
            if isinstance(step, bool) or not isinstance(step, int) or not 0 <= step <= tip:
                raise IndexOutOfRange("History step", step, tip)
            self._history.move_to(step)
            logger.debug("Jumped to step %d", step)

    def undo(self) -> bool:
        """Step back one snapshot. False at game start."""
        with self._lock:
            if self._history.current_step == 0:
                return False
            self.jump_to(self._history.current_step - 1)
            return True

    def redo(self) -> bool:
        """Step forward one snapshot. False at the last snapshot."""
        with self._lock:
            if self._history.current_step == self._history.tip:
                return False
            self.jump_to(self._history.current_step + 1)
            return True

    def reset(self):
        """Start a new game."""
        with self._lock:
            self._history.clear()
            logger.debug("Game reset")

    # ==================== OUTPUT ====================

    def format_board(self) -> str:
        """Text grid of the current snapshot, with row/col labels."""
        board = self.current_board
        empty = self.config.EMPTY_CELL_TEXT
        lines = ["    0   1   2", "  ┌───┬───┬───┐"]
        for row in range(3):
            cells = [board[row * 3 + col] for col in range(3)]
            text = "│".join(f" {cell if cell is not None else empty} " for cell in cells)
            lines.append(f"{row} │{text}│")
            if row < 2:
                lines.append("  ├───┼───┼───┤")
        lines.append("  └───┴───┴───┘")
        return "\n".join(lines)
