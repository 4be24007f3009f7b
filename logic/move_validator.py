"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .game_state import Board, CELL_COUNT, get_empty_cells
from .win_checker import evaluate
from .errors import (
    RejectReason,
    GameError,
    CellOccupied,
    GameAlreadyWon,
    IndexOutOfRange,
)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


VALID = ValidationResult(is_valid=True)


def is_cell_index(index) -> bool:
    """True for an int in 0-8. bool is not accepted."""
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < CELL_COUNT


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Cell index must be 0-8
    2. Game must not be won already
    3. Can only place on empty cells
    """

    def validate_move(self, board: Board, index) -> ValidationResult:
        """
        Validate a move on a board.

        Args:
            board: The current snapshot.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        if not is_cell_index(index):
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.OUT_OF_RANGE,
                error_message=f"Invalid cell {index!r}. Must be 0-{CELL_COUNT - 1}.",
            )

        result = evaluate(board)
        if result.has_winner:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.ALREADY_WON,
                error_message=f"Game is already won by {result.winner}",
            )

        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.CELL_OCCUPIED,
                error_message=f"Cell {index} is already occupied by {board[index]}",
            )

        return VALID

    def to_error(self, board: Board, index, result: ValidationResult) -> GameError:
        """Build the exception matching a failed validation."""
        if result.reason == RejectReason.OUT_OF_RANGE:
            return IndexOutOfRange("Cell index", index, CELL_COUNT - 1)
        if result.reason == RejectReason.ALREADY_WON:
            return GameAlreadyWon(evaluate(board).winner)
        return CellOccupied(index)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on a board.

        Args:
            board: The current snapshot.

        Returns:
            List of playable cell indices, empty once the game is won.
        """
        if evaluate(board).has_winner:
            return []
        return get_empty_cells(board)
