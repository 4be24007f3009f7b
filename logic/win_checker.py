"""
Win checker for TicTacToe.
Finds the first completed line on a board.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .game_state import Board, Mark

Line = Tuple[int, int, int]


# All possible winning lines, as cell indices.
# The order matters: the first completed line is reported.
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class WinResult:
    """
    Result of a win check.

    winner and line are both None when nobody has won.
    """
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def has_winner(self) -> bool:
        return self.winner is not None

    def __bool__(self) -> bool:
        return self.has_winner


NO_WINNER = WinResult()


def evaluate(board: Board) -> WinResult:
    """
    Check a board for a completed line.

    A full board without a line is reported as NO_WINNER, the same as a
    board that is still in progress. Use is_board_full() to tell them apart.

    Args:
        board: The board to check.

    Returns:
        WinResult with the winning mark and line, or NO_WINNER.
    """
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return WinResult(winner=board[a], line=line)
    return NO_WINNER


def is_board_full(board: Board) -> bool:
    """True if no empty cells are left."""
    return all(cell is not None for cell in board)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Board) -> WinResult:
        """Full win result for a board."""
        return evaluate(board)

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return evaluate(board).winner

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Args:
            board: The board to check.

        Returns:
            The winning line as three cell indices, or None.
        """
        return evaluate(board).line

    def is_board_full(self, board: Board) -> bool:
        return is_board_full(board)
