"""
Game state for TicTacToe.
Holds the marks, board helpers and the history of board snapshots.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Mark(Enum):
    """The two marks in the game. X always moves first."""
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# A board is 9 cells, None means empty
Board = Tuple[Optional[Mark], ...]

EMPTY_BOARD: Board = (None,) * CELL_COUNT


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to (row, col)."""
    return index // BOARD_SIZE, index % BOARD_SIZE


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index (0-8)."""
    return row * BOARD_SIZE + col


def place_mark(board: Board, index: int, mark: Mark) -> Board:
    """
    Build a new board with a mark placed.

    The input board is never modified, a full copy is made.

    Args:
        board: The board to copy.
        index: Cell index (0-8).
        mark: The mark to place.

    Returns:
        The new board.
    """
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def get_empty_cells(board: Board) -> List[int]:
    """Get the indices of all empty cells."""
    return [i for i, cell in enumerate(board) if cell is None]


def count_marks(board: Board) -> Tuple[int, int]:
    """Count (X, O) marks on the board."""
    x_count = sum(1 for cell in board if cell == Mark.X)
    o_count = sum(1 for cell in board if cell == Mark.O)
    return x_count, o_count


def is_legal_board(board: Board) -> bool:
    """
    Check if a board could come from valid play.

    X goes first, so the X count equals the O count or is one more.
    """
    if len(board) != CELL_COUNT:
        return False
    x_count, o_count = count_marks(board)
    return x_count == o_count or x_count == o_count + 1


def player_for_step(step: int) -> Mark:
    """Whose turn it is at a history step. Even steps are X."""
    return Mark.X if step % 2 == 0 else Mark.O


@dataclass
class HistoryStore:
    """
    Linear history of board snapshots.

    Tracks:
    - The snapshots, index 0 is always the empty board
    - The current step (which snapshot is active)

    Moving to an earlier step keeps the later snapshots until the next
    move is recorded, which overwrites them.
    """

    snapshots: List[Board] = field(default_factory=lambda: [EMPTY_BOARD])
    current_step: int = 0

    def __len__(self) -> int:
        return len(self.snapshots)

    @property
    def current(self) -> Board:
        """The snapshot at the current step."""
        return self.snapshots[self.current_step]

    @property
    def tip(self) -> int:
        """Index of the last snapshot."""
        return len(self.snapshots) - 1

    @property
    def current_player(self) -> Mark:
        """Whose turn it is, derived from the current step."""
        return player_for_step(self.current_step)

    def record(self, board: Board) -> int:
        """
        Record a new snapshot after the current step.

        Everything after the current step is discarded first.

        Args:
            board: The new snapshot.

        Returns:
            The new current step.
        """
        del self.snapshots[self.current_step + 1:]
        self.snapshots.append(board)
        self.current_step = self.tip
        return self.current_step

    def move_to(self, step: int):
        """Point at another snapshot. Bounds are checked by the caller."""
        self.current_step = step

    def clear(self):
        """Back to a single empty board."""
        self.snapshots = [EMPTY_BOARD]
        self.current_step = 0
